# happy_thoughts/errors.py

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    An error that maps straight onto an HTTP status and JSON body.
    """

    def __init__(self, status_code: int, body: Dict[str, Any]):
        super().__init__(body.get("error") or body.get("message"))
        self.status_code = status_code
        self.body = body


def not_found(error: str) -> ApiError:
    return ApiError(404, {"error": error})


def store_error(error: str, exc: Exception) -> ApiError:
    return ApiError(500, {"error": error, "details": str(exc)})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
