# happy_thoughts/main.py

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from happy_thoughts.api.routes import router as routes_router
from happy_thoughts.api.thoughts import router as thoughts_router
from happy_thoughts.config import Settings, get_settings
from happy_thoughts.db.store import ThoughtStore
from happy_thoughts.errors import (
    ApiError,
    api_error_handler,
    request_validation_handler,
    unhandled_error_handler,
)
from happy_thoughts.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[ThoughtStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API around an explicit store.

    When no store is given one is built from ``settings.database_url``.
    The schema is created on startup if it does not exist yet.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = ThoughtStore.from_url(settings.database_url)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(routes_router)
    app.include_router(thoughts_router)

    @app.on_event("startup")
    def startup() -> None:
        url = store.engine.url.render_as_string(hide_password=True)
        logger.info("Using database %s", url)
        store.create_schema()

    @app.on_event("shutdown")
    def shutdown() -> None:
        store.dispose()

    return app


app = create_app()
