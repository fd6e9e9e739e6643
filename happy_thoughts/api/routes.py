# happy_thoughts/api/routes.py

from typing import List

from fastapi import APIRouter

from happy_thoughts.models.thoughts import RouteOut

router = APIRouter(tags=["meta"])

# Keep in step with the routers mounted in happy_thoughts.main.
ENDPOINTS: List[RouteOut] = [
    RouteOut(path="/", methods=["GET"]),
    RouteOut(path="/thoughts", methods=["GET", "POST"]),
    RouteOut(path="/thoughts/{id}/like", methods=["PUT"]),
]


@router.get("/", response_model=List[RouteOut])
def describe_api() -> List[RouteOut]:
    """
    List the available routes and their methods.
    """
    return ENDPOINTS
