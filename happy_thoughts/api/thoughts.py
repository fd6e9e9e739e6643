# happy_thoughts/api/thoughts.py

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.exc import SQLAlchemyError

from happy_thoughts.api.deps import get_store
from happy_thoughts.db.store import ThoughtStore
from happy_thoughts.errors import ApiError, not_found, store_error
from happy_thoughts.models.thoughts import ThoughtIn, ThoughtOut
from happy_thoughts.validation import issues_by_field, validate_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/thoughts", tags=["thoughts"])

LIKE_DELTAS = {"add": 1, "remove": -1}


@router.get("", response_model=List[ThoughtOut])
def list_thoughts(store: ThoughtStore = Depends(get_store)) -> List[ThoughtOut]:
    """
    Return the 20 most recent thoughts, newest first.
    """
    try:
        rows = store.list_recent()
    except SQLAlchemyError as e:
        logger.exception("Failed to fetch thoughts")
        raise store_error("Failed to fetch thoughts", e)

    return [ThoughtOut.model_validate(dict(row)) for row in rows]


@router.post("", response_model=ThoughtOut, status_code=201)
def create_thought(
    payload: Optional[ThoughtIn] = None,
    store: ThoughtStore = Depends(get_store),
) -> ThoughtOut:
    message = payload.message if payload is not None else None

    issues = validate_message(message)
    if issues:
        logger.info("Rejected thought: %s", ", ".join(i.kind for i in issues))
        raise ApiError(
            400,
            {"message": "Could not save thought", "errors": issues_by_field(issues)},
        )

    try:
        row = store.insert(message)
    except SQLAlchemyError as e:
        logger.exception("Failed to save thought")
        raise store_error("Failed to save thought", e)

    return ThoughtOut.model_validate(dict(row))


@router.put("/{thought_id}/like", response_model=ThoughtOut)
def like_thought(
    thought_id: str,
    payload: Any = Body(default=None),
    store: ThoughtStore = Depends(get_store),
) -> ThoughtOut:
    """
    Add or remove one heart. The counter is updated in place by the database.
    """
    # body is read raw, anything but add/remove is an invalid action
    action = payload.get("action") if isinstance(payload, dict) else None
    delta = LIKE_DELTAS.get(action) if isinstance(action, str) else None
    if delta is None:
        raise ApiError(400, {"error": "Invalid action. Use 'add' or 'remove'."})

    try:
        row = store.adjust_hearts(thought_id, delta)
    except SQLAlchemyError as e:
        logger.warning("Failed to %s like on thought %s: %s", action, thought_id, e)
        raise store_error("Failed to update like", e)

    if row is None:
        raise not_found("Thought not found")

    return ThoughtOut.model_validate(dict(row))
