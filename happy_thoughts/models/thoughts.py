# happy_thoughts/models/thoughts.py

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ThoughtOut(BaseModel):
    id: str
    message: str
    hearts: int
    created_at: datetime = Field(serialization_alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class ThoughtIn(BaseModel):
    # presence and length are checked by happy_thoughts.validation
    message: Optional[str] = None


class RouteOut(BaseModel):
    path: str
    methods: List[str]
