# happy_thoughts/db/store.py
"""
Persistence for Thought records.

A ``ThoughtStore`` owns the SQLAlchemy engine and is built once at startup,
then handed to the application (see ``happy_thoughts.main.create_app``).
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.engine import Engine, RowMapping

from happy_thoughts.db.engine import get_engine
from happy_thoughts.db.schema import metadata, thoughts

logger = logging.getLogger(__name__)

RECENT_LIMIT = 20

_COLUMNS = (
    thoughts.c.id,
    thoughts.c.message,
    thoughts.c.hearts,
    thoughts.c.created_at,
)


def _utcnow() -> datetime:
    # stored naive, read back as UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ThoughtStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str) -> "ThoughtStore":
        return cls(get_engine(url))

    def create_schema(self, drop: bool = False) -> None:
        if drop:
            metadata.drop_all(self.engine)
        metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def list_recent(self, limit: int = RECENT_LIMIT) -> List[RowMapping]:
        """
        Return the ``limit`` newest thoughts, newest first.
        """
        stmt = (
            select(*_COLUMNS)
            .order_by(thoughts.c.created_at.desc(), thoughts.c.seq.desc())
            .limit(limit)
        )

        with self.engine.connect() as conn:
            return conn.execute(stmt).mappings().all()

    def get(self, thought_id: str) -> Optional[RowMapping]:
        stmt = select(*_COLUMNS).where(thoughts.c.id == thought_id)

        with self.engine.connect() as conn:
            return conn.execute(stmt).mappings().first()

    def insert(self, message: str) -> RowMapping:
        """
        Persist a new thought with zero hearts; the store assigns id and created_at.
        """
        thought_id = uuid.uuid4().hex

        with self.engine.begin() as conn:
            conn.execute(
                thoughts.insert().values(
                    id=thought_id,
                    message=message,
                    hearts=0,
                    created_at=_utcnow(),
                )
            )
            row = conn.execute(
                select(*_COLUMNS).where(thoughts.c.id == thought_id)
            ).mappings().one()

        logger.info("Created thought %s", thought_id)
        return row

    def adjust_hearts(self, thought_id: str, delta: int) -> Optional[RowMapping]:
        """
        Atomically apply ``hearts += delta`` and return the updated row.

        Returns None when no thought has that id. The hearts floor is the
        table's CHECK constraint, so driving hearts below zero raises
        ``sqlalchemy.exc.IntegrityError`` and leaves the row untouched.
        """
        stmt = (
            update(thoughts)
            .where(thoughts.c.id == thought_id)
            .values(hearts=thoughts.c.hearts + delta)
        )

        with self.engine.begin() as conn:
            result = conn.execute(stmt)
            if result.rowcount == 0:
                return None
            row = conn.execute(
                select(*_COLUMNS).where(thoughts.c.id == thought_id)
            ).mappings().one()

        logger.debug("Thought %s hearts now %s", thought_id, row["hearts"])
        return row
