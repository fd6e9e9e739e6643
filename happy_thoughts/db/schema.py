# happy_thoughts/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    DateTime, CheckConstraint
)

metadata = MetaData()

thoughts = Table(
    "thoughts",
    metadata,
    # insertion order, only used to break created_at ties
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String(32), nullable=False, unique=True),
    Column("message", String(140), nullable=False),
    Column("hearts", Integer, nullable=False, default=0),
    Column("created_at", DateTime, nullable=False, index=True),
    CheckConstraint("hearts >= 0", name="ck_thoughts_hearts_nonneg"),
)
