# happy_thoughts/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DEFAULT_DB_URL = "sqlite:///thoughts.sqlite"  # file in project root


def get_engine(url: str = DEFAULT_DB_URL) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    if url.startswith("sqlite"):
        # handlers run in a threadpool, the pool hands connections across threads
        return create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
        )
    return create_engine(url, future=True, pool_pre_ping=True)
