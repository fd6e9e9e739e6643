# happy_thoughts/api/deps.py

from fastapi import Request

from happy_thoughts.db.store import ThoughtStore


def get_store(request: Request) -> ThoughtStore:
    return request.app.state.store
