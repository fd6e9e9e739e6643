# happy_thoughts/__init__.py
"""
Happy Thoughts API package.

This lets us run:
    uvicorn happy_thoughts:app --reload
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
