# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
or, serving on $PORT (default 8080):
    python app.py
"""

import logging

import uvicorn

from happy_thoughts.config import get_settings
from happy_thoughts.main import app  # re-export FastAPI instance

logger = logging.getLogger("app")


def main():
    settings = get_settings()
    logger.info("Server running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
