# happy_thoughts/config.py
"""
Environment-driven settings.

Values come from the process environment, with a ``.env`` file in the
working directory loaded first when present.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from happy_thoughts.db.engine import DEFAULT_DB_URL

load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Happy Thoughts API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "0.1.0"))
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))
    database_url: str = field(default_factory=lambda: _env("DATABASE_URL", DEFAULT_DB_URL))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    return Settings()
