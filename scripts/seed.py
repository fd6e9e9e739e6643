# scripts/seed.py
"""
Insert a handful of sample thoughts, going through the same validation
as the API.
"""

import logging

from happy_thoughts.config import get_settings
from happy_thoughts.db.store import ThoughtStore
from happy_thoughts.logging_config import setup_logging
from happy_thoughts.validation import validate_message

logger = logging.getLogger(__name__)

SAMPLE_THOUGHTS = [
    "Coffee tastes better on a Monday morning.",
    "Finally fixed that flaky test!",
    "The sunset over the harbour tonight was unreal.",
    "Grateful for friends who bring snacks.",
    "Hi!",  # too short, skipped
]


def seed(store: ThoughtStore, messages=SAMPLE_THOUGHTS) -> int:
    created = 0
    for message in messages:
        issues = validate_message(message)
        if issues:
            logger.warning("Skipping %r: %s", message, issues[0].message)
            continue
        store.insert(message)
        created += 1
    return created


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    store = ThoughtStore.from_url(settings.database_url)
    store.create_schema()
    created = seed(store)
    logger.info("Seeded %s thoughts", created)


if __name__ == "__main__":
    main()
