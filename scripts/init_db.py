# scripts/init_db.py

import argparse

from happy_thoughts.config import get_settings
from happy_thoughts.db.store import ThoughtStore


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the thoughts table.")
    parser.add_argument("--drop", action="store_true", help="drop existing data first")
    args = parser.parse_args(argv)

    store = ThoughtStore.from_url(get_settings().database_url)
    store.create_schema(drop=args.drop)
    print("DB schema created.")


if __name__ == "__main__":
    main()
