# src/redshare/scripts/seed_demo.py
"""Create the schema and load the demo data set into the configured database.

Useful with a file-backed ``DATABASE_URL``; the default in-memory database is
gone as soon as the script exits.
"""
from __future__ import annotations

import argparse
import logging

from redshare.core.settings import settings
from redshare.db.session import Store
from redshare.services.seed import seed_demo_data


def main() -> None:
    parser = argparse.ArgumentParser(description="Load RedShare demo users and galleries")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL to seed (defaults to DATABASE_URL)",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop all tables before seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())
    store = Store(args.database_url or settings.database_url, echo=settings.sql_debug)
    try:
        if args.reset:
            store.drop_tables()
        store.create_tables()
        with store.session() as db:
            seeded = seed_demo_data(db)
    finally:
        store.dispose()

    print("Demo data loaded" if seeded else "Database already populated; nothing to do")


if __name__ == "__main__":
    main()
