#!/usr/bin/env python3
"""Bootstrap the CareerPath database with fixture data.

Creates the tables if needed and loads employees, roles and career history
into whichever of them are still empty. Safe to run repeatedly. Run from the
repository root:

    python3 scripts/seed.py [--database-url URL] [--data-dir DIR] [--verbose]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from careerpath.core.config import Settings  # noqa: E402
from careerpath.core.logging import LOG_FORMAT  # noqa: E402
from careerpath.db.seed import seed_database  # noqa: E402
from careerpath.db.session import Database  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Populate empty CareerPath tables with seed data",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async database URL (default: DATABASE_URL setting)",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory containing employees.json, roles.json and career_history.json",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def seed(args: argparse.Namespace) -> dict[str, int]:
    settings = Settings()
    if args.database_url:
        settings.DATABASE_URL = args.database_url
    settings.CREATE_TABLES_ON_STARTUP = True

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)

    database = Database()
    await database.initialize(settings)
    if not database.initialized:
        raise RuntimeError("Database could not be initialized, check DATABASE_URL")

    try:
        async with database.session() as session:
            added = await seed_database(session, args.data_dir or settings.SEED_DATA_DIR or None)
    finally:
        await database.close()

    if not any(added.values()):
        logger.info("All tables already populated, nothing to do.")
    return added


def main() -> None:
    args = parse_args()
    asyncio.run(seed(args))


if __name__ == "__main__":
    main()
