"""
Creates the catalog tables and seeds the Authors table on first run.

Usage:
    python scripts/init_db.py                 # uses DATABASE_URL
    python scripts/init_db.py --appsettings   # uses ConnectionStrings.DefaultConnection from appsettings.json
"""

import argparse
import logging

from bookcatalog.core.config import settings
from bookcatalog.db.init_db import create_tables, init_db
from bookcatalog.db.session import SessionLocal, session_factory_from_appsettings, session_scope

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--appsettings",
        nargs="?",
        const=settings.APPSETTINGS_PATH,
        default=None,
        help="Read the connection string from this JSON settings file instead of DATABASE_URL.",
    )
    args = parser.parse_args()

    factory = session_factory_from_appsettings(args.appsettings) if args.appsettings else SessionLocal
    logger.info(f"Initialising database at {factory.kw['bind'].url!r}")
    create_tables(factory.kw["bind"])
    with session_scope(factory) as db:
        seeded = init_db(db)
    logger.info("Seed authors inserted." if seeded else "Database already initialised.")


if __name__ == "__main__":
    main()
