"""
Schema creation and first-run seed data for the catalog database.
"""

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from bookcatalog.db.session import Base
from bookcatalog.models import Author

logger = logging.getLogger(__name__)

SEED_AUTHORS: List[str] = [
    "Jess Kidd",
    "Martha McPhee",
    "Megan Miranda",
    "Helen Phillips",
    "Karen Kingsbury",
]


def create_tables(engine: Engine) -> None:
    """Creates every catalog table that does not exist yet."""
    Base.metadata.create_all(bind=engine)


def init_db(db: Session) -> bool:
    """
    Seeds the Authors table if, and only if, it is empty.

    Safe to call on every startup.

    Args:
        db (Session): Active SQLAlchemy session.

    Returns:
        bool: True if the seed authors were inserted, False if the table already had rows.
    """
    author_count = db.execute(select(func.count()).select_from(Author)).scalar_one()
    if author_count:
        logger.info(f"Authors table already has {author_count} rows, skipping seed.")
        return False

    db.add_all([Author(name=name) for name in SEED_AUTHORS])
    db.commit()
    logger.info(f"Seeded {len(SEED_AUTHORS)} authors.")
    return True
