"""
SQLAlchemy engine and session management for the bookstore catalog.

Provides the declarative base for the ORM models, engine/session factory
builders, the in-process `SessionLocal` factory bound to the configured
DATABASE_URL, a design-time factory built from appsettings.json, and
`session_scope`, the unit-of-work wrapper every repository call runs in.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from bookcatalog.core.config import load_connection_string, settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """
    Builds an engine for the given URL.

    SQLite engines get `check_same_thread=False` and enforce foreign keys
    on every new connection.
    """
    kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.SQL_ECHO)
    if database_url.startswith("sqlite"):
        connect_args = kwargs.setdefault("connect_args", {})
        connect_args.setdefault("check_same_thread", False)

    engine = create_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(bind: Union[str, Engine]) -> sessionmaker:
    """
    Returns a session factory bound to an engine or a connection string.

    Sessions keep loaded attributes after commit so records can be built
    from rows once the unit of work has finished.
    """
    engine = create_db_engine(bind) if isinstance(bind, str) else bind
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def session_factory_from_appsettings(path: Union[str, Path, None] = None) -> sessionmaker:
    """
    Design-time factory: reads ConnectionStrings.DefaultConnection from the
    JSON settings file and builds a session factory for it.
    """
    return create_session_factory(load_connection_string(path))


engine = create_db_engine(settings.DATABASE_URL)
SessionLocal = create_session_factory(engine)


@contextmanager
def session_scope(session_factory: sessionmaker = SessionLocal) -> Iterator[Session]:
    """
    Runs one unit of work.

    Yields:
        Session: A fresh session, committed if the block succeeds.

    Ensures:
        The session is rolled back on error and always closed.
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.exception(f"Unit of work failed, rolling back: {e}")
        db.rollback()
        raise
    finally:
        db.close()

