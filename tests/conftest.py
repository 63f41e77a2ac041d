# tests/conftest.py
import datetime
from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool

from bookcatalog.db.session import Base, create_db_engine, create_session_factory
# Import all models so they are registered with Base
from bookcatalog import models  # noqa: F401
from bookcatalog.crud import (
    AuthorRepository,
    BookRepository,
    CategoryRepository,
    PromotionRepository,
    ReviewRepository,
)
from bookcatalog.db.init_db import init_db
from bookcatalog.schemas import AuthorSchema, BookSchema

# --- Test Database Setup ---
# In-memory SQLite; StaticPool keeps a single connection so every
# per-call session of the repositories sees the same database.
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def db_engine():
    engine = create_db_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory bound to the test engine."""
    return create_session_factory(db_engine)


@pytest.fixture
def db_session(db_session_factory):
    """A plain session for model-level tests."""
    session = db_session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


# --- Repositories ---
@pytest.fixture
def author_repo(db_session_factory):
    return AuthorRepository(db_session_factory)


@pytest.fixture
def book_repo(db_session_factory):
    return BookRepository(db_session_factory)


@pytest.fixture
def review_repo(db_session_factory):
    return ReviewRepository(db_session_factory)


@pytest.fixture
def promotion_repo(db_session_factory):
    return PromotionRepository(db_session_factory)


@pytest.fixture
def category_repo(db_session_factory):
    return CategoryRepository(db_session_factory)


# --- Data ---
@pytest.fixture
def seeded_authors(db_session_factory, author_repo):
    """The five seed authors, ordered by id (1..5)."""
    session = db_session_factory()
    try:
        init_db(session)
    finally:
        session.close()
    return author_repo.get_all_authors()


@pytest.fixture
def make_book(book_repo):
    def _make_book(title="Test Book", authors=(), **fields):
        fields.setdefault("description", f"About {title}")
        fields.setdefault("published_on", datetime.date(2020, 5, 17))
        fields.setdefault("price", Decimal("12.50"))
        record = BookSchema(title=title, authors=list(authors), **fields)
        return book_repo.add_book(record)
    return _make_book


@pytest.fixture
def author_ref():
    """Builds an author record carrying only the id that matters for linking."""
    def _author_ref(author_id: int) -> AuthorSchema:
        return AuthorSchema(id=author_id, name=f"author-{author_id}")
    return _author_ref
