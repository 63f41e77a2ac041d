# tests/test_init_db.py
from sqlalchemy import inspect, select

from bookcatalog.db.init_db import SEED_AUTHORS, create_tables, init_db
from bookcatalog.db.session import create_db_engine
from bookcatalog.models import Author


def test_init_db_seeds_empty_table(db_session):
    assert init_db(db_session) is True

    names = db_session.execute(select(Author.name)).scalars().all()
    assert sorted(names) == sorted(["Jess Kidd", "Martha McPhee", "Megan Miranda", "Helen Phillips", "Karen Kingsbury"])


def test_init_db_is_idempotent(db_session):
    init_db(db_session)
    first = db_session.execute(select(Author.id, Author.name)).all()

    assert init_db(db_session) is False

    assert db_session.execute(select(Author.id, Author.name)).all() == first
    assert len(first) == len(SEED_AUTHORS)


def test_init_db_skips_non_empty_table(db_session):
    db_session.add(Author(name="Already Here"))
    db_session.commit()

    assert init_db(db_session) is False
    assert db_session.execute(select(Author.name)).scalars().all() == ["Already Here"]


def test_create_tables(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'catalog.db'}")

    create_tables(engine)

    tables = set(inspect(engine).get_table_names())
    assert {"Books", "Authors", "Reviews", "Promotions", "Categories", "BookAuthor", "BookCategory"} <= tables
    engine.dispose()
