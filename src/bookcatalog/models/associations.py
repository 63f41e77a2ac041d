"""
Join tables for the many-to-many relations of Book.

Neither table has an identity or attributes of its own; rows are written
and removed by SQLAlchemy when the `Book.authors` / `Book.categories`
collections change.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from bookcatalog.db.session import Base

book_author = Table(
    "BookAuthor",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("Books.id", ondelete="CASCADE"), primary_key=True),
    Column("author_id", Integer, ForeignKey("Authors.id", ondelete="CASCADE"), primary_key=True),
)

book_category = Table(
    "BookCategory",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("Books.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("Categories.id", ondelete="CASCADE"), primary_key=True),
)
