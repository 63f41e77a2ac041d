"""
Repository for Book records.

Besides plain lookups, a book can be fetched together with any mix of its
associations (authors, reviews, categories, promotions). `get_book` takes
the set of associations to eager-load; the named `get_book_with_*`
methods are the fixed shapes the catalog screens use.
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..models.author import Author
from ..models.book import Book
from ..models.category import Category
from ..schemas.catalog import BookSchema
from .base import BaseRepository

logger = logging.getLogger(__name__)

BOOK_RELATIONS = {
    "authors": Book.authors,
    "reviews": Book.reviews,
    "categories": Book.categories,
    "promotions": Book.promotions,
}

# Columns overwritten by edit_book; publisher is left as stored.
EDITABLE_FIELDS = ["title", "description", "published_on", "price"]


def _eager_options(include: Iterable[str]) -> tuple:
    unknown = set(include) - BOOK_RELATIONS.keys()
    if unknown:
        raise ValueError(f"Unknown book relations: {', '.join(sorted(unknown))}")
    return tuple(selectinload(BOOK_RELATIONS[name]) for name in include)


def _resolve(db: Session, model, ids: List[int]) -> list:
    """Loads the rows whose ids are in `ids`; ids not in storage are dropped."""
    if not ids:
        return []
    return list(db.execute(select(model).where(model.id.in_(ids)).order_by(model.id)).scalars().all())


class BookRepository(BaseRepository):
    model = Book
    schema = BookSchema

    def get_all_books(self) -> List[BookSchema]:
        return self._list()

    def get_all_books_with_authors(self) -> List[BookSchema]:
        return self._list(options=_eager_options(["authors"]))

    def get_book(self, book_id: int, include: Iterable[str] = ()) -> Optional[BookSchema]:
        """
        Retrieves a book by primary key.

        Args:
            book_id (int): Id of the book.
            include (Iterable[str]): Associations to load, any of
                "authors", "reviews", "categories", "promotions".

        Returns:
            Optional[BookSchema]: The book, or None if it does not exist.
                Associations not named in `include` are left as None.

        Raises:
            ValueError: If `include` names an unknown association.
        """
        return self._get_by_id(book_id, options=_eager_options(include))

    def get_books_by_name(self, name: str) -> List[BookSchema]:
        """Books whose title contains `name`, ignoring case."""
        return self._search(Book.title, name)

    def get_book_with_promotion(self, book_id: int) -> Optional[BookSchema]:
        return self.get_book(book_id, include=("promotions",))

    def get_book_with_authors(self, book_id: int) -> Optional[BookSchema]:
        return self.get_book(book_id, include=("authors",))

    def get_book_with_category_and_authors(self, book_id: int) -> Optional[BookSchema]:
        return self.get_book(book_id, include=("categories", "authors"))

    def get_book_with_authors_and_review(self, book_id: int) -> Optional[BookSchema]:
        return self.get_book(book_id, include=("authors", "reviews"))

    def get_book_with_authors_and_review_and_category(self, book_id: int) -> Optional[BookSchema]:
        return self.get_book(book_id, include=("categories", "authors", "reviews"))

    def add_book(self, book: BookSchema) -> BookSchema:
        """
        Inserts a book, linking it to the stored authors (and categories)
        whose ids appear on the record. Unknown ids are silently dropped.

        Returns:
            BookSchema: The stored book with its authors and categories loaded.
        """
        category_ids = [c.id for c in book.categories or [] if c.id is not None]
        with self._session() as db:
            row = self._insert(db, book)
            row.authors = _resolve(db, Author, book.author_ids())
            row.categories = _resolve(db, Category, category_ids)
            db.flush()
            logger.info(f"Book {row.id} added with authors {[a.id for a in row.authors]}.")
            return BookSchema.from_row(row)

    def edit_book(self, book: BookSchema) -> bool:
        """
        Overwrites title, description, publication date and price, then
        replaces the book's authors with the stored authors whose ids appear
        in `book.authors`. Ids left out are unlinked.

        Returns:
            bool: True if the book existed and was updated, False otherwise.
        """
        with self._session() as db:
            stmt = select(Book).options(selectinload(Book.authors)).where(Book.id == book.id)
            current = db.execute(stmt).scalars().first()
            if current is None:
                logger.warning(f"Attempted edit of non-existent Book ID: {book.id}")
                return False

            for name in EDITABLE_FIELDS:
                setattr(current, name, getattr(book, name))
            current.authors = _resolve(db, Author, book.author_ids())
            logger.info(f"Book {book.id} updated, authors now {[a.id for a in current.authors]}.")
            return True

    def delete_book(self, book: BookSchema) -> bool:
        return self._delete(book.id)
