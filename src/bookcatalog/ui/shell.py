"""
Lookup/delete logic behind the catalog window.

Each handler takes the raw text of the id field and returns the text to
show in the output area. Input that is not an integer never reaches
storage.
"""

import re
from typing import Optional

from bookcatalog.crud.crud_book import BookRepository
from bookcatalog.schemas.catalog import BookSchema

INVALID_ID = "Invalid ID."
BOOK_NOT_FOUND = "Book not found."

# Ids are 32-bit signed integers; ASCII digits only.
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_ID = -2**31
MAX_ID = 2**31 - 1


def parse_book_id(text: Optional[str]) -> Optional[int]:
    """Returns the id typed in `text`, or None if it is not a 32-bit integer."""
    stripped = (text or "").strip()
    if not _ID_PATTERN.fullmatch(stripped):
        return None
    value = int(stripped)
    if not MIN_ID <= value <= MAX_ID:
        return None
    return value


def format_book_details(book: BookSchema) -> str:
    lines = [
        f"ID: {book.id}",
        f"Title: {book.title}",
        f"Description: {book.description or ''}",
        f"Published On: {book.published_on or ''}",
        f"Price: {book.price}",
        f"Publisher: {book.publisher or ''}",
        "Authors:",
    ]
    lines.extend(f"  {author.name}" for author in book.authors or [])
    return "\n".join(lines) + "\n"


def find_book(repo: BookRepository, text: Optional[str]) -> str:
    book_id = parse_book_id(text)
    if book_id is None:
        return INVALID_ID
    book = repo.get_book_with_authors(book_id)
    if book is None:
        return BOOK_NOT_FOUND
    return format_book_details(book)


def delete_book(repo: BookRepository, text: Optional[str]) -> str:
    book_id = parse_book_id(text)
    if book_id is None:
        return INVALID_ID
    book = repo.get_book(book_id)
    if book is None:
        return BOOK_NOT_FOUND
    repo.delete_book(book)
    return f"Book with ID {book_id} deleted."
