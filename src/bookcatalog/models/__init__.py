# Importing every model registers its table on Base.metadata.
from .associations import book_author, book_category
from .author import Author
from .book import Book
from .category import Category
from .promotion import Promotion
from .review import Review

__all__ = [
    "Author",
    "Book",
    "Category",
    "Promotion",
    "Review",
    "book_author",
    "book_category",
]
