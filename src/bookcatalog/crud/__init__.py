from .crud_author import AuthorRepository
from .crud_book import BookRepository
from .crud_category import CategoryRepository
from .crud_promotion import PromotionRepository
from .crud_review import ReviewRepository

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "CategoryRepository",
    "PromotionRepository",
    "ReviewRepository",
]
