from .catalog import (
    AuthorSchema,
    BookSchema,
    CategorySchema,
    EntitySchema,
    PromotionSchema,
    ReviewSchema,
)

__all__ = [
    "AuthorSchema",
    "BookSchema",
    "CategorySchema",
    "EntitySchema",
    "PromotionSchema",
    "ReviewSchema",
]
