"""
Pydantic records for the catalog entities.

These are what repositories accept and return. Association fields are
populated on demand: `None` means the association was not requested,
an empty list means it was loaded and is empty. Records nested inside a
loaded association are shallow (their own associations stay `None`).
"""

import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import inspect


class EntitySchema(BaseModel):
    """
    Base record: mutable fields, equality by id.

    Two records of the same type are equal when they share a non-null id;
    records without an id are only equal to themselves.
    """
    model_config = ConfigDict(from_attributes=True)

    # association name -> record class name
    RELATIONS: ClassVar[Dict[str, str]] = {}

    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Any, nested: bool = True) -> "EntitySchema":
        """
        Builds a record from an ORM row without triggering lazy loads.

        Args:
            row: A persistent or freshly flushed ORM instance.
            nested (bool): Copy associations already loaded on the row.

        Returns:
            EntitySchema: The record, with unloaded associations left as None.
        """
        unloaded = inspect(row).unloaded
        data = {
            name: getattr(row, name)
            for name in cls.model_fields
            if name not in cls.RELATIONS
        }
        if nested:
            for name, schema_name in cls.RELATIONS.items():
                if name in unloaded:
                    continue
                schema = _SCHEMAS[schema_name]
                data[name] = [schema.from_row(item, nested=False) for item in getattr(row, name)]
        return cls(**data)

    def is_loaded(self, name: str) -> bool:
        if name not in self.RELATIONS:
            raise ValueError(f"{type(self).__name__} has no association '{name}'")
        return getattr(self, name) is not None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((type(self).__name__, self.id))


class AuthorSchema(EntitySchema):
    RELATIONS: ClassVar[Dict[str, str]] = {"books": "BookSchema"}

    name: str
    books: Optional[List["BookSchema"]] = None


class ReviewSchema(EntitySchema):
    """
    A reader review of a book.

    Attributes:
        stars (int): Rating stored as a byte (0-255); 1-5 is the intended scale.
        book_id (int): Reviewed book; must reference an existing Book.
    """
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    comment: Optional[str] = None
    stars: int = Field(0, ge=0, le=255)
    book_id: int


class PromotionSchema(EntitySchema):
    name: Optional[str] = None
    percent: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    book_id: int

    def __str__(self) -> str:
        discount = self.percent if self.percent is not None else self.amount
        return f"Name - {self.name}\nDiscount - {discount}"


class CategorySchema(EntitySchema):
    RELATIONS: ClassVar[Dict[str, str]] = {"books": "BookSchema"}

    name: Optional[str] = None
    description: Optional[str] = None
    books: Optional[List["BookSchema"]] = None


class BookSchema(EntitySchema):
    """
    A catalog book.

    Attributes:
        title (str): Title (required).
        description (Optional[str]): Free-text description.
        published_on (Optional[date]): Publication date.
        price (Decimal): Price.
        publisher (Optional[str]): Publisher, optional.
        authors, reviews, categories, promotions: Associations, None until loaded.
    """
    RELATIONS: ClassVar[Dict[str, str]] = {
        "authors": "AuthorSchema",
        "reviews": "ReviewSchema",
        "categories": "CategorySchema",
        "promotions": "PromotionSchema",
    }

    title: str
    description: Optional[str] = None
    published_on: Optional[datetime.date] = None
    price: Decimal = Decimal("0")
    publisher: Optional[str] = None

    authors: Optional[List[AuthorSchema]] = None
    reviews: Optional[List[ReviewSchema]] = None
    categories: Optional[List[CategorySchema]] = None
    promotions: Optional[List[PromotionSchema]] = None

    def author_ids(self) -> List[int]:
        """Ids of the authors on this record, ignoring unsaved ones."""
        return [author.id for author in self.authors or [] if author.id is not None]


_SCHEMAS = {
    schema.__name__: schema
    for schema in (AuthorSchema, BookSchema, CategorySchema, PromotionSchema, ReviewSchema)
}

AuthorSchema.model_rebuild()
CategorySchema.model_rebuild()
