"""
ORM model for the Book entity of the bookstore catalog.
Defines the book columns and its relations to authors, reviews, categories
and promotions.
"""

from sqlalchemy import Column, Date, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from bookcatalog.db.session import Base
from bookcatalog.models.associations import book_author, book_category


class Book(Base):
    """
    A book in the catalog.

    Attributes:
        id (int): Primary key, assigned by storage.
        title (str): Title of the book (required).
        description (str): Free-text description.
        published_on (date): Publication date.
        price (Decimal): Price, two decimal places.
        publisher (str): Publisher name, optional.
        authors (List[Author]): Authors linked through the BookAuthor table.
        reviews (List[Review]): Reviews of this book.
        categories (List[Category]): Categories linked through the BookCategory table.
        promotions (List[Promotion]): Promotions running on this book.
    """
    __tablename__ = "Books"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), index=True, nullable=False)
    description = Column(Text, nullable=True)
    published_on = Column(Date, nullable=True)
    price = Column(Numeric(18, 2), nullable=False, default=0)
    publisher = Column(String(255), nullable=True)

    authors = relationship("Author", secondary=book_author, back_populates="books")
    categories = relationship("Category", secondary=book_category, back_populates="books")
    reviews = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    promotions = relationship(
        "Promotion",
        back_populates="book",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', price={self.price})>"
