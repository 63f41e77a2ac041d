"""
ORM model for the Category entity.
"""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from bookcatalog.db.session import Base
from bookcatalog.models.associations import book_category


class Category(Base):
    __tablename__ = "Categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), index=True, nullable=True)
    description = Column(Text, nullable=True)

    books = relationship("Book", secondary=book_category, back_populates="categories")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"
