"""
ORM model for the Author entity.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bookcatalog.db.session import Base
from bookcatalog.models.associations import book_author


class Author(Base):
    __tablename__ = "Authors"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), index=True, nullable=False)

    books = relationship("Book", secondary=book_author, back_populates="authors")

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
