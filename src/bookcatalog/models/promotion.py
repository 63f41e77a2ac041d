"""
ORM model for the Promotion entity.

A promotion is expressed either as a percentage or as a fixed amount;
having exactly one of them set is a convention, not a constraint.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from bookcatalog.db.session import Base


class Promotion(Base):
    __tablename__ = "Promotions"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    percent = Column(Numeric(18, 2), nullable=True)
    amount = Column(Numeric(18, 2), nullable=True)
    book_id = Column(Integer, ForeignKey("Books.id", ondelete="CASCADE"), nullable=False, index=True)

    book = relationship("Book", back_populates="promotions")

    def __str__(self) -> str:
        discount = self.percent if self.percent is not None else self.amount
        return f"Name - {self.name}\nDiscount - {discount}"

    def __repr__(self) -> str:
        return f"<Promotion(id={self.id}, book_id={self.book_id}, name='{self.name}')>"
