from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import relationship

from bookcatalog.db.session import Base


class Review(Base):
    __tablename__ = "Reviews"

    id = Column(Integer, primary_key=True)
    user_name = Column(String(255), nullable=True)
    user_email = Column(String(255), nullable=True)
    comment = Column(Text, nullable=True)
    stars = Column(SmallInteger, nullable=False, default=0)
    book_id = Column(Integer, ForeignKey("Books.id", ondelete="CASCADE"), nullable=False, index=True)

    book = relationship("Book", back_populates="reviews")

    __table_args__ = (
        # Stored as a single byte; 1-5 is the intended scale but only the byte range is enforced
        CheckConstraint("stars >= 0 AND stars <= 255", name="review_stars_byte_range"),
    )

    def __repr__(self):
        return f"<Review(id={self.id}, book_id={self.book_id}, stars={self.stars})>"
