# tests/models/test_review_model.py
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from bookcatalog.models import Book, Review


@pytest.fixture
def test_book(db_session):
    book = Book(title="Review Test Book", price=Decimal("10.00"))
    db_session.add(book)
    db_session.flush()
    return book


def test_create_review(db_session, test_book):
    review = Review(
        user_name="reader",
        user_email="reader@example.com",
        comment="Loved it",
        stars=5,
        book_id=test_book.id,
    )
    db_session.add(review)
    db_session.commit()

    retrieved = db_session.get(Review, review.id)
    assert retrieved.stars == 5
    assert retrieved.book == test_book
    assert retrieved in test_book.reviews


def test_review_requires_existing_book(db_session):
    """book_id must reference a stored Book."""
    db_session.add(Review(stars=3, book_id=9999))

    with pytest.raises(IntegrityError):
        db_session.commit()


def test_review_stars_outside_intended_scale_accepted(db_session, test_book):
    """Only the byte range is enforced, not 1-5."""
    review = Review(stars=200, book_id=test_book.id)
    db_session.add(review)
    db_session.commit()

    assert db_session.get(Review, review.id).stars == 200


@pytest.mark.parametrize("stars", [-1, 256])
def test_review_stars_outside_byte_range(db_session, test_book, stars):
    db_session.add(Review(stars=stars, book_id=test_book.id))

    with pytest.raises(IntegrityError):
        db_session.commit()


def test_review_repr(db_session, test_book):
    review = Review(stars=2, book_id=test_book.id)
    db_session.add(review)
    db_session.commit()

    assert repr(review) == f"<Review(id={review.id}, book_id={test_book.id}, stars=2)>"
