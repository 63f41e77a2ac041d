# tests/crud/test_crud_review.py
import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from bookcatalog.schemas import ReviewSchema


@pytest.fixture
def crud_test_book(make_book):
    return make_book("Reviewed Book")


def test_add_and_get_review(review_repo, crud_test_book):
    created = review_repo.add_review(ReviewSchema(
        user_name="lee",
        user_email="lee@example.com",
        comment="Great pacing",
        stars=4,
        book_id=crud_test_book.id,
    ))

    fetched = review_repo.get_review(created.id)
    assert fetched == created
    assert fetched.comment == "Great pacing"
    assert fetched.stars == 4
    assert fetched.book_id == crud_test_book.id


def test_get_review_not_found(review_repo):
    assert review_repo.get_review(99999) is None


def test_get_all_reviews_for_book(review_repo, make_book, crud_test_book):
    other = make_book("Other Book")
    first = review_repo.add_review(ReviewSchema(book_id=crud_test_book.id, stars=5))
    second = review_repo.add_review(ReviewSchema(book_id=crud_test_book.id, stars=1))
    review_repo.add_review(ReviewSchema(book_id=other.id, stars=3))

    reviews = review_repo.get_all_reviews(crud_test_book.id)

    assert set(reviews) == {first, second}


def test_get_all_reviews_for_unknown_book(review_repo):
    assert review_repo.get_all_reviews(8080) == []


def test_add_review_for_missing_book_raises(review_repo):
    """Storage failures propagate; the foreign key rejects the review."""
    with pytest.raises(IntegrityError):
        review_repo.add_review(ReviewSchema(book_id=123456, stars=3))

    assert review_repo.get_all_reviews(123456) == []


def test_review_stars_byte_range(review_repo, crud_test_book):
    accepted = review_repo.add_review(ReviewSchema(book_id=crud_test_book.id, stars=200))
    assert review_repo.get_review(accepted.id).stars == 200

    with pytest.raises(ValidationError):
        ReviewSchema(book_id=crud_test_book.id, stars=256)


def test_delete_review(review_repo, crud_test_book):
    review = review_repo.add_review(ReviewSchema(book_id=crud_test_book.id, stars=2))

    assert review_repo.delete_review(review) is True
    assert review_repo.get_review(review.id) is None
    assert review_repo.delete_review(review) is False
