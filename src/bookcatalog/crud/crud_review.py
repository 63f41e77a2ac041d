from typing import List, Optional

from ..models.review import Review
from ..schemas.catalog import ReviewSchema
from .base import BaseRepository


class ReviewRepository(BaseRepository):
    """Reviews are add/read/delete only; there is no edit."""
    model = Review
    schema = ReviewSchema

    def get_all_reviews(self, book_id: int) -> List[ReviewSchema]:
        """Returns every review written for the given book."""
        return self._list(Review.book_id == book_id)

    def get_review(self, review_id: int) -> Optional[ReviewSchema]:
        return self._get_by_id(review_id)

    def add_review(self, review: ReviewSchema) -> ReviewSchema:
        return self._add(review)

    def delete_review(self, review: ReviewSchema) -> bool:
        return self._delete(review.id)
