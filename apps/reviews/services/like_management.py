"""Like ledger - idempotent like/unlike of reviews."""

import logging
from typing import Optional

from apps.core.errors import ErrorKind, InvalidInputError, is_kind
from apps.reviews.repositories import ReviewRepository

from .exceptions import ReviewNotFoundError

logger = logging.getLogger(__name__)


class LikeLedger:
    """
    One row per (review, user) pair.

    Liking twice and unliking something never liked are both no-ops; the
    unique constraint on the pair is what makes concurrent duplicates safe.
    """

    def __init__(self, reviews: Optional[ReviewRepository] = None):
        self.reviews = reviews or ReviewRepository()

    def _ensure_review(self, review_id):
        try:
            self.reviews.find_by_id(review_id)
        except Exception as exc:
            if is_kind(exc, ErrorKind.NOT_FOUND):
                raise ReviewNotFoundError() from exc
            raise

    def like_review(self, review_id, user_id) -> None:
        """
        Raises:
            InvalidInputError: Missing review or user id
            ReviewNotFoundError: Review does not exist
        """
        if not review_id or not user_id:
            raise InvalidInputError('review_id and user_id are required')
        self._ensure_review(review_id)
        self.reviews.add_like(review_id, user_id)
        logger.info("Review liked", extra={'review_id': str(review_id), 'user_id': str(user_id)})

    def unlike_review(self, review_id, user_id) -> None:
        """
        Raises:
            InvalidInputError: Missing review or user id
            ReviewNotFoundError: Review does not exist
        """
        if not review_id or not user_id:
            raise InvalidInputError('review_id and user_id are required')
        self._ensure_review(review_id)
        self.reviews.remove_like(review_id, user_id)
        logger.info("Review unliked", extra={'review_id': str(review_id), 'user_id': str(user_id)})


def like_review(review_id, user_id) -> None:
    LikeLedger().like_review(review_id, user_id)


def unlike_review(review_id, user_id) -> None:
    LikeLedger().unlike_review(review_id, user_id)
