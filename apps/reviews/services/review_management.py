"""Review management service - authoring and reading store reviews."""

import logging
from typing import Optional

from apps.accounts.repositories import UserRepository
from apps.core.errors import ErrorKind, InvalidInputError, is_kind
from apps.core.transactions import TransactionManager
from apps.reviews.domain import CreateReviewData, RatingDetails
from apps.reviews.models import RATING_MAX, RATING_MIN, Review, ReviewSort
from apps.reviews.repositories import ReviewRepository
from apps.stores.repositories import FileRepository, MenuRepository, StoreRepository

from .exceptions import (
    InvalidFileIdsError,
    InvalidRatingError,
    InvalidTransactionError,
    ReviewNotFoundError,
    StoreNotFoundError,
    UserNotFoundError,
)
from .validation import ExistenceValidator, normalize_ids

logger = logging.getLogger(__name__)


def _rating_in_range(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and RATING_MIN <= value <= RATING_MAX


class ReviewService:
    """
    Review authoring and read operations.

    Collaborators are injected so tests can swap any of them for a fake.
    ``transactions=None`` means no transaction facility is wired; writes are
    then refused instead of being done piecemeal.
    """

    def __init__(
        self,
        *,
        reviews: ReviewRepository,
        stores: StoreRepository,
        menus: MenuRepository,
        files: FileRepository,
        users: Optional[UserRepository] = None,
        transactions: Optional[TransactionManager] = None,
    ):
        self.reviews = reviews
        self.stores = stores
        self.users = users
        self.transactions = transactions
        self.validator = ExistenceValidator(menus=menus, files=files)

    def _ensure_store(self, store_id):
        try:
            return self.stores.find_by_id(store_id)
        except Exception as exc:
            if is_kind(exc, ErrorKind.NOT_FOUND):
                raise StoreNotFoundError() from exc
            raise

    def _ensure_user(self, user_id):
        if self.users is None:
            return None
        try:
            return self.users.find_by_id(user_id)
        except Exception as exc:
            if is_kind(exc, ErrorKind.NOT_FOUND):
                raise UserNotFoundError() from exc
            raise

    def create_review(
        self,
        *,
        store_id,
        user_id,
        rating,
        content: Optional[str] = None,
        rating_details: Optional[RatingDetails] = None,
        menu_ids=None,
        file_ids=None,
    ) -> Review:
        """
        Create a review and link it to menus and files of the same store.

        This operation:
        1. Rejects missing store or user ids
        2. Confirms the store (and the author) exist
        3. Validates the overall rating and any sub-ratings
        4. Validates menu ids against the store
        5. Validates file ids against the store
        6. Writes the review and its links in a single transaction

        Nothing is written unless every step passes.

        Args:
            store_id: Store being reviewed
            user_id: Author of the review
            rating: Overall rating (1-5, required)
            content: Free text
            rating_details: Optional per-aspect scores (1-5 each)
            menu_ids: Menu items of the store mentioned in the review
            file_ids: Uploaded files of the store attached to the review

        Returns:
            Created Review with ``likes_count=0`` and ``liked_by_me=False``

        Raises:
            InvalidInputError: Missing ids or a menu id outside the store
            StoreNotFoundError: Store does not exist
            UserNotFoundError: Author does not exist or is inactive
            InvalidRatingError: Rating or a sub-rating outside 1-5
            InvalidFileIdsError: A file id outside the store
            InvalidTransactionError: No transaction facility configured
        """
        if not store_id or not user_id:
            raise InvalidInputError('store_id and user_id are required')

        self._ensure_store(store_id)
        self._ensure_user(user_id)

        if not _rating_in_range(rating):
            raise InvalidRatingError()
        if rating_details is not None:
            for name, value in rating_details.items():
                if value is not None and not _rating_in_range(value):
                    raise InvalidRatingError(f'{name} rating must be between 1 and 5')

        wanted_menus = normalize_ids(menu_ids)
        menus = self.validator.validate_menus(store_id, wanted_menus)
        if len(menus) != len(wanted_menus):
            raise InvalidInputError('some menu IDs are invalid or belong to another store')

        wanted_files = normalize_ids(file_ids)
        files = self.validator.validate_files(store_id, wanted_files)
        if len(files) != len(wanted_files):
            raise InvalidFileIdsError()

        if self.transactions is None:
            raise InvalidTransactionError()

        data = CreateReviewData(
            store_id=str(store_id),
            user_id=str(user_id),
            rating=rating,
            content=content,
            rating_details=rating_details,
            menu_ids=[str(menu.id) for menu in menus],
            file_ids=[str(file.id) for file in files],
        )
        review = self.transactions.start_transaction(
            lambda tx: self.reviews.create_in_transaction(tx, data)
        )

        logger.info(
            "Review created",
            extra={
                'review_id': str(review.id),
                'store_id': data.store_id,
                'user_id': data.user_id,
                'menus': len(data.menu_ids),
                'files': len(data.file_ids),
            },
        )
        return review

    def list_reviews(self, store_id, sort=None, viewer_id=None) -> list[Review]:
        """
        List a store's reviews.

        ``sort`` is parsed with ``ReviewSort.parse``: ``"liked"`` orders by like
        count then recency, anything else by recency only.

        Raises:
            StoreNotFoundError: Store does not exist
        """
        self._ensure_store(store_id)
        return self.reviews.find_by_store(store_id, ReviewSort.parse(sort), viewer_id)

    def get_review_by_id(self, review_id, store_id=None, viewer_id=None) -> Review:
        try:
            return self.reviews.find_by_id(review_id, store_id=store_id, viewer_id=viewer_id)
        except Exception as exc:
            if is_kind(exc, ErrorKind.NOT_FOUND):
                raise ReviewNotFoundError() from exc
            raise

    def get_user_reviews(self, user_id, viewer_id=None) -> list[Review]:
        """Reviews written by ``user_id``, newest first."""
        self._ensure_user(user_id)
        return self.reviews.find_by_user(user_id, viewer_id=viewer_id)


def default_review_service() -> ReviewService:
    """Service wired to the Django ORM repositories and the default database."""
    return ReviewService(
        reviews=ReviewRepository(),
        stores=StoreRepository(),
        menus=MenuRepository(),
        files=FileRepository(),
        users=UserRepository(),
        transactions=TransactionManager(),
    )


def create_review(**kwargs) -> Review:
    return default_review_service().create_review(**kwargs)


def list_reviews(store_id, sort=None, viewer_id=None) -> list[Review]:
    return default_review_service().list_reviews(store_id, sort=sort, viewer_id=viewer_id)


def get_review_by_id(review_id, store_id=None, viewer_id=None) -> Review:
    return default_review_service().get_review_by_id(review_id, store_id=store_id, viewer_id=viewer_id)


def get_user_reviews(user_id, viewer_id=None) -> list[Review]:
    return default_review_service().get_user_reviews(user_id, viewer_id=viewer_id)
