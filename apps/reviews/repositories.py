"""Review persistence: reads with derived like fields, the write transaction and the like ledger."""

import logging

from django.db.models import BooleanField, Count, Exists, OuterRef, Prefetch, Value

from apps.core.errors import not_found_boundary
from apps.core.ids import is_uuid
from apps.core.transactions import resolve_transaction
from apps.stores.models import Menu, File

from .domain import CreateReviewData, RatingDetails
from .models import Review, ReviewFile, ReviewLike, ReviewMenu, ReviewSort

logger = logging.getLogger(__name__)


class ReviewRepository:

    def _annotated(self, viewer_id=None):
        """
        Base queryset carrying ``likes_count`` and ``liked_by_me``.

        Both are computed from ReviewLike rows on every read.
        """
        if viewer_id and is_uuid(viewer_id):
            liked_by_me = Exists(ReviewLike.objects.filter(review=OuterRef('pk'), user_id=viewer_id))
        else:
            liked_by_me = Value(False, output_field=BooleanField())

        return (
            Review.objects
            .select_related('author', 'store')
            .prefetch_related(
                Prefetch('menus', queryset=Menu.objects.order_by('id')),
                Prefetch('files', queryset=File.objects.filter(is_deleted=False)),
            )
            .annotate(
                likes_count=Count('likes', distinct=True),
                liked_by_me=liked_by_me,
            )
        )

    def find_by_store(self, store_id, sort=ReviewSort.NEW, viewer_id=None) -> list[Review]:
        queryset = self._annotated(viewer_id).filter(store_id=store_id)
        if sort == ReviewSort.LIKED:
            queryset = queryset.order_by('-likes_count', '-created_at')
        else:
            queryset = queryset.order_by('-created_at')
        return list(queryset)

    def find_by_id(self, review_id, store_id=None, viewer_id=None) -> Review:
        """
        Fetch one review with derived fields.

        Raises:
            NotFoundError: If the review does not exist, the id is malformed,
                or ``store_id`` is given and does not match
        """
        with not_found_boundary():
            queryset = self._annotated(viewer_id)
            if store_id:
                queryset = queryset.filter(store_id=store_id)
            return queryset.get(id=review_id)

    def find_by_user(self, user_id, viewer_id=None) -> list[Review]:
        if not is_uuid(user_id):
            return []
        return list(self._annotated(viewer_id).filter(author_id=user_id).order_by('-created_at'))

    def create_in_transaction(self, tx, data: CreateReviewData) -> Review:
        """
        Insert a review and its menu/file links inside an open transaction.

        Args:
            tx: Token handed out by ``TransactionManager.start_transaction``
            data: Already validated review data

        Raises:
            InvalidTransactionError: If ``tx`` does not denote an open transaction
        """
        using = resolve_transaction(tx)
        details = data.rating_details or RatingDetails()

        review = Review.objects.using(using).create(
            store_id=data.store_id,
            author_id=data.user_id,
            rating=data.rating,
            content=data.content,
            **details.as_model_fields(),
        )
        self._insert_menu_links(using, review, data.menu_ids)
        self._insert_file_links(using, review, data.file_ids)

        # Fresh review: no likes yet
        review.likes_count = 0
        review.liked_by_me = False
        return review

    def _insert_menu_links(self, using, review, menu_ids):
        if menu_ids:
            ReviewMenu.objects.using(using).bulk_create(
                [ReviewMenu(review=review, menu_id=menu_id) for menu_id in menu_ids]
            )

    def _insert_file_links(self, using, review, file_ids):
        if file_ids:
            ReviewFile.objects.using(using).bulk_create(
                [ReviewFile(review=review, file_id=file_id) for file_id in file_ids]
            )

    def add_like(self, review_id, user_id) -> None:
        """Record a like. An existing like for the pair is left as is."""
        ReviewLike.objects.bulk_create(
            [ReviewLike(review_id=review_id, user_id=user_id)],
            ignore_conflicts=True,
        )

    def remove_like(self, review_id, user_id) -> None:
        """Drop a like if present."""
        deleted, _ = ReviewLike.objects.filter(review_id=review_id, user_id=user_id).delete()
        if not deleted:
            logger.debug("No like to remove", extra={'review_id': str(review_id), 'user_id': str(user_id)})
