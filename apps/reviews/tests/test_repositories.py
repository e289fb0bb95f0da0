import pytest
from datetime import timedelta
from uuid import uuid4
from django.db import transaction

from apps.core.errors import NotFoundError
from apps.core.transactions import TransactionManager
from apps.reviews.domain import CreateReviewData
from apps.reviews.models import Review, ReviewLike, ReviewMenu, ReviewSort
from apps.reviews.repositories import ReviewRepository
from apps.reviews.services.exceptions import InvalidTransactionError
from apps.stores.models import Menu


@pytest.mark.django_db
class TestReviewRepositoryReads:

    def test_find_by_store_annotates_like_fields(self, store, review, like, review_user):
        like(review, review_user)

        rows = ReviewRepository().find_by_store(store.id, ReviewSort.NEW, str(review_user.id))

        assert rows[0].likes_count == 1
        assert rows[0].liked_by_me is True

    def test_malformed_viewer_is_anonymous(self, store, review, like, review_user):
        like(review, review_user)

        rows = ReviewRepository().find_by_store(store.id, ReviewSort.NEW, 'nobody')

        assert rows[0].liked_by_me is False

    def test_find_by_id_not_found(self):
        with pytest.raises(NotFoundError):
            ReviewRepository().find_by_id(uuid4())

    def test_find_by_user_malformed_id(self):
        assert ReviewRepository().find_by_user('not-a-uuid') == []

    def test_linked_menus_ordered_by_id(self, store, review):
        menus = [Menu.objects.create(store=store, name=name) for name in ('Tea', 'Bagel', 'Mocha')]
        for menu in menus:
            ReviewMenu.objects.create(review=review, menu=menu)

        found = ReviewRepository().find_by_id(review.id)

        assert [m.id for m in found.menus.all()] == sorted(m.id for m in menus)

    def test_liked_order(self, store, make_review, like, review_user):
        first = make_review(age=timedelta(minutes=1))
        second = make_review(age=timedelta(days=1))
        like(second, review_user)

        rows = ReviewRepository().find_by_store(store.id, ReviewSort.LIKED)

        assert [r.id for r in rows] == [second.id, first.id]


@pytest.mark.django_db
class TestReviewRepositoryWrites:

    def test_create_in_transaction(self, store, review_user, menu_latte, store_photo):
        repo = ReviewRepository()
        data = CreateReviewData(
            store_id=str(store.id),
            user_id=str(review_user.id),
            rating=3,
            menu_ids=[str(menu_latte.id)],
            file_ids=[str(store_photo.id)],
        )

        review = TransactionManager().start_transaction(lambda tx: repo.create_in_transaction(tx, data))

        stored = Review.objects.get(pk=review.pk)
        assert list(stored.menus.all()) == [menu_latte]
        assert list(stored.files.all()) == [store_photo]
        assert review.likes_count == 0

    def test_unknown_token_rejected(self, store, review_user):
        data = CreateReviewData(store_id=str(store.id), user_id=str(review_user.id), rating=3)

        with pytest.raises(InvalidTransactionError):
            ReviewRepository().create_in_transaction('replica-that-does-not-exist', data)

        assert Review.objects.count() == 0

    def test_add_like_ignores_duplicate(self, review, review_user):
        repo = ReviewRepository()

        repo.add_like(review.id, review_user.id)
        repo.add_like(review.id, review_user.id)

        assert ReviewLike.objects.filter(review=review).count() == 1

    def test_remove_like_absent(self, review, review_user):
        repo = ReviewRepository()

        repo.remove_like(review.id, review_user.id)

        assert ReviewLike.objects.filter(review=review).count() == 0


@pytest.mark.django_db(transaction=True)
class TestReviewRepositoryOutsideTransaction:

    def test_closed_transaction_rejected(self, store, review_user):
        """The default alias is refused when no atomic block is open."""
        data = CreateReviewData(store_id=str(store.id), user_id=str(review_user.id), rating=3)

        assert not transaction.get_connection().in_atomic_block
        with pytest.raises(InvalidTransactionError):
            ReviewRepository().create_in_transaction('default', data)

        assert Review.objects.count() == 0
