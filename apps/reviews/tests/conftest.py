import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.stores.models import Store, Menu, File, StoreFile
from apps.reviews.models import Review, ReviewLike


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        display_name='Store Reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        display_name='Review Other User',
    )


@pytest.fixture
def review_auth_client(api_client, review_user):
    """Return API client authenticated as review user."""
    refresh = RefreshToken.for_user(review_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def review_other_client(review_other_user):
    """Return a separate API client authenticated as other user."""
    client = APIClient()
    refresh = RefreshToken.for_user(review_other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def store(db):
    """Create and return the store under review."""
    return Store.objects.create(
        name='Blue Door Cafe',
        address='1-2-3 Shibuya, Tokyo',
        latitude=35.66,
        longitude=139.70,
        is_approved=True,
    )


@pytest.fixture
def other_store(db):
    """Create and return a second, unrelated store."""
    return Store.objects.create(
        name='Corner Bakery',
        address='4-5-6 Shinjuku, Tokyo',
        latitude=35.69,
        longitude=139.70,
        is_approved=True,
    )


@pytest.fixture
def menu_latte(store):
    return Menu.objects.create(store=store, name='Latte', price=550)


@pytest.fixture
def menu_scone(store):
    return Menu.objects.create(store=store, name='Scone', price=380)


@pytest.fixture
def other_store_menu(other_store):
    return Menu.objects.create(store=other_store, name='Croissant', price=300)


def _make_file(store, key, **kwargs):
    file = File.objects.create(
        file_name=f'{key}.jpg',
        object_key=f'stores/{key}.jpg',
        content_type='image/jpeg',
        **kwargs,
    )
    StoreFile.objects.create(store=store, file=file)
    return file


@pytest.fixture
def store_photo(store):
    """Image uploaded for the store under review."""
    return _make_file(store, 'blue-door-front')


@pytest.fixture
def deleted_photo(store):
    """Soft-deleted image of the store under review."""
    return _make_file(store, 'blue-door-old', is_deleted=True)


@pytest.fixture
def other_store_photo(other_store):
    """Image uploaded for the other store."""
    return _make_file(other_store, 'corner-bakery')


@pytest.fixture
def make_review(store, review_user):
    """
    Factory creating reviews directly in the database.

    ``age`` backdates ``created_at`` so recency order is deterministic.
    """
    def _make(*, author=None, target=None, rating=4, content='', age=timedelta(0)):
        review = Review.objects.create(
            store=target or store,
            author=author or review_user,
            rating=rating,
            content=content,
        )
        created_at = timezone.now() - age
        Review.objects.filter(pk=review.pk).update(created_at=created_at)
        review.created_at = created_at
        return review
    return _make


@pytest.fixture
def review(make_review):
    """A single existing review of the store."""
    return make_review(content='Great latte, friendly staff.', age=timedelta(hours=1))


@pytest.fixture
def like(db):
    """Factory recording a like directly in the database."""
    def _like(review, user):
        return ReviewLike.objects.create(review=review, user=user)
    return _like
