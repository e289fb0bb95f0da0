import pytest
from datetime import timedelta
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.reviews.models import Review, ReviewLike


# =============================================================================
# Store Review Tests
# =============================================================================

@pytest.mark.django_db
class TestStoreReviewList:
    """Tests for GET /api/stores/{id}/reviews/"""

    def test_list_reviews(self, api_client, store, review):
        """List reviews (public endpoint)."""
        url = reverse('reviews:store-reviews', args=[store.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['id'] == str(review.id)
        assert response.data[0]['likes_count'] == 0
        assert response.data[0]['liked_by_me'] is False
        assert response.data[0]['author']['display_name'] == 'Store Reviewer'

    def test_list_reviews_sorted_by_likes(self, api_client, store, make_review, like, review_other_user):
        liked = make_review(age=timedelta(days=1))
        make_review(age=timedelta(minutes=1))
        like(liked, review_other_user)

        url = reverse('reviews:store-reviews', args=[store.id])
        response = api_client.get(url, {'sort': 'liked'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['id'] == str(liked.id)
        assert response.data[0]['likes_count'] == 1

    def test_liked_by_me_for_authenticated_viewer(self, review_auth_client, store, review, like, review_user):
        like(review, review_user)

        url = reverse('reviews:store-reviews', args=[store.id])
        response = review_auth_client.get(url)

        assert response.data[0]['liked_by_me'] is True

    def test_unknown_store(self, api_client):
        url = reverse('reviews:store-reviews', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'store not found', 'code': 'not_found'}


@pytest.mark.django_db
class TestStoreReviewCreate:
    """Tests for POST /api/stores/{id}/reviews/"""

    def test_create_review(self, review_auth_client, store, review_user, menu_latte, store_photo):
        """Create a new review with links."""
        url = reverse('reviews:store-reviews', args=[store.id])
        data = {
            'rating': 5,
            'content': 'Lovely place',
            'rating_details': {'taste': 5, 'service': 4},
            'menu_ids': [str(menu_latte.id)],
            'file_ids': [str(store_photo.id)],
        }
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['rating'] == 5
        assert response.data['rating_details']['taste'] == 5
        assert response.data['rating_details']['atmosphere'] is None
        assert [m['id'] for m in response.data['menus']] == [str(menu_latte.id)]
        assert [f['id'] for f in response.data['files']] == [str(store_photo.id)]
        assert response.data['likes_count'] == 0
        assert Review.objects.filter(store=store, author=review_user).exists()

    def test_create_review_unauthenticated(self, api_client, store):
        url = reverse('reviews:store-reviews', args=[store.id])
        response = api_client.post(url, {'rating': 5}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Review.objects.count() == 0

    def test_create_review_invalid_rating(self, review_auth_client, store):
        url = reverse('reviews:store-reviews', args=[store.id])
        response = review_auth_client.post(url, {'rating': 6}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'invalid_input'
        assert response.data['error'] == 'rating must be between 1 and 5'

    def test_create_review_missing_rating(self, review_auth_client, store):
        url = reverse('reviews:store-reviews', args=[store.id])
        response = review_auth_client.post(url, {'content': 'no rating'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'invalid_input'
        assert 'rating' in response.data['fields']

    def test_create_review_non_integer_rating(self, review_auth_client, store):
        url = reverse('reviews:store-reviews', args=[store.id])
        response = review_auth_client.post(url, {'rating': 'abc'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'invalid request'
        assert response.data['code'] == 'invalid_input'
        assert list(response.data['fields']) == ['rating']
        assert Review.objects.count() == 0

    def test_create_review_foreign_file(self, review_auth_client, store, other_store_photo):
        url = reverse('reviews:store-reviews', args=[store.id])
        data = {'rating': 4, 'file_ids': [str(other_store_photo.id)]}
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'invalid file IDs'
        assert Review.objects.count() == 0

    def test_create_review_unknown_store(self, review_auth_client):
        url = reverse('reviews:store-reviews', args=['not-a-store'])
        response = review_auth_client.post(url, {'rating': 4}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Review Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewDetail:
    """Tests for GET /api/reviews/{id}/"""

    def test_get_review(self, api_client, review):
        url = reverse('reviews:review-detail', args=[review.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['content'] == 'Great latte, friendly staff.'

    def test_get_review_not_found(self, api_client):
        url = reverse('reviews:review-detail', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'not_found'


# =============================================================================
# Like Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewLikes:
    """Tests for POST/DELETE /api/reviews/{id}/likes/"""

    def test_like_is_idempotent(self, review_other_client, review, review_other_user):
        url = reverse('reviews:review-likes', args=[review.id])

        first = review_other_client.post(url)
        second = review_other_client.post(url)

        assert first.status_code == status.HTTP_204_NO_CONTENT
        assert second.status_code == status.HTTP_204_NO_CONTENT
        assert ReviewLike.objects.filter(review=review, user=review_other_user).count() == 1

    def test_unlike(self, review_other_client, review, review_other_user, like):
        like(review, review_other_user)
        url = reverse('reviews:review-likes', args=[review.id])

        response = review_other_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ReviewLike.objects.filter(review=review).exists()

    def test_unlike_without_like(self, review_other_client, review):
        url = reverse('reviews:review-likes', args=[review.id])
        response = review_other_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_like_unknown_review(self, review_other_client):
        url = reverse('reviews:review-likes', args=[uuid4()])
        response = review_other_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'review not found'

    def test_like_requires_authentication(self, api_client, review):
        url = reverse('reviews:review-likes', args=[review.id])
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# User Review Tests
# =============================================================================

@pytest.mark.django_db
class TestUserReviews:
    """Tests for GET /api/users/{id}/reviews/"""

    def test_user_reviews(self, api_client, review, review_user):
        url = reverse('reviews:user-reviews', args=[review_user.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(review.id)]

    def test_unknown_user(self, api_client):
        url = reverse('reviews:user-reviews', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'user not found'
