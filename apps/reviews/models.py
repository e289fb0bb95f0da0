# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


RATING_MIN = 1
RATING_MAX = 5


def _score_field():
    return models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)],
    )


class ReviewSort(models.TextChoices):
    NEW = 'new', 'Newest first'
    LIKED = 'liked', 'Most liked'

    @classmethod
    def parse(cls, value):
        """Map a raw sort parameter onto a ReviewSort; unknown values mean NEW."""
        if value == cls.LIKED.value:
            return cls.LIKED
        return cls.NEW


class Review(models.Model):
    """
    User review of a store.

    ``likes_count`` and ``liked_by_me`` are never stored; the repository
    annotates them from ReviewLike rows at query time.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey('stores.Store', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)])
    rating_taste = _score_field()
    rating_atmosphere = _score_field()
    rating_service = _score_field()
    rating_speed = _score_field()
    rating_cleanliness = _score_field()
    content = models.TextField(null=True, blank=True)
    menus = models.ManyToManyField('stores.Menu', through='ReviewMenu', related_name='reviews', blank=True)
    files = models.ManyToManyField('stores.File', through='ReviewFile', related_name='reviews', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reviews'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=RATING_MIN, rating__lte=RATING_MAX),
                name='reviews_rating_range',
            ),
        ]
        indexes = [
            models.Index(fields=['store', 'created_at'], name='reviews_store_created_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.store.name} ({self.rating}★)"


class ReviewMenu(models.Model):
    """Menu item mentioned by a review. Must belong to the review's store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='menu_links')
    menu = models.ForeignKey('stores.Menu', on_delete=models.CASCADE, related_name='review_links')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_menus'
        constraints = [
            models.UniqueConstraint(fields=['review', 'menu'], name='review_menus_unique_pair'),
        ]


class ReviewFile(models.Model):
    """Uploaded file attached to a review. Must belong to the review's store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='file_links')
    file = models.ForeignKey('stores.File', on_delete=models.CASCADE, related_name='review_links')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_files'
        constraints = [
            models.UniqueConstraint(fields=['review', 'file'], name='review_files_unique_pair'),
        ]


class ReviewLike(models.Model):
    """One user's like of one review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='likes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='review_likes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_likes'
        constraints = [
            models.UniqueConstraint(fields=['review', 'user'], name='review_likes_unique_pair'),
        ]
        indexes = [
            models.Index(fields=['user', 'created_at'], name='review_likes_user_idx'),
        ]

    def __str__(self):
        return f"{self.user_id} likes {self.review_id}"
