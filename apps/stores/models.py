# ==========================================
# apps/stores/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class FileKind(models.TextChoices):
    IMAGE = 'image', 'Image'
    VIDEO = 'video', 'Video'
    OTHER = 'other', 'Other'


class Store(models.Model):
    """Listed store (cafe, restaurant, shop)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)
    address = models.CharField(max_length=300)
    opening_hours = models.CharField(max_length=200, blank=True)
    latitude = models.FloatField(validators=[MinValueValidator(-90), MaxValueValidator(90)])
    longitude = models.FloatField(validators=[MinValueValidator(-180), MaxValueValidator(180)])
    google_map_url = models.URLField(max_length=500, blank=True)
    place_id = models.CharField(max_length=200, blank=True)
    is_approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stores'
        indexes = [
            models.Index(fields=['is_approved', 'created_at'], name='stores_approved_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Menu(models.Model):
    """Menu item offered by a store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name='menus')
    name = models.CharField(max_length=200)
    price = models.PositiveIntegerField(null=True, blank=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'menus'
        indexes = [
            models.Index(fields=['store', 'name'], name='menus_store_name_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.store.name} - {self.name}"


class File(models.Model):
    """Uploaded media object. Ownership by a store goes through StoreFile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    file_kind = models.CharField(max_length=20, choices=FileKind.choices, default=FileKind.IMAGE)
    file_name = models.CharField(max_length=255)
    file_size = models.PositiveBigIntegerField(null=True, blank=True)
    object_key = models.CharField(max_length=500, unique=True)
    content_type = models.CharField(max_length=100, blank=True)
    is_deleted = models.BooleanField(default=False)
    created_by = models.ForeignKey('accounts.User', on_delete=models.SET_NULL, null=True, blank=True, related_name='uploaded_files')
    created_at = models.DateTimeField(auto_now_add=True)
    stores = models.ManyToManyField(Store, through='StoreFile', related_name='files', blank=True)

    class Meta:
        db_table = 'files'
        ordering = ['-created_at']

    def __str__(self):
        return self.file_name


class StoreFile(models.Model):
    """Store ownership of an uploaded file."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name='store_files')
    file = models.ForeignKey(File, on_delete=models.CASCADE, related_name='store_files')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'store_files'
        constraints = [
            models.UniqueConstraint(fields=['store', 'file'], name='store_files_unique_pair'),
        ]

    def __str__(self):
        return f"{self.store_id} - {self.file_id}"
