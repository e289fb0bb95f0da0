from rest_framework import serializers
from apps.accounts.models import User
from apps.stores.models import Menu, File
from .models import Review


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name', 'icon_url']
        read_only_fields = fields

    def get_display_name(self, obj):
        return obj.get_display_name()


class MenuMinimalSerializer(serializers.ModelSerializer):

    class Meta:
        model = Menu
        fields = ['id', 'name', 'price']
        read_only_fields = fields


class FileMinimalSerializer(serializers.ModelSerializer):

    class Meta:
        model = File
        fields = ['id', 'file_kind', 'file_name', 'content_type', 'object_key']
        read_only_fields = fields


class RatingDetailsSerializer(serializers.Serializer):
    """Per-aspect scores. Range is checked by the service, not here."""

    taste = serializers.IntegerField(required=False, allow_null=True)
    atmosphere = serializers.IntegerField(required=False, allow_null=True)
    service = serializers.IntegerField(required=False, allow_null=True)
    speed = serializers.IntegerField(required=False, allow_null=True)
    cleanliness = serializers.IntegerField(required=False, allow_null=True)


class ReviewCreateSerializer(serializers.Serializer):
    """Request body for creating a review."""

    rating = serializers.IntegerField()
    content = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    rating_details = RatingDetailsSerializer(required=False, allow_null=True)
    menu_ids = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        default=list,
    )
    file_ids = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        default=list,
    )


class ReviewSerializer(serializers.ModelSerializer):
    """Review with author, linked menus and files, and like information."""

    author = UserMinimalSerializer(read_only=True)
    store_id = serializers.UUIDField(read_only=True)
    menus = MenuMinimalSerializer(many=True, read_only=True)
    files = FileMinimalSerializer(many=True, read_only=True)
    rating_details = serializers.SerializerMethodField()
    likes_count = serializers.IntegerField(read_only=True)
    liked_by_me = serializers.BooleanField(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'store_id',
            'author',
            'rating',
            'rating_details',
            'content',
            'menus',
            'files',
            'likes_count',
            'liked_by_me',
            'created_at',
        ]
        read_only_fields = fields

    def get_rating_details(self, obj) -> dict:
        return {
            'taste': obj.rating_taste,
            'atmosphere': obj.rating_atmosphere,
            'service': obj.rating_service,
            'speed': obj.rating_speed,
            'cleanliness': obj.rating_cleanliness,
        }
