from django.contrib import admin
from django.db.models import Count
from .models import Review, ReviewMenu, ReviewFile, ReviewLike


class ReviewMenuInline(admin.TabularInline):
    model = ReviewMenu
    extra = 0
    raw_id_fields = ['menu']


class ReviewFileInline(admin.TabularInline):
    model = ReviewFile
    extra = 0
    raw_id_fields = ['file']


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'store',
        'author',
        'rating',
        'likes_count',
        'created_at'
    ]
    list_filter = [
        'rating',
        'created_at',
    ]
    search_fields = [
        'store__name',
        'author__email',
        'content'
    ]
    readonly_fields = ['created_at']
    raw_id_fields = ['store', 'author']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    inlines = [ReviewMenuInline, ReviewFileInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('store', 'author', 'rating', 'content')
        }),
        ('Detailed Scores', {
            'fields': (
                'rating_taste',
                'rating_atmosphere',
                'rating_service',
                'rating_speed',
                'rating_cleanliness',
            ),
            'classes': ('collapse',)
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize query with select_related and like counts."""
        qs = super().get_queryset(request)
        return qs.select_related('store', 'author').annotate(likes_total=Count('likes', distinct=True))

    def likes_count(self, obj):
        return obj.likes_total
    likes_count.short_description = 'Likes'
    likes_count.admin_order_field = 'likes_total'


@admin.register(ReviewLike)
class ReviewLikeAdmin(admin.ModelAdmin):
    list_display = ['review', 'user', 'created_at']
    search_fields = ['user__email', 'review__store__name']
    raw_id_fields = ['review', 'user']
    readonly_fields = ['created_at']
