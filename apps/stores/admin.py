from django.contrib import admin
from django.db.models import Count
from .models import Store, Menu, File, StoreFile


class MenuInline(admin.TabularInline):
    model = Menu
    extra = 0
    fields = ['name', 'price', 'description']


class StoreFileInline(admin.TabularInline):
    model = StoreFile
    extra = 0
    raw_id_fields = ['file']


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for Stores."""

    list_display = ['name', 'address', 'is_approved', 'menu_count', 'created_at']
    list_filter = ['is_approved', 'created_at']
    search_fields = ['name', 'address']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [MenuInline, StoreFileInline]
    ordering = ['-created_at']
    actions = ['approve_stores']

    def menu_count(self, obj):
        return obj.menu_total
    menu_count.short_description = 'Menus'
    menu_count.admin_order_field = 'menu_total'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.annotate(menu_total=Count('menus'))

    @admin.action(description='Approve selected stores')
    def approve_stores(self, request, queryset):
        count = queryset.update(is_approved=True)
        self.message_user(request, f'Approved {count} store(s).')


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ['name', 'store', 'price', 'created_at']
    search_fields = ['name', 'store__name']
    list_select_related = ['store']


@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    list_display = ['file_name', 'file_kind', 'content_type', 'is_deleted', 'created_at']
    list_filter = ['file_kind', 'is_deleted']
    search_fields = ['file_name', 'object_key']
    readonly_fields = ['created_at']
