# content/admin.py

from django.contrib import admin
from django.utils.html import format_html
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from . import repository
from .models import Collection, Resource


class ResourceInline(admin.TabularInline):
    model = Resource
    fields = ['title', 'type', 'language', 'url', 'created_at']
    readonly_fields = ['created_at']
    extra = 0
    show_change_link = True


@admin.register(Collection)
class CollectionAdmin(admin.ModelAdmin):
    list_display = ['name', 'collection_content_type', 'category', 'language', 'resources_count', 'created_at']
    list_filter = ['collection_content_type', 'category', 'language']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ResourceInline]

    fieldsets = [
        (_('معلومات أساسية'), {
            'fields': ('name', 'description', 'cover_image_url')
        }),
        (_('التصنيف'), {
            'fields': ('collection_content_type', 'category', 'language')
        }),
        (_('التواريخ'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    ]

    def resources_count(self, obj):
        """عدد المواد في المجموعة"""
        count = obj.resources.count()
        url = reverse('admin:content_resource_changelist') + f'?collection__id__exact={obj.id}'
        return format_html('<a href="{}">{} مادة</a>', url, count)
    resources_count.short_description = _('عدد المواد')

    def delete_model(self, request, obj):
        # فك ارتباط المواد بدلاً من حذفها
        repository.delete_collection(obj.pk)


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ['title', 'type', 'category', 'language', 'collection', 'created_at']
    list_filter = ['type', 'category', 'language', 'collection']
    search_fields = ['title', 'description', 'url', 'collection__name']
    list_select_related = ['collection']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'created_at'
    actions = ['unlink_from_collection']

    fieldsets = [
        (_('معلومات أساسية'), {
            'fields': ('title', 'description', 'url', 'cover_image_url', 'tags')
        }),
        (_('التصنيف'), {
            'fields': ('type', 'category', 'language', 'collection')
        }),
        (_('التواريخ'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    ]

    def unlink_from_collection(self, request, queryset):
        """إزالة المواد من مجموعاتها"""
        updated = queryset.update(collection=None)
        self.message_user(request, _('تم فك ارتباط {} مادة').format(updated))
    unlink_from_collection.short_description = _('فك الارتباط بالمجموعة')
