# core/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ['site_title_ar', 'site_title_en', 'contact_email', 'version', 'updated_at']
    readonly_fields = ['version', 'updated_at']

    fieldsets = [
        (_('معلومات الموقع الأساسية'), {
            'fields': ('site_title_ar', 'site_title_en', 'contact_email')
        }),
        (_('التذييل'), {
            'fields': ('footer_text_ar', 'footer_text_en')
        }),
        (_('الصفحة الرئيسية'), {
            'fields': ('featured_resource_ids',)
        }),
        (_('معلومات إضافية'), {
            'fields': ('version', 'updated_at'),
            'classes': ('collapse',)
        }),
    ]

    def has_add_permission(self, request):
        """السماح بإنشاء إعدادات واحدة فقط"""
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        """منع حذف الإعدادات"""
        return False

    def save_model(self, request, obj, form, change):
        if change:
            obj.version += 1
        super().save_model(request, obj, form, change)
