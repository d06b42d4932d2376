# ijazat/admin.py

from django.contrib import admin
from django.utils.html import format_html
from django.utils.translation import gettext_lazy as _

from .models import Ijaza


@admin.register(Ijaza)
class IjazaAdmin(admin.ModelAdmin):
    list_display = ['title_ar', 'issuer_ar', 'year', 'category', 'pdf_link', 'created_at']
    list_filter = ['category', 'year']
    search_fields = ['title_ar', 'title_en', 'issuer_ar', 'issuer_en']
    readonly_fields = ['created_at']

    fieldsets = [
        (_('العنوان والمجيز'), {
            'fields': ('title_ar', 'title_en', 'issuer_ar', 'issuer_en')
        }),
        (_('التفاصيل'), {
            'fields': ('description_ar', 'description_en', 'year', 'category', 'pdf_url', 'created_at')
        }),
    ]

    def pdf_link(self, obj):
        return format_html('<a href="{}" target="_blank">{}</a>', obj.pdf_url, _('عرض'))
    pdf_link.short_description = _('الملف')
