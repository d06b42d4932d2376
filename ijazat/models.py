# ijazat/models.py

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class IjazaCategory(models.TextChoices):
    HADITH = 'Hadith', _('الحديث')
    FIQH = 'Fiqh', _('الفقه')
    AQEEDAH = 'Aqeedah', _('العقيدة')
    QURAN = 'Quran', _('القرآن')
    USOOL = 'Usool', _('الأصول')
    OTHER = 'Other', _('أخرى')


class Ijaza(models.Model):
    """إجازة علمية بنصوص عربية وإنجليزية وملف PDF"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title_en = models.CharField(_('العنوان بالإنجليزية'), max_length=255)
    title_ar = models.CharField(_('العنوان بالعربية'), max_length=255)
    issuer_en = models.CharField(_('المجيز بالإنجليزية'), max_length=255)
    issuer_ar = models.CharField(_('المجيز بالعربية'), max_length=255)
    description_en = models.TextField(_('الوصف بالإنجليزية'))
    description_ar = models.TextField(_('الوصف بالعربية'))
    year = models.CharField(_('السنة'), max_length=20)
    category = models.CharField(_('التصنيف'), max_length=20, choices=IjazaCategory.choices, null=True, blank=True)
    pdf_url = models.URLField(_('رابط ملف PDF'), max_length=1000)
    created_at = models.DateTimeField(_('تاريخ الإضافة'), auto_now_add=True)

    class Meta:
        verbose_name = _('إجازة')
        verbose_name_plural = _('الإجازات')
        ordering = ['-year', '-created_at']

    def __str__(self):
        return self.title_ar

    def as_dict(self):
        return {
            'id': str(self.id),
            'title': {'en': self.title_en, 'ar': self.title_ar},
            'issuer': {'en': self.issuer_en, 'ar': self.issuer_ar},
            'description': {'en': self.description_en, 'ar': self.description_ar},
            'year': self.year,
            'category': self.category,
            'pdf_url': self.pdf_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
