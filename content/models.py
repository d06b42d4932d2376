# content/models.py

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _


class ResourceType(models.TextChoices):
    PDF = 'pdf', _('ملف PDF')
    AUDIO = 'audio', _('صوتي')
    VIDEO = 'video', _('مرئي')
    ARTICLE = 'article', _('مقال')
    IMAGE = 'image', _('صورة')
    OTHER = 'other', _('أخرى')


class Language(models.TextChoices):
    ARABIC = 'ar', _('العربية')
    ENGLISH = 'en', _('الإنجليزية')


class Category(models.TextChoices):
    AQIDAH = 'aqidah', _('العقيدة')
    AHADITH = 'ahadith', _('الأحاديث')
    QURAN = 'quran', _('القرآن')
    FIQH = 'fiqh', _('الفقه')
    FAMILY = 'family', _('الأسرة')
    BUSINESS = 'business', _('المعاملات')
    PRAYER = 'prayer', _('الصلاة')


class CollectionContentType(models.TextChoices):
    BOOK = 'book', _('كتاب')
    AUDIO = 'audio', _('صوتي')
    VIDEO = 'video', _('مرئي')


class Collection(models.Model):
    """مجموعة مسماة من المواد تشترك في نوع المحتوى"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(_('الاسم'), max_length=255)
    description = models.TextField(_('الوصف'), null=True, blank=True)
    cover_image_url = models.URLField(_('رابط صورة الغلاف'), max_length=1000, null=True, blank=True)
    language = models.CharField(_('اللغة'), max_length=2, choices=Language.choices, null=True, blank=True)
    category = models.CharField(_('التصنيف'), max_length=20, choices=Category.choices, null=True, blank=True)
    collection_content_type = models.CharField(
        _('نوع المحتوى'), max_length=10, choices=CollectionContentType.choices
    )

    created_at = models.DateTimeField(_('تاريخ الإنشاء'), auto_now_add=True)
    updated_at = models.DateTimeField(_('تاريخ التحديث'), auto_now=True)

    class Meta:
        verbose_name = _('مجموعة')
        verbose_name_plural = _('المجموعات')
        ordering = ['name']
        constraints = [
            models.UniqueConstraint(
                fields=['name', 'collection_content_type', 'category'],
                name='unique_collection_name_type_category',
            ),
        ]

    def __str__(self):
        return self.name

    def as_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'description': self.description,
            'cover_image_url': self.cover_image_url,
            'language': self.language,
            'category': self.category,
            'collection_content_type': self.collection_content_type,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def as_summary(self):
        """الحقول المضمنة مع كل مادة عند العرض"""
        return {
            'id': str(self.id),
            'name': self.name,
            'collection_content_type': self.collection_content_type,
        }


class Resource(models.Model):
    """مادة واحدة (كتاب، صوتية، مرئي، مقال...) رابطها الخارجي هو محتواها"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(_('العنوان'), max_length=500)
    description = models.TextField(_('الوصف'), null=True, blank=True)
    type = models.CharField(_('النوع'), max_length=10, choices=ResourceType.choices)
    language = models.CharField(_('اللغة'), max_length=2, choices=Language.choices)
    category = models.CharField(_('التصنيف'), max_length=20, choices=Category.choices)
    tags = models.JSONField(_('الوسوم'), null=True, blank=True)
    url = models.URLField(_('الرابط'), max_length=1000, unique=True)
    cover_image_url = models.URLField(_('رابط صورة الغلاف'), max_length=1000, null=True, blank=True)
    collection = models.ForeignKey(
        Collection,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='resources',
        verbose_name=_('المجموعة'),
    )

    created_at = models.DateTimeField(_('تاريخ الإنشاء'), auto_now_add=True)
    updated_at = models.DateTimeField(_('تاريخ التحديث'), auto_now=True)

    class Meta:
        verbose_name = _('مادة')
        verbose_name_plural = _('المواد')
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def as_dict(self):
        collection = self.collection if self.collection_id else None
        return {
            'id': str(self.id),
            'title': self.title,
            'description': self.description,
            'type': self.type,
            'language': self.language,
            'category': self.category,
            'tags': self.tags,
            'url': self.url,
            'cover_image_url': self.cover_image_url,
            'collection_id': str(self.collection_id) if self.collection_id else None,
            'collection': collection.as_summary() if collection else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
