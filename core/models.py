# core/models.py

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import models, transaction
from django.db.models.signals import post_migrate
from django.dispatch import receiver
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .exceptions import ConflictError, ValidationFailedError
from .validators import parse_id

logger = logging.getLogger(__name__)

NULL_OPTION = 'null_option'
ARABIC_INDIC_DIGITS = str.maketrans('0123456789', '٠١٢٣٤٥٦٧٨٩')

DEFAULT_SITE_SETTINGS = {
    'site_title_en': "Al-Sa'd Scholarly Portal",
    'site_title_ar': 'بوابة السعد العلمية',
    'contact_email': '',
    'footer_text_en': "© {year} Al-Sa'd Scholarly Portal. All rights reserved.",
    'footer_text_ar': '© {year} بوابة السعد العلمية. جميع الحقوق محفوظة.',
}

EDITABLE_FIELDS = (
    'site_title_en', 'site_title_ar', 'contact_email',
    'footer_text_en', 'footer_text_ar', 'featured_resource_ids',
)


def featured_count():
    return settings.FEATURED_RESOURCES_COUNT


def normalize_featured(ids, count=None):
    """قائمة المواد المميزة بطول ثابت، والخانة الفارغة null"""
    count = featured_count() if count is None else count
    if not isinstance(ids, (list, tuple)):
        ids = []
    normalized = []
    for value in list(ids)[:count]:
        if value in (None, '', NULL_OPTION):
            normalized.append(None)
        else:
            normalized.append(str(value))
    normalized.extend([None] * (count - len(normalized)))
    return normalized


def clean_featured_ids(value):
    """قائمة المواد المميزة المرسلة: كل خانة فارغة أو معرف UUID صالح"""
    if not isinstance(value, (list, tuple)):
        raise ValidationFailedError({'featured_resource_ids': ['يجب أن تكون المواد المميزة قائمة']})
    invalid = [item for item in value if item not in (None, '', NULL_OPTION) and parse_id(item) is None]
    if invalid:
        raise ValidationFailedError({'featured_resource_ids': [f'معرف مادة غير صالح: {item}' for item in invalid]})
    return list(value)


def clean_version(value):
    """رقم الإصدار المتوقع: عدد صحيح أو نص أرقام، و None يعني عدم الفحص"""
    if value is None:
        return None
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ValidationFailedError({'version': ['رقم الإصدار يجب أن يكون عدداً صحيحاً']})


def render_footer(template, locale='ar', year=None):
    """استبدال {year} بالسنة، بالأرقام العربية الهندية للعربية"""
    year = str(year or timezone.now().year)
    if locale == 'ar':
        year = year.translate(ARABIC_INDIC_DIGITS)
    return (template or '').replace('{year}', year)


class SiteSettings(models.Model):
    """إعدادات الموقع العامة (سجل واحد فقط)"""
    site_title_en = models.CharField(_('عنوان الموقع (إنجليزي)'), max_length=200, default=DEFAULT_SITE_SETTINGS['site_title_en'])
    site_title_ar = models.CharField(_('عنوان الموقع (عربي)'), max_length=200, default=DEFAULT_SITE_SETTINGS['site_title_ar'])
    contact_email = models.EmailField(_('بريد الاتصال'), blank=True)
    footer_text_en = models.CharField(_('نص التذييل (إنجليزي)'), max_length=500, default=DEFAULT_SITE_SETTINGS['footer_text_en'],
                                      help_text=_('استخدم {year} للسنة الحالية'))
    footer_text_ar = models.CharField(_('نص التذييل (عربي)'), max_length=500, default=DEFAULT_SITE_SETTINGS['footer_text_ar'],
                                      help_text=_('استخدم {year} للسنة الحالية'))
    featured_resource_ids = models.JSONField(_('المواد المميزة في الصفحة الرئيسية'), default=list, blank=True)

    version = models.PositiveIntegerField(_('الإصدار'), default=1)
    updated_at = models.DateTimeField(_('تاريخ التحديث'), auto_now=True)

    class Meta:
        verbose_name = _('إعدادات الموقع')
        verbose_name_plural = _('إعدادات الموقع')

    def __str__(self):
        return self.site_title_ar

    def save(self, *args, **kwargs):
        self.pk = 1
        self.featured_resource_ids = normalize_featured(self.featured_resource_ids)
        super().save(*args, **kwargs)

    @classmethod
    def get_settings(cls):
        """الحصول على الإعدادات (إنشاء الافتراضية إذا لم تكن موجودة) مع توحيد القائمة المميزة"""
        site_settings, created = cls.objects.get_or_create(pk=1, defaults=DEFAULT_SITE_SETTINGS)
        if created:
            logger.info('تم إنشاء إعدادات الموقع الافتراضية')
        site_settings.featured_resource_ids = normalize_featured(site_settings.featured_resource_ids)
        return site_settings

    @classmethod
    def update_with_merge(cls, data):
        """دمج الحقول المرسلة فقط مع الإعدادات الحالية"""
        unknown = sorted(set(data) - set(EDITABLE_FIELDS) - {'version'})
        if unknown:
            raise ValidationFailedError({field: ['حقل غير معروف'] for field in unknown})

        expected_version = clean_version(data.get('version'))
        if 'featured_resource_ids' in data:
            data = dict(data, featured_resource_ids=clean_featured_ids(data['featured_resource_ids']))

        with transaction.atomic():
            cls.get_settings()
            site_settings = cls.objects.select_for_update().get(pk=1)

            if expected_version is not None and expected_version != site_settings.version:
                raise ConflictError('Site settings were changed by another admin. Reload and try again.')

            for field in EDITABLE_FIELDS:
                if field in data:
                    setattr(site_settings, field, data[field])

            site_settings.version += 1
            try:
                site_settings.full_clean(exclude=['featured_resource_ids'])
            except DjangoValidationError as e:
                raise ValidationFailedError(e.message_dict)
            site_settings.save()

        logger.info(f'تم تحديث إعدادات الموقع إلى الإصدار {site_settings.version}')
        return site_settings

    def footer_text(self, locale='ar', year=None):
        template = self.footer_text_ar if locale == 'ar' else self.footer_text_en
        return render_footer(template, locale, year)

    def site_title(self, locale='ar'):
        return self.site_title_ar if locale == 'ar' else self.site_title_en

    def as_dict(self):
        return {
            'site_title_en': self.site_title_en,
            'site_title_ar': self.site_title_ar,
            'contact_email': self.contact_email,
            'footer_text_en': self.footer_text_en,
            'footer_text_ar': self.footer_text_ar,
            'featured_resource_ids': normalize_featured(self.featured_resource_ids),
            'version': self.version,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


@receiver(post_migrate)
def create_default_site_settings(sender, **kwargs):
    """إنشاء إعدادات الموقع الافتراضية بعد الترحيل"""
    if sender.name == 'core':
        SiteSettings.get_settings()
