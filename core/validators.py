# core/validators.py

import re
import uuid
from urllib.parse import urlparse

from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

HTTP_URL_PATTERN = re.compile(r'^https?://', re.IGNORECASE)
LATIN_LETTERS_PATTERN = re.compile(r'[a-zA-Z]')


def is_valid_http_url(value):
    """الحقول الاختيارية الفارغة صالحة، وغيرها يجب أن يكون رابط http أو https"""
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    value = value.strip()
    if not value:
        return True
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def clean_duplicated_url(url):
    """رابط ملصوق مرتين متتاليتين مثل https://a.com/xhttps://a.com/x يعاد مرة واحدة

    الروابط التي تحتوي رابطاً آخر (أرشيف الإنترنت، روابط التحويل) تبقى كما هي.
    """
    if not url or len(url) % 2:
        return url
    half = url[:len(url) // 2]
    if HTTP_URL_PATTERN.match(half) and url == half * 2:
        return half
    return url


def validate_http_url(value):
    if not HTTP_URL_PATTERN.match(value or '') or not is_valid_http_url(value):
        raise ValidationError(_('يجب أن يكون الرابط صالحاً ويبدأ بـ http:// أو https://'), code='invalid_url')


def validate_no_latin_letters(value):
    if LATIN_LETTERS_PATTERN.search(value or ''):
        raise ValidationError(_('يجب كتابة السؤال باللغة العربية فقط'), code='latin_letters')


class HttpUrlField(forms.CharField):
    """حقل رابط يقبل http/https فقط، والقيمة الفارغة تعني مسح الحقل"""

    def __init__(self, *, clearable=True, **kwargs):
        self.clearable = clearable
        kwargs.setdefault('strip', True)
        super().__init__(**kwargs)

    def clean(self, value):
        value = super().clean(value)
        if value in self.empty_values:
            return '' if self.clearable else value
        value = clean_duplicated_url(value)
        validate_http_url(value)
        return value


def parse_id(value):
    """المعرفات UUID، والقيمة غير الصالحة تعامل كمعرف غير موجود"""
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None
