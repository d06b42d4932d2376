# content/uniqueness.py

import logging
from contextlib import contextmanager

from django.db import IntegrityError, transaction

from core.exceptions import ConflictError
from .models import Collection, Resource

logger = logging.getLogger(__name__)

COLLECTION_CONFLICT_MESSAGE = 'A collection with this name, content type, and category already exists.'
RESOURCE_URL_CONFLICT_MESSAGE = 'A resource with this URL already exists.'


def _null_safe(field, value):
    # NULL لا يساوي NULL في SQL
    if value in (None, ''):
        return {f'{field}__isnull': True}
    return {field: value}


def ensure_collection_unique(name, content_type, category, exclude_id=None):
    """فحص مسبق لتفرد الثلاثية (الاسم، نوع المحتوى، التصنيف)"""
    queryset = Collection.objects.filter(
        name=name,
        **_null_safe('collection_content_type', content_type),
        **_null_safe('category', category),
    )
    if exclude_id is not None:
        queryset = queryset.exclude(pk=exclude_id)
    if queryset.exists():
        logger.info(f'مجموعة مكررة: {name} / {content_type} / {category}')
        raise ConflictError(COLLECTION_CONFLICT_MESSAGE)


def ensure_resource_url_unique(url, exclude_id=None):
    queryset = Resource.objects.filter(url=url)
    if exclude_id is not None:
        queryset = queryset.exclude(pk=exclude_id)
    if queryset.exists():
        logger.info(f'رابط مادة مكرر: {url}')
        raise ConflictError(RESOURCE_URL_CONFLICT_MESSAGE)


UNIQUE_VIOLATION_PGCODE = '23505'


def is_unique_violation(error):
    cause = getattr(error, '__cause__', None)
    if getattr(cause, 'pgcode', None) == UNIQUE_VIOLATION_PGCODE:
        return True
    if getattr(getattr(cause, 'diag', None), 'sqlstate', None) == UNIQUE_VIOLATION_PGCODE:
        return True
    text = str(error)
    return 'UNIQUE constraint failed' in text or 'Duplicate entry' in text


@contextmanager
def translate_integrity_error(message):
    """قيد التفرد في قاعدة البيانات هو المرجع النهائي عند السباق بين الكتّاب"""
    try:
        with transaction.atomic():
            yield
    except IntegrityError as e:
        if not is_unique_violation(e):
            raise
        logger.warning(f'انتهاك قيد تفرد في قاعدة البيانات: {e}')
        raise ConflictError(message)
