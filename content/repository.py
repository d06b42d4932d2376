# content/repository.py

"""واجهة CRUD للمجموعات والمواد

كل عمليات الكتابة هنا تفترض أن بوابة الوصول تحققت من رمز الهوية مسبقاً.
"""

import logging

from django.db import DatabaseError, transaction

from core.exceptions import NotFoundError, ValidationFailedError
from core.validators import parse_id
from .drafts import CollectionDraft, ResourceDraft, attach_upload, diff_payload, merge_changes
from .filters import filter_resources
from .forms import CollectionForm, ResourceForm
from .models import Collection, Resource
from .uniqueness import (
    COLLECTION_CONFLICT_MESSAGE,
    RESOURCE_URL_CONFLICT_MESSAGE,
    ensure_collection_unique,
    ensure_resource_url_unique,
    translate_integrity_error,
)

logger = logging.getLogger(__name__)

COLLECTION_TRIPLE = ('name', 'collection_content_type', 'category')


def empty_to_null(data):
    """النص الفارغ يعني مسح الحقل، ويخزن null"""
    return {key: (None if value == '' else value) for key, value in data.items()}


def _resolve_collection(collection_id):
    if collection_id is None:
        return None
    pk = parse_id(collection_id)
    collection = Collection.objects.filter(pk=pk).first() if pk else None
    if collection is None:
        raise ValidationFailedError({'collection_id': ['المجموعة المحددة غير موجودة']})
    return collection


def _get_or_404(model, pk, message):
    pk = parse_id(pk)
    instance = model.objects.filter(pk=pk).first() if pk else None
    if instance is None:
        raise NotFoundError(message)
    return instance


# ===== القراءة =====

def list_resources(criteria=None):
    """كل المواد مع مجموعاتها، الأحدث أولاً"""
    queryset = Resource.objects.select_related('collection').order_by('-created_at')
    if criteria is not None and criteria.resource_types:
        queryset = queryset.filter(type__in=criteria.resource_types)
    items = [resource.as_dict() for resource in queryset]
    if criteria is None:
        return items
    return filter_resources(items, criteria)


def list_collections(content_type=None):
    queryset = Collection.objects.order_by('name')
    if content_type:
        queryset = queryset.filter(collection_content_type=content_type)
    return [collection.as_dict() for collection in queryset]


def get_collection_with_resources(collection_id):
    collection = _get_or_404(Collection, collection_id, 'Collection not found.')
    resources = collection.resources.select_related('collection').order_by('-created_at')
    data = collection.as_dict()
    data['resources'] = [resource.as_dict() for resource in resources]
    return data


# ===== المواد =====

def create_resource(payload):
    data = ResourceForm(payload).validated_data()
    ensure_resource_url_unique(data['url'])

    collection = _resolve_collection(data.pop('collection_id'))
    data = empty_to_null(data)

    with translate_integrity_error(RESOURCE_URL_CONFLICT_MESSAGE):
        resource = Resource.objects.create(collection=collection, **data)

    logger.info(f'تم إنشاء المادة: {resource.title} ({resource.pk})')
    return resource


def update_resource(resource_id, payload):
    resource = _get_or_404(Resource, resource_id, 'Resource not found.')
    data = ResourceForm(payload, partial=True).validated_data()

    if 'url' in data and data['url'] != resource.url:
        ensure_resource_url_unique(data['url'], exclude_id=resource.pk)

    current = ResourceDraft.from_instance(resource)
    changed = diff_payload(current, merge_changes(current, data))

    if 'collection_id' in data:
        resource.collection = _resolve_collection(data.pop('collection_id'))
    for field, value in empty_to_null(data).items():
        setattr(resource, field, value)

    with translate_integrity_error(RESOURCE_URL_CONFLICT_MESSAGE):
        resource.save()

    logger.info(f'تم تحديث المادة {resource.pk}: {sorted(changed)}')
    return resource


def attach_resource_cover(resource_id, uploaded_file):
    """رفع صورة الغلاف ثم حفظ رابطها كأي تعديل جزئي آخر"""
    resource = _get_or_404(Resource, resource_id, 'Resource not found.')
    current = ResourceDraft.from_instance(resource)
    draft = attach_upload(current, 'cover_image_url', uploaded_file)
    return update_resource(resource.pk, diff_payload(current, draft))


def delete_resource(resource_id):
    pk = parse_id(resource_id)
    deleted = Resource.objects.filter(pk=pk).delete()[0] if pk else 0
    if deleted == 0:
        raise NotFoundError('Resource not found for deletion.')
    logger.info(f'تم حذف المادة {resource_id}')


# ===== المجموعات =====

def create_collection(payload):
    data = CollectionForm(payload).validated_data()
    data = empty_to_null(data)
    ensure_collection_unique(data['name'], data['collection_content_type'], data.get('category'))

    with translate_integrity_error(COLLECTION_CONFLICT_MESSAGE):
        collection = Collection.objects.create(**data)

    logger.info(f'تم إنشاء المجموعة: {collection.name} ({collection.pk})')
    return collection


def update_collection(collection_id, payload):
    collection = _get_or_404(Collection, collection_id, 'Collection not found.')
    data = empty_to_null(CollectionForm(payload, partial=True).validated_data())

    current = CollectionDraft.from_instance(collection)
    candidate = merge_changes(current, data)
    changed = diff_payload(current, candidate)

    # يعاد فحص التفرد فقط إذا تغير أحد حقول الثلاثية
    if any(getattr(candidate, field) != getattr(current, field) for field in COLLECTION_TRIPLE):
        ensure_collection_unique(
            candidate.name,
            candidate.collection_content_type,
            candidate.category,
            exclude_id=collection.pk,
        )

    for field, value in data.items():
        setattr(collection, field, value)

    with translate_integrity_error(COLLECTION_CONFLICT_MESSAGE):
        collection.save()

    logger.info(f'تم تحديث المجموعة {collection.pk}: {sorted(changed)}')
    return collection


def attach_collection_cover(collection_id, uploaded_file):
    collection = _get_or_404(Collection, collection_id, 'Collection not found.')
    current = CollectionDraft.from_instance(collection)
    draft = attach_upload(current, 'cover_image_url', uploaded_file)
    return update_collection(collection.pk, diff_payload(current, draft))


def delete_collection(collection_id):
    """فك ارتباط المواد أولاً ثم حذف المجموعة، ولا تحذف المواد أبداً"""
    pk = parse_id(collection_id)
    if pk is None:
        raise NotFoundError('Collection not found for deletion.')

    try:
        with transaction.atomic():
            unlinked = Resource.objects.filter(collection_id=pk).update(collection=None)
        logger.info(f'تم فك ارتباط {unlinked} مادة من المجموعة {collection_id}')
    except DatabaseError as e:
        logger.error(f'فشل فك ارتباط المواد من المجموعة {collection_id}: {e}')

    deleted = Collection.objects.filter(pk=pk).delete()[0]
    if deleted == 0:
        raise NotFoundError('Collection not found for deletion.')

    logger.info(f'تم حذف المجموعة {collection_id}')
