# content/drafts.py

"""مسودات نماذج الإدارة

تحتفظ المسودة بنسخة مستقلة من حقول الكيان أثناء التحرير، ومنها يحسب
الحمل الجزئي لطلب PATCH بحيث لا يرسل إلا ما تغير فعلاً.
"""

from dataclasses import dataclass, fields, replace
from typing import ClassVar, List, Optional, Tuple

from core.uploads import store_upload
from .models import CollectionContentType

EMPTY_VALUES = (None, '')


def _normalize(value):
    # undefined و null والنص الفارغ متساوية عند المقارنة
    if value in EMPTY_VALUES or value == []:
        return ''
    return value


@dataclass(frozen=True)
class CollectionDraft:
    name: str = ''
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None
    collection_content_type: Optional[str] = None

    primary_field: ClassVar[str] = 'name'
    required_enums: ClassVar[Tuple[str, ...]] = ('collection_content_type',)

    @classmethod
    def from_instance(cls, collection):
        return cls(
            name=collection.name,
            description=collection.description,
            cover_image_url=collection.cover_image_url,
            language=collection.language,
            category=collection.category,
            collection_content_type=collection.collection_content_type,
        )


@dataclass(frozen=True)
class ResourceDraft:
    title: str = ''
    description: Optional[str] = None
    type: Optional[str] = None
    language: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    url: str = ''
    cover_image_url: Optional[str] = None
    collection_id: Optional[str] = None

    primary_field: ClassVar[str] = 'title'
    required_enums: ClassVar[Tuple[str, ...]] = ('type', 'language', 'category')

    @classmethod
    def from_instance(cls, resource):
        return cls(
            title=resource.title,
            description=resource.description,
            type=resource.type,
            language=resource.language,
            category=resource.category,
            tags=list(resource.tags) if resource.tags else None,
            url=resource.url,
            cover_image_url=resource.cover_image_url,
            collection_id=str(resource.collection_id) if resource.collection_id else None,
        )


def field_names(draft):
    return [f.name for f in fields(draft)]


def merge_changes(draft, changes):
    """مسودة جديدة بعد تطبيق التغييرات المعروفة فقط"""
    known = {name: value for name, value in changes.items() if name in field_names(draft)}
    return replace(draft, **known)


def _cleared_value(name):
    if name == 'tags':
        return []
    if name == 'collection_id':
        return None
    return ''


def diff_payload(original, draft):
    """الحقول التي تغيرت فقط، مع الحقل الرئيسي دائماً"""
    payload = {}
    for name in field_names(draft):
        old_value = getattr(original, name)
        new_value = getattr(draft, name)
        if _normalize(old_value) == _normalize(new_value):
            continue
        if _normalize(new_value) == '':
            # لا يرسل تعداد مطلوب فارغاً أبداً
            if name in draft.required_enums:
                continue
            payload[name] = _cleared_value(name)
        else:
            payload[name] = new_value

    primary = draft.primary_field
    payload[primary] = getattr(draft, primary)
    return payload


def attach_upload(draft, field_name, uploaded_file, folder='covers'):
    """رفع الملف أولاً ثم وضع رابطه في المسودة كأي حقل نصي

    عند فشل الرفع يُرفع UploadError وتبقى المسودة الأصلية كما هي.
    """
    if field_name not in field_names(draft):
        raise ValueError(f'حقل غير معروف في المسودة: {field_name}')
    url = store_upload(uploaded_file, folder)
    return replace(draft, **{field_name: url})


# أنواع المواد وأنواع المجموعات المناسبة لها
RESOURCE_TYPE_TO_COLLECTION_TYPE = {
    'pdf': CollectionContentType.BOOK,
    'article': CollectionContentType.BOOK,
    'audio': CollectionContentType.AUDIO,
    'video': CollectionContentType.VIDEO,
}


def collections_for_resource_type(collections, resource_type):
    """المجموعات التي يمكن ربط مادة من هذا النوع بها"""
    known_types = set(CollectionContentType.values)
    target = RESOURCE_TYPE_TO_COLLECTION_TYPE.get(resource_type)
    if target is not None:
        return [c for c in collections if c.get('collection_content_type') == target]
    # الصور والأنواع الأخرى: مجموعات بلا نوع أو بنوع غير معروف
    return [c for c in collections if c.get('collection_content_type') not in known_types]
