# content/filters.py

"""تصفية قوائم المواد والمجموعات وتجميعها

كل الدوال هنا نقية: تعمل على قوائم القواميس كما تعيدها as_dict()
ولا تعدل القائمة الأصلية ولا عناصرها.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

ALL = 'all'
NONE = 'none'
NO_COLLECTION_KEY = 'no-collection'
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class ListCriteria:
    query: str = ''
    category: Optional[str] = None
    language: Optional[str] = None
    collection: str = ALL
    content_type: Optional[str] = None
    resource_types: Tuple[str, ...] = ()

    @classmethod
    def from_query_params(cls, params):
        """بناء المعايير من معاملات الطلب، والقيمة 'all' تعني عدم التصفية"""
        def active(name):
            value = (params.get(name) or '').strip()
            return None if value in ('', ALL) else value

        types = params.get('type') or ''
        resource_types = tuple(t.strip() for t in types.split(',') if t.strip() and t.strip() != ALL)
        return cls(
            query=(params.get('q') or params.get('search') or '').strip(),
            category=active('category'),
            language=active('language'),
            collection=(params.get('collection') or ALL).strip() or ALL,
            content_type=active('content_type'),
            resource_types=resource_types,
        )


def _contains(value, needle):
    return isinstance(value, str) and needle in value.lower()


def matches_resource(item, criteria):
    if criteria.query:
        needle = criteria.query.lower()
        collection = item.get('collection') or {}
        if not (
            _contains(item.get('title'), needle)
            or _contains(item.get('description'), needle)
            or any(_contains(tag, needle) for tag in item.get('tags') or [])
            or _contains(collection.get('name'), needle)
        ):
            return False

    if criteria.category and item.get('category') != criteria.category:
        return False
    if criteria.language and item.get('language') != criteria.language:
        return False
    if criteria.resource_types and item.get('type') not in criteria.resource_types:
        return False
    if criteria.content_type:
        collection = item.get('collection') or {}
        if collection.get('collection_content_type') != criteria.content_type:
            return False

    if criteria.collection == NONE:
        if item.get('collection_id'):
            return False
    elif criteria.collection != ALL:
        if str(item.get('collection_id')) != criteria.collection:
            return False
    return True


def matches_collection(item, criteria):
    if criteria.query:
        needle = criteria.query.lower()
        if not (_contains(item.get('name'), needle) or _contains(item.get('description'), needle)):
            return False
    if criteria.category and item.get('category') != criteria.category:
        return False
    if criteria.language and item.get('language') != criteria.language:
        return False
    if criteria.content_type and item.get('collection_content_type') != criteria.content_type:
        return False
    return True


def filter_resources(items, criteria):
    return [item for item in items if matches_resource(item, criteria)]


def filter_collections(items, criteria):
    return [item for item in items if matches_collection(item, criteria)]


def _created_at_key(item):
    value = item.get('created_at')
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    return EARLIEST


def _sorted_oldest_first(items):
    # الترتيب مستقر عند تساوي التواريخ
    return sorted(items, key=_created_at_key)


def group_by_collection(items):
    """تقسيم المواد حسب المجموعة مع ترتيب كل مجموعة من الأقدم وترقيمها من 1

    المجموعات بترتيب أول ظهور لها في القائمة المدخلة.
    """
    buckets = {}
    for item in items:
        key = str(item['collection_id']) if item.get('collection_id') else NO_COLLECTION_KEY
        buckets.setdefault(key, []).append(item)

    groups = []
    for key, bucket in buckets.items():
        ordered = _sorted_oldest_first(bucket)
        first = ordered[0]
        groups.append({
            'key': key,
            'collection': None if key == NO_COLLECTION_KEY else first.get('collection'),
            'count': len(ordered),
            'items': [dict(item, position=index) for index, item in enumerate(ordered, start=1)],
        })
    return groups


def with_positions(items, universe=None):
    """نسخ العناصر مع ترتيب كل منها داخل مجموعته"""
    universe = items if universe is None else universe
    positions = {}
    for group in group_by_collection(universe):
        if group['key'] == NO_COLLECTION_KEY:
            continue
        for entry in group['items']:
            positions[entry['id']] = entry['position']
    return [dict(item, position=positions.get(item.get('id'))) for item in items]
