# content/views/public_views.py

from core.api import ApiView, json_success
from .. import repository
from ..filters import ListCriteria, filter_collections
from ..labels import DEFAULT_LOCALE, label_table


class PublicCollectionListView(ApiView):
    """المجموعات للصفحات العامة (الكتب، الصوتيات...) مرتبة بالاسم"""

    def get(self, request):
        criteria = ListCriteria.from_query_params(request.GET)
        collections = repository.list_collections(content_type=criteria.content_type)
        collections = filter_collections(collections, criteria)
        return json_success(collections, count=len(collections))


class PublicCollectionDetailView(ApiView):

    def get(self, request, collection_id):
        return json_success(repository.get_collection_with_resources(collection_id))


class PublicResourceListView(ApiView):
    """المواد للصفحات العامة، الأحدث أولاً"""

    def get(self, request):
        criteria = ListCriteria.from_query_params(request.GET)
        resources = repository.list_resources(criteria)
        return json_success(resources, count=len(resources))


class LabelsView(ApiView):
    """تسميات التعدادات باللغة المطلوبة"""

    def get(self, request):
        locale = request.GET.get('lang') or DEFAULT_LOCALE
        return json_success(label_table(locale))
