# content/views/admin_views.py

from dataclasses import replace

from core.api import AdminApiView, json_success
from .. import repository
from ..drafts import collections_for_resource_type
from ..labels import DEFAULT_LOCALE, collection_display
from ..filters import (
    ALL,
    ListCriteria,
    filter_collections,
    filter_resources,
    group_by_collection,
    with_positions,
)


def wants_grouping(request):
    return request.GET.get('group', '').lower() in ('1', 'true', 'yes')


class CollectionListCreateView(AdminApiView):
    """قائمة المجموعات وإنشاء مجموعة جديدة"""

    def get(self, request):
        criteria = ListCriteria.from_query_params(request.GET)
        collections = filter_collections(repository.list_collections(), criteria)
        resource_type = request.GET.get('resource_type')
        if resource_type:
            # المجموعات التي يمكن ربط مادة من هذا النوع بها في نموذج المادة
            collections = collections_for_resource_type(collections, resource_type)
        return json_success(collections, count=len(collections))

    def post(self, request):
        collection = repository.create_collection(self.get_json())
        return json_success(collection.as_dict(), status=201, message='Collection created successfully')


class CollectionDetailView(AdminApiView):

    def patch(self, request, collection_id):
        collection = repository.update_collection(collection_id, self.get_json())
        return json_success(collection.as_dict(), message='Collection updated successfully')

    def delete(self, request, collection_id):
        repository.delete_collection(collection_id)
        return json_success(message='Collection deleted successfully. Its resources were unlinked, not deleted.')


class CollectionCoverView(AdminApiView):
    """رفع صورة الغلاف ثم ربط رابطها بالمجموعة"""

    def post(self, request, collection_id):
        collection = repository.attach_collection_cover(collection_id, request.FILES.get('file'))
        return json_success(collection.as_dict(), message='Cover image updated successfully')


class ResourceListCreateView(AdminApiView):
    """قائمة المواد مع التصفية والتجميع حسب المجموعة"""

    def get(self, request):
        criteria = ListCriteria.from_query_params(request.GET)
        grouped = wants_grouping(request)
        if grouped:
            # مرشح المجموعة لا ينطبق في العرض المجمع
            criteria = replace(criteria, collection=ALL)

        everything = repository.list_resources()
        resources = filter_resources(everything, criteria)

        if grouped:
            groups = group_by_collection(resources)
            return json_success(groups, count=len(resources), grouped=True)
        locale = request.GET.get('lang') or DEFAULT_LOCALE
        items = [
            dict(item, collection_display=collection_display(item, locale))
            for item in with_positions(resources, universe=everything)
        ]
        return json_success(items, count=len(items), grouped=False)

    def post(self, request):
        resource = repository.create_resource(self.get_json())
        return json_success(resource.as_dict(), status=201, message='Resource created successfully')


class ResourceDetailView(AdminApiView):

    def patch(self, request, resource_id):
        resource = repository.update_resource(resource_id, self.get_json())
        return json_success(resource.as_dict(), message='Resource updated successfully')

    def delete(self, request, resource_id):
        repository.delete_resource(resource_id)
        return json_success(message='Resource deleted successfully')


class ResourceCoverView(AdminApiView):

    def post(self, request, resource_id):
        resource = repository.attach_resource_cover(resource_id, request.FILES.get('file'))
        return json_success(resource.as_dict(), message='Cover image updated successfully')
