# ijazat/views.py

from core.api import AdminApiView, ApiView, json_success
from . import services


class IjazaListView(ApiView):

    def get(self, request):
        return json_success(services.list_ijazat())


class AdminIjazaListCreateView(AdminApiView):
    """قائمة الإجازات وإضافتها، بـ JSON أو multipart مع الملف"""

    def get(self, request):
        return json_success(services.list_ijazat())

    def post(self, request):
        if request.content_type == 'multipart/form-data':
            payload = request.POST.dict()
            pdf_file = request.FILES.get('file')
        else:
            payload = self.get_json()
            pdf_file = None
        ijaza = services.create_ijaza(payload, pdf_file=pdf_file)
        return json_success(ijaza.as_dict(), status=201, message='Ijaza added successfully')


class AdminIjazaDetailView(AdminApiView):

    def delete(self, request, ijaza_id):
        services.delete_ijaza(ijaza_id)
        return json_success(message='Ijaza deleted successfully')
