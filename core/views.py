# core/views.py

import logging
from urllib.parse import urlparse

import requests
from django.http import JsonResponse

from content.models import Resource
from .api import AdminApiView, ApiView, json_success
from .exceptions import ValidationFailedError
from .models import SiteSettings
from .uploads import store_upload
from .validators import is_valid_http_url, parse_id

logger = logging.getLogger(__name__)

LINK_CHECK_TIMEOUT = 10


def request_locale(request):
    locale = request.GET.get('lang') or getattr(request, 'LANGUAGE_CODE', 'ar')
    return 'en' if locale == 'en' else 'ar'


def featured_resources(site_settings):
    """المواد المميزة بترتيب خاناتها، مع تجاهل الخانات الفارغة والمحذوفة"""
    slots = [parse_id(value) for value in site_settings.featured_resource_ids]
    wanted = [pk for pk in slots if pk is not None]
    found = {
        resource.pk: resource
        for resource in Resource.objects.filter(pk__in=wanted).select_related('collection')
    }
    return [found[pk].as_dict() for pk in wanted if pk in found]


class HomeView(ApiView):
    """بيانات الصفحة الرئيسية"""

    def get(self, request):
        locale = request_locale(request)
        site_settings = SiteSettings.get_settings()
        return json_success({
            'site_title': site_settings.site_title(locale),
            'footer_text': site_settings.footer_text(locale),
            'contact_email': site_settings.contact_email,
            'featured_resources': featured_resources(site_settings),
        })


class PublicSiteSettingsView(ApiView):

    def get(self, request):
        return json_success(SiteSettings.get_settings().as_dict())


class AdminSiteSettingsView(AdminApiView):
    """قراءة إعدادات الموقع وتحديثها بالدمج"""

    def get(self, request):
        return json_success(SiteSettings.get_settings().as_dict())

    def patch(self, request):
        site_settings = SiteSettings.update_with_merge(self.get_json())
        return json_success(site_settings.as_dict(), message='Site settings saved successfully')


class UploadView(AdminApiView):
    """المرحلة الأولى من الإرفاق: رفع الملف وإرجاع رابطه العام"""

    def post(self, request):
        folder = request.POST.get('folder') or 'covers'
        file_url = store_upload(request.FILES.get('file'), folder)
        return json_success({'file_url': file_url}, status=201)


class LinkCheckView(AdminApiView):
    """فحص إمكانية الوصول لرابط قبل حفظه في مادة"""

    def post(self, request):
        url = (self.get_json().get('url') or '').strip()
        if not url:
            raise ValidationFailedError({'url': ['الرابط مطلوب']})

        parsed = urlparse(url)
        if not is_valid_http_url(url) or not parsed.netloc:
            raise ValidationFailedError({'url': ['صيغة الرابط غير صحيحة']})

        try:
            response = requests.head(url, timeout=LINK_CHECK_TIMEOUT, allow_redirects=True)
        except requests.RequestException as e:
            logger.info(f'لا يمكن الوصول للرابط {url}: {e}')
            return json_success({'url': url, 'is_accessible': False})

        return json_success({
            'url': url,
            'is_accessible': response.status_code < 400,
            'status_code': response.status_code,
            'content_type': response.headers.get('content-type', ''),
            'final_url': response.url,
        })


def custom_404(request, exception=None):
    return JsonResponse({'success': False, 'error': 'Not found.'}, status=404)


def custom_500(request):
    return JsonResponse({'success': False, 'error': 'An unexpected error occurred. Please try again later.'}, status=500)
