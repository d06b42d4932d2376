# core/api.py

import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import View

from .auth import verify_request_token
from .exceptions import PortalError, ValidationFailedError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'An unexpected error occurred. Please try again later.'


def json_success(data=None, status=200, **extra):
    payload = {'success': True}
    if data is not None:
        payload['data'] = data
    payload.update(extra)
    return JsonResponse(payload, status=status, json_dumps_params={'ensure_ascii': False})


def json_error(error):
    """تحويل خطأ البوابة إلى استجابة JSON"""
    return JsonResponse(
        error.as_payload(),
        status=error.status_code,
        json_dumps_params={'ensure_ascii': False},
    )


def parse_json_body(request):
    """قراءة جسم الطلب كـ JSON (قاموس فقط)"""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationFailedError(message='Invalid JSON body.')
    if not isinstance(data, dict):
        raise ValidationFailedError(message='Request body must be a JSON object.')
    return data


@method_decorator(csrf_exempt, name='dispatch')
class ApiView(View):
    """الأساس لكل واجهات JSON: يحول أخطاء البوابة إلى رموز HTTP"""
    require_token = False

    def dispatch(self, request, *args, **kwargs):
        try:
            if self.require_token:
                request.firebase_user = verify_request_token(request)
            return super().dispatch(request, *args, **kwargs)
        except PortalError as e:
            if e.status_code >= 500:
                logger.error(f'خطأ في الخادم أثناء {request.method} {request.path}: {getattr(e, "detail", None) or e.message}')
            else:
                logger.info(f'رفض الطلب {request.method} {request.path} ({e.status_code}): {e.message}')
            return json_error(e)
        except Exception:
            logger.exception(f'خطأ غير متوقع أثناء {request.method} {request.path}')
            return JsonResponse({'success': False, 'error': GENERIC_ERROR_MESSAGE}, status=500)

    def get_json(self):
        return parse_json_body(self.request)

    def http_method_not_allowed(self, request, *args, **kwargs):
        return JsonResponse({'success': False, 'error': 'Method not allowed.'}, status=405)


class AdminApiView(ApiView):
    """واجهات الإدارة: كل الطرق تتطلب رمز هوية صالحاً"""
    require_token = True
