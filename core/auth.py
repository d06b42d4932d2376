# core/auth.py

import json
import logging

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from django.conf import settings

from .exceptions import ServerConfigurationError, UnauthorizedError

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = 'scholar-portal-admin'


def get_firebase_app():
    """تهيئة تطبيق Firebase Admin مرة واحدة من إعدادات حساب الخدمة"""
    try:
        return firebase_admin.get_app(FIREBASE_APP_NAME)
    except ValueError:
        pass

    raw_config = settings.FIREBASE_ADMIN_SDK_CONFIG
    if not raw_config:
        raise ServerConfigurationError('FIREBASE_ADMIN_SDK_CONFIG غير معرف')

    try:
        service_account = json.loads(raw_config)
        credential = credentials.Certificate(service_account)
    except (json.JSONDecodeError, ValueError) as e:
        raise ServerConfigurationError(f'FIREBASE_ADMIN_SDK_CONFIG غير صالح: {type(e).__name__}')

    app = firebase_admin.initialize_app(credential, name=FIREBASE_APP_NAME)
    logger.info('تمت تهيئة Firebase Admin')
    return app


def extract_bearer_token(request):
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def verify_request_token(request):
    """التحقق من رمز الهوية قبل أي عمل على قاعدة البيانات"""
    token = extract_bearer_token(request)
    if token is None:
        raise UnauthorizedError('Unauthorized: Missing token')

    app = get_firebase_app()
    try:
        return firebase_auth.verify_id_token(token, app=app)
    except firebase_auth.ExpiredIdTokenError:
        raise UnauthorizedError('Unauthorized: Token expired')
    except (firebase_auth.InvalidIdTokenError, ValueError):
        raise UnauthorizedError('Unauthorized: Invalid token')

