# core/checks.py

import json
import logging

from django.conf import settings
from django.core import checks

from .exceptions import ServerConfigurationError

logger = logging.getLogger(__name__)


def missing_environment():
    """أسماء متغيرات البيئة المطلوبة غير المعرفة (الأسماء فقط دون القيم)"""
    return [name for name in settings.REQUIRED_ENVIRONMENT if not getattr(settings, name, '')]


def check_environment():
    """التحقق من اكتمال الإعدادات، ويرفع ServerConfigurationError عند النقص"""
    missing = missing_environment()
    if missing:
        raise ServerConfigurationError(f'متغيرات بيئة مفقودة: {", ".join(missing)}')

    try:
        json.loads(settings.FIREBASE_ADMIN_SDK_CONFIG)
    except json.JSONDecodeError:
        raise ServerConfigurationError('FIREBASE_ADMIN_SDK_CONFIG ليس JSON صالحاً')

    logger.info('جميع متغيرات البيئة المطلوبة معرفة')


@checks.register(deploy=True)
def environment_check(app_configs, **kwargs):
    try:
        check_environment()
    except ServerConfigurationError as e:
        return [checks.Warning(e.detail, hint='راجع ملف .env', id='core.W001')]
    return []
