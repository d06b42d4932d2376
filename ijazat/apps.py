# ijazat/apps.py

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class IjazatConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ijazat'
    verbose_name = _('الإجازات العلمية')
