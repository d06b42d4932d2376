# scholar_portal/celery.py

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'scholar_portal.settings')

app = Celery('scholar_portal')

# قراءة إعدادات CELERY_* من إعدادات Django
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()
