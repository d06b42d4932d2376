# core/uploads.py

import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from PIL import Image, UnidentifiedImageError

from .exceptions import UploadError

logger = logging.getLogger(__name__)

# المجلدات المسموح بها وأنواع الملفات المقبولة في كل منها
UPLOAD_FOLDERS = {
    'covers': [
        'image/jpeg', 'image/png', 'image/gif', 'image/webp',
    ],
    'documents': [
        'application/pdf',
        'image/jpeg', 'image/png', 'image/webp',
    ],
    'media': [
        'audio/mpeg', 'audio/mp3', 'audio/wav', 'audio/ogg', 'audio/m4a', 'audio/x-m4a',
        'video/mp4', 'video/webm', 'video/ogg',
        'application/pdf',
    ],
}


def public_url(path):
    """رابط عام مطلق للملف المحفوظ"""
    url = default_storage.url(path)
    if url.startswith(('http://', 'https://')):
        return url
    return f'{settings.SITE_URL}{url}'


def verify_image(uploaded_file):
    try:
        with Image.open(uploaded_file) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise UploadError('الملف ليس صورة صالحة')
    finally:
        uploaded_file.seek(0)


def store_upload(uploaded_file, folder='covers', subfolder=None):
    """رفع ملف واحد إلى المخزن وإرجاع رابطه العام"""
    if uploaded_file is None:
        raise UploadError('لم يتم اختيار ملف')

    allowed_types = UPLOAD_FOLDERS.get(folder)
    if allowed_types is None:
        raise UploadError('مجلد الرفع غير مدعوم')

    content_type = getattr(uploaded_file, 'content_type', '') or ''
    if content_type not in allowed_types:
        raise UploadError('نوع الملف غير مدعوم')

    if uploaded_file.size > settings.UPLOAD_MAX_SIZE:
        raise UploadError('حجم الملف كبير جداً')

    if content_type.startswith('image/'):
        verify_image(uploaded_file)

    file_extension = os.path.splitext(uploaded_file.name)[1].lower()
    unique_filename = f'{uuid.uuid4().hex}{file_extension}'
    directory = f'{folder}/{subfolder}' if subfolder else folder
    file_path = f'{directory}/{unique_filename}'

    try:
        saved_path = default_storage.save(file_path, uploaded_file)
    except OSError as e:
        logger.error(f'فشل حفظ الملف {uploaded_file.name}: {e}')
        raise UploadError()

    logger.info(f'تم رفع الملف {uploaded_file.name} إلى {saved_path}')
    return public_url(saved_path)
