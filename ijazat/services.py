# ijazat/services.py

import logging

from core.exceptions import NotFoundError
from core.uploads import store_upload
from core.validators import parse_id
from .forms import IjazaForm
from .models import Ijaza

logger = logging.getLogger(__name__)


def list_ijazat():
    return [ijaza.as_dict() for ijaza in Ijaza.objects.order_by('-year', '-created_at')]


def create_ijaza(payload, pdf_file=None):
    """إنشاء إجازة، والملف المرفق لا يرفع إلا بعد نجاح التحقق من الحقول"""
    data = IjazaForm(payload, pdf_attached=pdf_file is not None).validated_data()
    if pdf_file is not None:
        data['pdf_url'] = store_upload(pdf_file, folder='documents', subfolder='ijazat')

    ijaza = Ijaza.objects.create(**data)
    logger.info(f'تمت إضافة الإجازة "{ijaza.title_ar}" ({ijaza.pk})')
    return ijaza


def delete_ijaza(ijaza_id):
    pk = parse_id(ijaza_id)
    deleted = Ijaza.objects.filter(pk=pk).delete()[0] if pk else 0
    if not deleted:
        raise NotFoundError('Ijaza not found for deletion.')
    logger.info(f'تم حذف الإجازة {pk}')
