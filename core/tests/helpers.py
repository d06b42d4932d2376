# core/tests/helpers.py

import io
import json
from unittest import mock

from PIL import Image


class AdminClientMixin:
    """طلبات واجهات الإدارة برمز هوية مقبول دون الاتصال بـ Firebase"""
    token = 'test-id-token'

    def setUp(self):
        super().setUp()
        app_patcher = mock.patch('core.auth.get_firebase_app', return_value=mock.sentinel.firebase_app)
        verify_patcher = mock.patch(
            'core.auth.firebase_auth.verify_id_token',
            return_value={'uid': 'admin-uid', 'email': 'admin@example.com'},
        )
        self.get_firebase_app = app_patcher.start()
        self.verify_id_token = verify_patcher.start()
        self.addCleanup(app_patcher.stop)
        self.addCleanup(verify_patcher.stop)

    def admin_request(self, method, path, data=None, **kwargs):
        headers = {'Authorization': f'Bearer {self.token}'}
        if data is not None:
            kwargs.update(data=json.dumps(data), content_type='application/json')
        return getattr(self.client, method)(path, headers=headers, **kwargs)


def png_bytes(size=(2, 2)):
    buffer = io.BytesIO()
    Image.new('RGB', size, color='white').save(buffer, 'PNG')
    return buffer.getvalue()
