# ijazat/tests/test_api.py

import shutil
import tempfile
from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings

from core.tests.helpers import AdminClientMixin
from ijazat.models import Ijaza

MEDIA_ROOT = tempfile.mkdtemp()


def ijaza_payload(**overrides):
    payload = {
        'title_en': 'Ijazah in Sahih al-Bukhari',
        'title_ar': 'إجازة في صحيح البخاري',
        'issuer_en': 'Shaykh Example',
        'issuer_ar': 'الشيخ المثال',
        'description_en': 'Full chain of narration.',
        'description_ar': 'إسناد متصل.',
        'year': '1420',
        'category': 'Hadith',
        'pdf_url': 'https://example.com/ijaza.pdf',
    }
    payload.update(overrides)
    return payload


@override_settings(MEDIA_ROOT=MEDIA_ROOT, SITE_URL='https://portal.example.com')
class IjazatApiTests(AdminClientMixin, TestCase):

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def test_create_with_json(self):
        response = self.admin_request('post', '/api/admin/ijazat', data=ijaza_payload())
        self.assertEqual(response.status_code, 201)
        data = response.json()['data']
        self.assertEqual(data['title'], {'en': 'Ijazah in Sahih al-Bukhari', 'ar': 'إجازة في صحيح البخاري'})

    def test_pdf_is_required(self):
        response = self.admin_request('post', '/api/admin/ijazat', data=ijaza_payload(pdf_url=''))
        self.assertEqual(response.status_code, 400)
        self.assertIn('pdf_url', response.json()['errors'])

    def test_invalid_category(self):
        response = self.admin_request('post', '/api/admin/ijazat', data=ijaza_payload(category='Tafsir'))
        self.assertEqual(response.status_code, 400)

    def test_create_with_uploaded_pdf(self):
        payload = ijaza_payload(pdf_url='')
        payload['file'] = SimpleUploadedFile('ijaza.pdf', b'%PDF-1.4 test', content_type='application/pdf')
        response = self.client.post(
            '/api/admin/ijazat',
            data=payload,
            headers={'Authorization': f'Bearer {self.token}'},
        )
        self.assertEqual(response.status_code, 201)
        self.assertIn('/media/documents/ijazat/', response.json()['data']['pdf_url'])

    def test_invalid_payload_does_not_store_pdf(self):
        payload = ijaza_payload(pdf_url='', title_ar='')
        payload['file'] = SimpleUploadedFile('ijaza.pdf', b'%PDF-1.4 test', content_type='application/pdf')
        with mock.patch('ijazat.services.store_upload') as store:
            response = self.client.post(
                '/api/admin/ijazat',
                data=payload,
                headers={'Authorization': f'Bearer {self.token}'},
            )
        self.assertEqual(response.status_code, 400)
        self.assertIn('title_ar', response.json()['errors'])
        store.assert_not_called()
        self.assertFalse(Ijaza.objects.exists())

    def test_public_list_newest_year_first(self):
        Ijaza.objects.create(**ijaza_payload(year='1415'))
        Ijaza.objects.create(**ijaza_payload(year='1430'))
        response = self.client.get('/api/ijazat')
        self.assertEqual([i['year'] for i in response.json()['data']], ['1430', '1415'])

    def test_delete(self):
        ijaza = Ijaza.objects.create(**ijaza_payload())
        response = self.admin_request('delete', f'/api/admin/ijazat/{ijaza.pk}')
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Ijaza.objects.exists())

        response = self.admin_request('delete', f'/api/admin/ijazat/{ijaza.pk}')
        self.assertEqual(response.status_code, 404)

    def test_admin_requires_token(self):
        response = self.client.get('/api/admin/ijazat')
        self.assertEqual(response.status_code, 401)
