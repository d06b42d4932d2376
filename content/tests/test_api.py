# content/tests/test_api.py

from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase

from content.models import Collection, Resource
from core.exceptions import UploadError
from core.tests.helpers import AdminClientMixin, png_bytes


class AdminCollectionApiTests(AdminClientMixin, TestCase):

    def test_create_and_conflict(self):
        payload = {'name': 'X', 'collection_content_type': 'book', 'category': 'fiqh'}
        response = self.admin_request('post', '/api/admin/collections', data=payload)
        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.json()['success'])

        response = self.admin_request('post', '/api/admin/collections', data=payload)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            response.json()['error'],
            'A collection with this name, content type, and category already exists.',
        )

    def test_create_invalid_returns_field_errors(self):
        response = self.admin_request('post', '/api/admin/collections', data={'name': ''})
        self.assertEqual(response.status_code, 400)
        errors = response.json()['errors']
        self.assertIn('name', errors)
        self.assertIn('collection_content_type', errors)

    def test_patch_and_delete(self):
        collection = Collection.objects.create(name='X', collection_content_type='book')
        resource = Resource.objects.create(
            title='كتاب', type='pdf', language='ar', category='fiqh',
            url='https://example.com/k.pdf', collection=collection,
        )

        response = self.admin_request('patch', f'/api/admin/collections/{collection.pk}', data={'name': 'Y'})
        self.assertEqual(response.json()['data']['name'], 'Y')

        response = self.admin_request('delete', f'/api/admin/collections/{collection.pk}')
        self.assertEqual(response.status_code, 200)
        resource.refresh_from_db()
        self.assertIsNone(resource.collection_id)

        response = self.admin_request('delete', f'/api/admin/collections/{collection.pk}')
        self.assertEqual(response.status_code, 404)

    def test_list_filters_by_content_type(self):
        Collection.objects.create(name='أ', collection_content_type='book')
        Collection.objects.create(name='ب', collection_content_type='audio')
        response = self.admin_request('get', '/api/admin/collections?content_type=audio')
        self.assertEqual([c['name'] for c in response.json()['data']], ['ب'])


class AdminResourceApiTests(AdminClientMixin, TestCase):

    def setUp(self):
        super().setUp()
        self.collection = Collection.objects.create(name='شرح كتاب التوحيد', collection_content_type='book')
        for index in range(2):
            Resource.objects.create(
                title=f'الجزء {index + 1}', type='pdf', language='ar', category='aqidah',
                url=f'https://example.com/part-{index + 1}.pdf', collection=self.collection,
            )
        Resource.objects.create(title='مقال', type='article', language='ar', category='fiqh', url='https://example.com/a')

    def test_grouped_listing(self):
        response = self.admin_request('get', '/api/admin/resources?group=1&collection=none')
        body = response.json()
        self.assertTrue(body['grouped'])
        self.assertEqual(body['count'], 3)
        self.assertEqual(sum(group['count'] for group in body['data']), 3)

    def test_flat_listing_has_positions_and_display(self):
        response = self.admin_request('get', f'/api/admin/resources?collection={self.collection.pk}&lang=ar')
        items = response.json()['data']
        self.assertEqual(len(items), 2)
        positions = sorted(item['position'] for item in items)
        self.assertEqual(positions, [1, 2])
        self.assertTrue(all(item['collection_display'].startswith('شرح كتاب التوحيد (') for item in items))

    def test_create_duplicate_url(self):
        payload = {
            'title': 'نسخة', 'type': 'pdf', 'language': 'ar', 'category': 'aqidah',
            'url': 'https://example.com/part-1.pdf',
        }
        response = self.admin_request('post', '/api/admin/resources', data=payload)
        self.assertEqual(response.status_code, 409)

    def test_patch_sends_only_changes(self):
        resource = Resource.objects.get(title='مقال')
        response = self.admin_request('patch', f'/api/admin/resources/{resource.pk}', data={'title': 'مقال محدث'})
        self.assertEqual(response.status_code, 200)
        resource.refresh_from_db()
        self.assertEqual(resource.title, 'مقال محدث')
        self.assertEqual(resource.url, 'https://example.com/a')

    def test_delete_unknown_resource(self):
        response = self.admin_request('delete', '/api/admin/resources/00000000-0000-0000-0000-000000000000')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()['error'], 'Resource not found for deletion.')


class PublicApiTests(TestCase):

    def test_public_lists_need_no_token(self):
        collection = Collection.objects.create(name='سلسلة', collection_content_type='audio')
        Resource.objects.create(
            title='درس', type='audio', language='ar', category='fiqh',
            url='https://example.com/d.mp3', collection=collection,
        )

        response = self.client.get('/api/collections?content_type=audio')
        self.assertEqual(response.json()['count'], 1)

        response = self.client.get(f'/api/collections/{collection.pk}')
        self.assertEqual(len(response.json()['data']['resources']), 1)

        response = self.client.get('/api/resources?type=audio,video')
        self.assertEqual(response.json()['count'], 1)

    def test_unknown_collection(self):
        response = self.client.get('/api/collections/not-a-uuid')
        self.assertEqual(response.status_code, 404)

    def test_labels(self):
        response = self.client.get('/api/labels?lang=en')
        types = {entry['value']: entry['label'] for entry in response.json()['data']['type']}
        self.assertEqual(types['pdf'], 'PDF Document')


class CoverAttachTests(AdminClientMixin, TestCase):
    uploaded_url = 'https://portal.example.com/media/covers/new.png'

    def setUp(self):
        super().setUp()
        self.collection = Collection.objects.create(name='سلسلة', collection_content_type='audio')
        self.resource = Resource.objects.create(
            title='درس', type='audio', language='ar', category='fiqh',
            url='https://example.com/d.mp3', cover_image_url='https://example.com/old.png',
        )

    def post_cover(self, path):
        upload = SimpleUploadedFile('cover.png', png_bytes(), content_type='image/png')
        return self.client.post(path, data={'file': upload}, headers={'Authorization': f'Bearer {self.token}'})

    def test_resource_cover_is_uploaded_then_attached(self):
        with mock.patch('content.drafts.store_upload', return_value=self.uploaded_url) as store:
            response = self.post_cover(f'/api/admin/resources/{self.resource.pk}/cover')
        self.assertEqual(response.status_code, 200)
        store.assert_called_once()
        self.resource.refresh_from_db()
        self.assertEqual(self.resource.cover_image_url, self.uploaded_url)
        self.assertEqual(self.resource.title, 'درس')

    def test_collection_cover(self):
        with mock.patch('content.drafts.store_upload', return_value=self.uploaded_url):
            response = self.post_cover(f'/api/admin/collections/{self.collection.pk}/cover')
        self.assertEqual(response.json()['data']['cover_image_url'], self.uploaded_url)

    def test_failed_upload_keeps_previous_cover(self):
        with mock.patch('content.drafts.store_upload', side_effect=UploadError('نوع الملف غير مدعوم')):
            response = self.post_cover(f'/api/admin/resources/{self.resource.pk}/cover')
        self.assertEqual(response.status_code, 400)
        self.resource.refresh_from_db()
        self.assertEqual(self.resource.cover_image_url, 'https://example.com/old.png')

    def test_unknown_resource(self):
        response = self.post_cover('/api/admin/resources/00000000-0000-0000-0000-000000000000/cover')
        self.assertEqual(response.status_code, 404)


class CollectionsForResourceTypeApiTests(AdminClientMixin, TestCase):

    def test_collections_matching_resource_type(self):
        Collection.objects.create(name='كتب', collection_content_type='book')
        Collection.objects.create(name='دروس', collection_content_type='audio')
        response = self.admin_request('get', '/api/admin/collections?resource_type=pdf')
        self.assertEqual([c['name'] for c in response.json()['data']], ['كتب'])
