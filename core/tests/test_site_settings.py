# core/tests/test_site_settings.py

from django.test import SimpleTestCase, TestCase

from content.models import Resource
from core.exceptions import ConflictError, ValidationFailedError
from core.models import SiteSettings, normalize_featured, render_footer
from .helpers import AdminClientMixin


class NormalizeFeaturedTests(SimpleTestCase):

    def test_pads_to_fixed_length(self):
        self.assertEqual(normalize_featured(['a'], count=3), ['a', None, None])

    def test_truncates_and_maps_empty_slots(self):
        self.assertEqual(
            normalize_featured(['a', '', 'null_option', 'd'], count=3),
            ['a', None, None],
        )

    def test_non_list_becomes_empty_slots(self):
        self.assertEqual(normalize_featured(None, count=3), [None, None, None])

    def test_footer_year_substitution(self):
        self.assertEqual(render_footer('© {year}', 'en', 2025), '© 2025')
        self.assertEqual(render_footer('© {year}', 'ar', 2025), '© ٢٠٢٥')


class SiteSettingsModelTests(TestCase):

    def test_single_row(self):
        first = SiteSettings.get_settings()
        SiteSettings(site_title_en='Other').save()
        self.assertEqual(SiteSettings.objects.count(), 1)
        self.assertEqual(first.pk, 1)

    def test_featured_always_has_fixed_length(self):
        self.assertEqual(len(SiteSettings.get_settings().featured_resource_ids), 3)

    def test_merge_keeps_fields_not_sent(self):
        before = SiteSettings.get_settings()
        updated = SiteSettings.update_with_merge({'site_title_en': 'New Title'})
        self.assertEqual(updated.site_title_en, 'New Title')
        self.assertEqual(updated.site_title_ar, before.site_title_ar)
        self.assertEqual(updated.version, before.version + 1)

    def test_stale_version_conflicts(self):
        current = SiteSettings.get_settings()
        SiteSettings.update_with_merge({'site_title_en': 'A', 'version': current.version})
        with self.assertRaises(ConflictError):
            SiteSettings.update_with_merge({'site_title_en': 'B', 'version': current.version})

    def test_featured_must_be_a_list(self):
        before = SiteSettings.get_settings().featured_resource_ids
        with self.assertRaises(ValidationFailedError) as ctx:
            SiteSettings.update_with_merge({'featured_resource_ids': 'not-a-list'})
        self.assertIn('featured_resource_ids', ctx.exception.errors)
        self.assertEqual(SiteSettings.get_settings().featured_resource_ids, before)

    def test_featured_ids_must_be_uuids(self):
        with self.assertRaises(ValidationFailedError):
            SiteSettings.update_with_merge({'featured_resource_ids': ['a', 'b', 'c']})

    def test_featured_accepts_uuids_and_empty_slots(self):
        resource_id = '8a6e0804-2bd0-4672-b79d-d97027f9071a'
        updated = SiteSettings.update_with_merge({'featured_resource_ids': [resource_id, 'null_option', '']})
        self.assertEqual(updated.featured_resource_ids, [resource_id, None, None])

    def test_version_sent_as_string(self):
        current = SiteSettings.get_settings()
        updated = SiteSettings.update_with_merge({'site_title_en': 'A', 'version': str(current.version)})
        self.assertEqual(updated.version, current.version + 1)

    def test_non_numeric_version_is_rejected(self):
        for version in ('three', True, 1.5):
            with self.assertRaises(ValidationFailedError):
                SiteSettings.update_with_merge({'site_title_en': 'A', 'version': version})

    def test_unknown_field_is_rejected(self):
        with self.assertRaises(ValidationFailedError) as ctx:
            SiteSettings.update_with_merge({'theme': 'dark'})
        self.assertIn('theme', ctx.exception.errors)

    def test_invalid_email_is_rejected(self):
        with self.assertRaises(ValidationFailedError) as ctx:
            SiteSettings.update_with_merge({'contact_email': 'not-an-email'})
        self.assertIn('contact_email', ctx.exception.errors)


class SiteSettingsApiTests(AdminClientMixin, TestCase):

    def test_admin_patch(self):
        response = self.admin_request('patch', '/api/admin/site-settings', data={'contact_email': 'info@example.com'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['contact_email'], 'info@example.com')

    def test_admin_patch_requires_token(self):
        response = self.client.patch('/api/admin/site-settings', data='{}', content_type='application/json')
        self.assertEqual(response.status_code, 401)

    def test_public_read(self):
        response = self.client.get('/api/site-settings')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()['data']['featured_resource_ids']), 3)


class HomeTests(TestCase):

    def make_resource(self, title, url):
        return Resource.objects.create(title=title, type='pdf', language='ar', category='fiqh', url=url)

    def test_featured_in_slot_order_skipping_missing(self):
        first = self.make_resource('الأولى', 'https://example.com/1')
        second = self.make_resource('الثانية', 'https://example.com/2')
        site_settings = SiteSettings.get_settings()
        site_settings.featured_resource_ids = [str(second.pk), None, str(first.pk)]
        site_settings.save()
        second.delete()

        response = self.client.get('/api/home?lang=en')
        data = response.json()['data']
        self.assertEqual([item['id'] for item in data['featured_resources']], [str(first.pk)])

    def test_footer_uses_current_year(self):
        SiteSettings.update_with_merge({'footer_text_en': '© {year} Portal'})
        response = self.client.get('/api/home?lang=en')
        self.assertNotIn('{year}', response.json()['data']['footer_text'])


class SiteSettingsPatchValidationTests(AdminClientMixin, TestCase):

    def test_non_list_featured_is_400(self):
        response = self.admin_request('patch', '/api/admin/site-settings', data={'featured_resource_ids': 'x'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('featured_resource_ids', response.json()['errors'])
