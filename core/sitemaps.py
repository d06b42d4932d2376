# core/sitemaps.py

import logging

from django.conf import settings
from django.contrib.sitemaps import Sitemap
from django.db import DatabaseError
from django.shortcuts import render
from django.utils import timezone
from django.views.decorators.http import require_GET

from content.models import Collection, Resource

logger = logging.getLogger(__name__)

STATIC_PAGES = [
    ('/', 1.0),
    ('/biography', 0.8),
    ('/library/books', 0.8),
    ('/library/audio', 0.8),
    ('/fatawa', 0.8),
    ('/resources', 0.8),
    ('/search', 0.8),
]


class StaticPagesSitemap(Sitemap):
    changefreq = 'weekly'

    def items(self):
        return STATIC_PAGES

    def location(self, item):
        return item[0]

    def priority(self, item):
        return item[1]

    def lastmod(self, item):
        return timezone.now()


class CollectionSitemap(Sitemap):
    changefreq = 'weekly'
    priority = 0.7

    def items(self):
        return Collection.objects.order_by('name')[:settings.SITEMAP_MAX_COLLECTIONS]

    def location(self, item):
        return f'/library/collections/{item.pk}'

    def lastmod(self, item):
        return item.updated_at or timezone.now()


class ResourceSitemap(Sitemap):
    """روابط المواد الخارجية كما هي"""
    changefreq = 'monthly'
    priority = 0.5

    def items(self):
        return Resource.objects.order_by('-created_at')[:settings.SITEMAP_MAX_RESOURCES]

    def location(self, item):
        return item.url

    def lastmod(self, item):
        return item.updated_at or timezone.now()


SITEMAPS = [StaticPagesSitemap, CollectionSitemap, ResourceSitemap]


def _absolute(location):
    if location.startswith(('http://', 'https://')):
        return location
    return f'{settings.SITE_URL}{location}'


def _attribute(sitemap, name, item):
    value = getattr(sitemap, name)
    return value(item) if callable(value) else value


def build_urlset(sitemap):
    urls = []
    for item in sitemap.items():
        urls.append({
            'location': _absolute(sitemap.location(item)),
            'lastmod': _attribute(sitemap, 'lastmod', item),
            'changefreq': _attribute(sitemap, 'changefreq', item),
            'priority': f"{_attribute(sitemap, 'priority', item):.1f}",
        })
    return urls


@require_GET
def sitemap_view(request):
    """خريطة الموقع: الصفحات الثابتة دائماً، ثم المجموعات والمواد إن أمكن"""
    urlset = build_urlset(StaticPagesSitemap())
    for sitemap_class in SITEMAPS[1:]:
        try:
            urlset.extend(build_urlset(sitemap_class()))
        except DatabaseError as e:
            logger.error(f'تعذر قراءة {sitemap_class.__name__} لخريطة الموقع: {e}')

    response = render(request, 'core/sitemap.xml', {'urlset': urlset}, content_type='application/xml')
    response['Cache-Control'] = 'public, s-maxage=86400, stale-while-revalidate'
    return response
