# scholar_portal/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.conf.urls.i18n import i18n_patterns

from core.sitemaps import sitemap_view

# URLs غير متعددة اللغات (واجهات JSON وخريطة الموقع)
urlpatterns = [
    # واجهات الإدارة، كلها تتطلب رمز هوية
    path('api/admin/', include('core.admin_urls')),
    path('api/admin/', include('content.admin_urls')),
    path('api/admin/', include('questions.admin_urls')),
    path('api/admin/', include('ijazat.admin_urls')),

    # الواجهات العامة
    path('api/', include('core.api_urls')),
    path('api/', include('content.api_urls')),
    path('api/', include('questions.api_urls')),
    path('api/', include('ijazat.api_urls')),

    path('sitemap.xml', sitemap_view, name='sitemap'),
]

# لوحة إدارة Django
urlpatterns += i18n_patterns(
    path('admin/', admin.site.urls),
    prefix_default_language=False,  # لا نريد /ar/ في الروابط العربية
)

# إعداد ملفات الوسائط في وضع التطوير
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# تخصيص صفحات الأخطاء
handler404 = 'core.views.custom_404'
handler500 = 'core.views.custom_500'
