# core/admin_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('site-settings', views.AdminSiteSettingsView.as_view(), name='admin_site_settings'),
    path('uploads', views.UploadView.as_view(), name='admin_uploads'),
    path('link-check', views.LinkCheckView.as_view(), name='admin_link_check'),
]
