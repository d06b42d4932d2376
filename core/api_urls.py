# core/api_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('home', views.HomeView.as_view(), name='home'),
    path('site-settings', views.PublicSiteSettingsView.as_view(), name='public_site_settings'),
]
