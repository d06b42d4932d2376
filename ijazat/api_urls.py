# ijazat/api_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('ijazat', views.IjazaListView.as_view(), name='ijazat'),
]
