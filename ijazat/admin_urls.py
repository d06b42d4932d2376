# ijazat/admin_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('ijazat', views.AdminIjazaListCreateView.as_view(), name='admin_ijazat'),
    path('ijazat/<str:ijaza_id>', views.AdminIjazaDetailView.as_view(), name='admin_ijaza_detail'),
]
