# content/admin_urls.py

from django.urls import path

from .views import admin_views

urlpatterns = [
    path('collections', admin_views.CollectionListCreateView.as_view(), name='admin_collections'),
    path('collections/<str:collection_id>', admin_views.CollectionDetailView.as_view(), name='admin_collection_detail'),
    path('collections/<str:collection_id>/cover', admin_views.CollectionCoverView.as_view(), name='admin_collection_cover'),
    path('resources', admin_views.ResourceListCreateView.as_view(), name='admin_resources'),
    path('resources/<str:resource_id>', admin_views.ResourceDetailView.as_view(), name='admin_resource_detail'),
    path('resources/<str:resource_id>/cover', admin_views.ResourceCoverView.as_view(), name='admin_resource_cover'),
]
