# content/api_urls.py

from django.urls import path

from .views import public_views

urlpatterns = [
    path('collections', public_views.PublicCollectionListView.as_view(), name='public_collections'),
    path('collections/<str:collection_id>', public_views.PublicCollectionDetailView.as_view(), name='public_collection_detail'),
    path('resources', public_views.PublicResourceListView.as_view(), name='public_resources'),
    path('labels', public_views.LabelsView.as_view(), name='labels'),
]
