# questions/api_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('questions', views.QuestionSubmitView.as_view(), name='submit_question'),
]
