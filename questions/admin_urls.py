# questions/admin_urls.py

from django.urls import path

from . import views

urlpatterns = [
    path('questions', views.QuestionListView.as_view(), name='admin_questions'),
    path('questions/<str:question_id>/answer', views.AnswerQuestionView.as_view(), name='answer_question'),
    path('questions/<str:question_id>/reject', views.RejectQuestionView.as_view(), name='reject_question'),
]
