# questions/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Question


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ['short_text', 'email', 'category', 'status', 'submitted_at', 'answered_at']
    list_filter = ['status', 'category', 'submitted_at']
    search_fields = ['email', 'question_text']
    readonly_fields = ['submitted_at', 'answered_at', 'status', 'answer_youtube_link', 'rejection_reason']
    date_hierarchy = 'submitted_at'

    fieldsets = [
        (_('السؤال'), {
            'fields': ('email', 'category', 'question_text')
        }),
        (_('المراجعة'), {
            'fields': ('status', 'answer_youtube_link', 'rejection_reason', 'submitted_at', 'answered_at')
        }),
    ]

    def short_text(self, obj):
        return obj.question_text[:60]
    short_text.short_description = _('نص السؤال')
