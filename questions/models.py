# questions/models.py

import uuid

from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class QuestionCategory(models.TextChoices):
    AQIDAH = 'aqidah', _('العقيدة')
    AHADITH = 'ahadith', _('الأحاديث')
    FIQH = 'fiqh', _('الفقه')
    FAMILY = 'family', _('الأسرة')
    BUSINESS = 'business', _('المعاملات')
    PRAYER = 'prayer', _('الصلاة')
    MISCELLANEOUS = 'miscellaneous', _('متفرقات')


class QuestionStatus(models.TextChoices):
    PENDING = 'pending', _('قيد الانتظار')
    ANSWERED = 'answered', _('تمت الإجابة')
    REJECTED = 'rejected', _('مرفوض')


class Question(models.Model):
    """سؤال مرسل من الزوار بانتظار المراجعة"""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(_('البريد الإلكتروني'))
    category = models.CharField(_('التصنيف'), max_length=20, choices=QuestionCategory.choices)
    question_text = models.TextField(_('نص السؤال'))
    status = models.CharField(
        _('الحالة'), max_length=10, choices=QuestionStatus.choices, default=QuestionStatus.PENDING, db_index=True
    )
    answer_youtube_link = models.URLField(_('رابط الإجابة'), max_length=1000, null=True, blank=True)
    rejection_reason = models.TextField(_('سبب الرفض'), null=True, blank=True)

    submitted_at = models.DateTimeField(_('تاريخ الإرسال'), auto_now_add=True)
    answered_at = models.DateTimeField(_('تاريخ الرد'), null=True, blank=True)

    class Meta:
        verbose_name = _('سؤال')
        verbose_name_plural = _('الأسئلة')
        ordering = ['-submitted_at']
        constraints = [
            models.CheckConstraint(
                condition=~Q(question_text__regex=r'[a-zA-Z]'),
                name='question_text_no_latin_letters',
            ),
        ]

    def __str__(self):
        return f'{self.email} - {self.question_text[:50]}'

    @property
    def is_pending(self):
        return self.status == QuestionStatus.PENDING

    def as_dict(self):
        return {
            'id': str(self.id),
            'email': self.email,
            'category': self.category,
            'question_text': self.question_text,
            'status': self.status,
            'answer_youtube_link': self.answer_youtube_link,
            'rejection_reason': self.rejection_reason,
            'submitted_at': self.submitted_at.isoformat() if self.submitted_at else None,
            'answered_at': self.answered_at.isoformat() if self.answered_at else None,
        }
