# questions/workflow.py

"""دورة حياة السؤال: pending ثم answered أو rejected، ولا انتقال بعدها"""

import logging

from django.utils import timezone

from core.exceptions import ConflictError, NotFoundError
from core.validators import parse_id
from .forms import AnswerForm, QuestionForm, RejectForm
from .models import Question, QuestionStatus
from .notifications import notify_question_outcome

logger = logging.getLogger(__name__)

STATUS_FILTERS = ('all',) + tuple(QuestionStatus.values)


def submit_question(payload):
    data = QuestionForm(payload).validated_data()
    question = Question.objects.create(**data)
    logger.info(f'سؤال جديد {question.pk} في تصنيف {question.category}')
    return question


def list_questions(status='all'):
    queryset = Question.objects.order_by('-submitted_at')
    if status and status != 'all':
        queryset = queryset.filter(status=status)
    return [question.as_dict() for question in queryset]


def _transition(question_id, **changes):
    """تحديث مشروط بالحالة pending حتى لا ينقل مشرفان السؤال نفسه معاً"""
    pk = parse_id(question_id)
    if pk is None:
        raise NotFoundError('Question not found.')

    updated = Question.objects.filter(pk=pk, status=QuestionStatus.PENDING).update(**changes)
    question = Question.objects.filter(pk=pk).first()
    if question is None:
        raise NotFoundError('Question not found.')
    if not updated:
        raise ConflictError(f'Question has already been {question.status}.')
    return question


def answer_question(question_id, payload):
    data = AnswerForm(payload).validated_data()
    question = _transition(
        question_id,
        status=QuestionStatus.ANSWERED,
        answer_youtube_link=data['youtubeLink'],
        answered_at=timezone.now(),
    )
    logger.info(f'تمت الإجابة على السؤال {question.pk}')
    notify_question_outcome(question, recipient=data.get('questionEmail'))
    return question


def reject_question(question_id, payload):
    data = RejectForm(payload).validated_data()
    question = _transition(
        question_id,
        status=QuestionStatus.REJECTED,
        rejection_reason=data.get('rejectionReason') or None,
        answered_at=timezone.now(),
    )
    logger.info(f'تم رفض السؤال {question.pk}')
    notify_question_outcome(question, recipient=data.get('questionEmail'))
    return question
