# questions/tasks.py

import logging

from celery import shared_task

from .notifications import send_question_email

logger = logging.getLogger(__name__)


@shared_task(ignore_result=True)
def send_question_notification(recipient, outcome, youtube_link=None, rejection_reason=None):
    """مهمة إرسال بريد الإشعار في الخلفية"""
    sent = send_question_email(
        recipient,
        outcome,
        youtube_link=youtube_link,
        rejection_reason=rejection_reason,
    )
    if not sent:
        logger.warning(f'لم يتم إرسال الإشعار ({outcome}) إلى {recipient}')
    return sent
