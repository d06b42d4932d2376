# questions/notifications.py

"""رسائل البريد للسائلين بعد الإجابة أو الرفض

الإرسال لا يعطل أبداً نتيجة العملية الأصلية: أي فشل يسجل فقط.
"""

import logging
import smtplib

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils.html import escape

logger = logging.getLogger(__name__)

SMTP_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'

SCHOLAR_NAME = 'Shaykh ʿAbdullāh ibn ʿAbd al-Raḥmān al-Saʿd (الشيخ عبد الله بن عبد الرحمن السعد)'
SIGNATURE = 'Jazakallah Khair (جزاك الله خيرًا)'
GREETING_EN = 'Assalamu Alaikum wa Rahmatullahi wa Barakatuh,'
GREETING_AR = 'السلام عليكم ورحمة الله وبركاته،'
NO_REPLY_EN = 'This is an automated message. Please do not reply to this email.'
NO_REPLY_AR = 'هذه رسالة آلية، يرجى عدم الرد على هذا البريد.'

ANSWERED = 'answered'
REJECTED = 'rejected'


def is_mail_configured():
    """إعدادات SMTP مكتملة، أو أن خلفية البريد ليست SMTP أصلاً"""
    if settings.EMAIL_BACKEND != SMTP_BACKEND:
        return True
    return all([
        settings.EMAIL_HOST,
        settings.EMAIL_HOST_USER,
        settings.EMAIL_HOST_PASSWORD,
        settings.DEFAULT_FROM_EMAIL,
    ])


def build_answer_message(youtube_link):
    subject = 'Response to your Question (رد على سؤالك)'
    lines_en = [
        'Your question has been answered. Please watch the response here:',
        youtube_link,
    ]
    lines_ar = [
        'تم الإجابة على سؤالك. يمكنك مشاهدة الرد هنا:',
        youtube_link,
    ]
    return subject, lines_en, lines_ar


def build_rejection_message(reason=None):
    subject = 'Update on your Question (تحديث بشأن سؤالك)'
    lines_en = ['We regret to inform you that your question could not be answered.']
    lines_ar = ['نعتذر، لم يتم قبول سؤالك للإجابة.']
    if reason:
        lines_en.append(f'Reason: {reason}')
        lines_ar.append(f'السبب: {reason}')
    return subject, lines_en, lines_ar


def render_bodies(lines_en, lines_ar):
    """نص عادي ونسخة HTML بالاتجاهين"""
    text = '\n'.join([
        GREETING_EN, '', *lines_en, '', SIGNATURE, SCHOLAR_NAME, '', NO_REPLY_EN,
        '', '---', '',
        GREETING_AR, '', *lines_ar, '', SIGNATURE, SCHOLAR_NAME, '', NO_REPLY_AR,
    ])

    def paragraphs(lines):
        return ''.join(f'<p>{escape(line)}</p>' for line in lines)

    html = (
        f'<div dir="ltr" style="text-align:left">'
        f'<p>{escape(GREETING_EN)}</p>{paragraphs(lines_en)}'
        f'<p>{escape(SIGNATURE)}<br>{escape(SCHOLAR_NAME)}</p>'
        f'<p><small>{escape(NO_REPLY_EN)}</small></p></div><hr>'
        f'<div dir="rtl" style="text-align:right">'
        f'<p>{escape(GREETING_AR)}</p>{paragraphs(lines_ar)}'
        f'<p>{escape(SIGNATURE)}<br>{escape(SCHOLAR_NAME)}</p>'
        f'<p><small>{escape(NO_REPLY_AR)}</small></p></div>'
    )
    return text, html


def send_question_email(recipient, outcome, youtube_link=None, rejection_reason=None):
    """إرسال بريد الإشعار، ويعيد True عند النجاح و False عند الفشل"""
    if outcome == ANSWERED:
        subject, lines_en, lines_ar = build_answer_message(youtube_link)
    else:
        subject, lines_en, lines_ar = build_rejection_message(rejection_reason)

    if not is_mail_configured():
        logger.warning(f'إعدادات SMTP غير مكتملة، محاكاة إرسال "{subject}" إلى {recipient}')
        return False

    text, html = render_bodies(lines_en, lines_ar)
    message = EmailMultiAlternatives(
        subject=subject,
        body=text,
        from_email=settings.DEFAULT_FROM_EMAIL or None,
        to=[recipient],
    )
    message.attach_alternative(html, 'text/html')

    try:
        message.send()
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f'فشل إرسال بريد الإشعار إلى {recipient}: {e}')
        return False

    logger.info(f'تم إرسال بريد الإشعار ({outcome}) إلى {recipient}')
    return True


def notify_question_outcome(question, recipient=None):
    """إطلاق مهمة الإشعار دون انتظار، وأي فشل في الإطلاق يسجل فقط"""
    from .tasks import send_question_notification

    recipient = recipient or question.email
    logger.info(f'محاولة إشعار السائل {recipient} بحالة السؤال {question.pk}: {question.status}')
    try:
        send_question_notification.delay(
            recipient,
            question.status,
            youtube_link=question.answer_youtube_link,
            rejection_reason=question.rejection_reason,
        )
    except Exception as e:
        logger.error(f'تعذر إطلاق مهمة الإشعار للسؤال {question.pk}: {e}')
        return False
    return True
