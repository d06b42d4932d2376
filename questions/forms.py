# questions/forms.py

from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import PartialFormMixin
from core.validators import HttpUrlField, validate_no_latin_letters
from .models import QuestionCategory

QUESTION_MIN_LENGTH = 10


class QuestionForm(PartialFormMixin, forms.Form):
    """نموذج إرسال سؤال من الزوار"""
    email = forms.EmailField(label=_('البريد الإلكتروني'))
    category = forms.ChoiceField(label=_('التصنيف'), choices=QuestionCategory.choices)
    question_text = forms.CharField(
        label=_('نص السؤال'),
        min_length=QUESTION_MIN_LENGTH,
        validators=[validate_no_latin_letters],
        error_messages={'min_length': _('يجب أن يكون السؤال 10 أحرف على الأقل')},
    )


class AnswerForm(PartialFormMixin, forms.Form):
    youtubeLink = HttpUrlField(label=_('رابط الإجابة'), clearable=False, max_length=1000)
    questionEmail = forms.EmailField(label=_('بريد السائل'), required=False)


class RejectForm(PartialFormMixin, forms.Form):
    rejectionReason = forms.CharField(label=_('سبب الرفض'), required=False)
    questionEmail = forms.EmailField(label=_('بريد السائل'), required=False)
