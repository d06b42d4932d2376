# ijazat/forms.py

from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import PartialFormMixin
from core.validators import HttpUrlField
from .models import IjazaCategory


class IjazaForm(PartialFormMixin, forms.Form):
    title_en = forms.CharField(label=_('العنوان بالإنجليزية'), max_length=255)
    title_ar = forms.CharField(label=_('العنوان بالعربية'), max_length=255)
    issuer_en = forms.CharField(label=_('المجيز بالإنجليزية'), max_length=255)
    issuer_ar = forms.CharField(label=_('المجيز بالعربية'), max_length=255)
    description_en = forms.CharField(label=_('الوصف بالإنجليزية'))
    description_ar = forms.CharField(label=_('الوصف بالعربية'))
    year = forms.CharField(label=_('السنة'), max_length=20)
    category = forms.ChoiceField(label=_('التصنيف'), choices=IjazaCategory.choices, required=False)
    pdf_url = HttpUrlField(
        label=_('رابط ملف PDF'),
        clearable=False,
        max_length=1000,
        error_messages={'required': _('ملف PDF للإجازة مطلوب')},
    )

    def __init__(self, data=None, *args, pdf_attached=False, **kwargs):
        super().__init__(data, *args, **kwargs)
        # الملف المرفق يرفع بعد نجاح التحقق ويحل محل الرابط
        if pdf_attached and 'pdf_url' in self.fields:
            self.fields['pdf_url'].required = False

    def clean_category(self):
        return self.cleaned_data.get('category') or None
