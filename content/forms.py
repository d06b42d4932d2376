# content/forms.py

from django import forms
from django.utils.translation import gettext_lazy as _

from core.forms import PartialFormMixin
from core.validators import HttpUrlField
from .models import Category, CollectionContentType, Language, ResourceType

# قيمة الخيار الفارغ في قوائم الاختيار بالواجهة
NULL_OPTION = 'null_option'


class TagsField(forms.Field):
    """الوسوم: قائمة نصوص أو نص مفصول بفواصل، والقائمة الفارغة تعني null"""

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, str):
            items = value.split(',')
        elif isinstance(value, (list, tuple)):
            items = value
        else:
            raise forms.ValidationError(_('يجب أن تكون الوسوم قائمة نصوص'), code='invalid_tags')

        tags = []
        for item in items:
            if not isinstance(item, str):
                raise forms.ValidationError(_('يجب أن تكون الوسوم قائمة نصوص'), code='invalid_tags')
            item = item.strip()
            if item:
                tags.append(item)
        return tags or None


class OptionalChoiceField(forms.ChoiceField):
    """اختيار اختياري: القيمة الفارغة تصبح '' ليحولها المستودع إلى null"""

    def __init__(self, *, choices, **kwargs):
        kwargs.setdefault('required', False)
        super().__init__(choices=choices, **kwargs)

    def to_python(self, value):
        if value is None or value == NULL_OPTION:
            return ''
        return super().to_python(value)


class CollectionForm(PartialFormMixin, forms.Form):
    name = forms.CharField(label=_('الاسم'), max_length=255)
    description = forms.CharField(label=_('الوصف'), required=False)
    cover_image_url = HttpUrlField(label=_('رابط صورة الغلاف'), required=False, max_length=1000)
    language = OptionalChoiceField(label=_('اللغة'), choices=Language.choices)
    category = OptionalChoiceField(label=_('التصنيف'), choices=Category.choices)
    collection_content_type = forms.ChoiceField(
        label=_('نوع المحتوى'),
        choices=CollectionContentType.choices,
        error_messages={'required': _('نوع محتوى المجموعة مطلوب')},
    )


class ResourceForm(PartialFormMixin, forms.Form):
    title = forms.CharField(label=_('العنوان'), max_length=500)
    description = forms.CharField(label=_('الوصف'), required=False)
    type = forms.ChoiceField(label=_('النوع'), choices=ResourceType.choices)
    language = forms.ChoiceField(label=_('اللغة'), choices=Language.choices)
    category = forms.ChoiceField(label=_('التصنيف'), choices=Category.choices)
    tags = TagsField(label=_('الوسوم'), required=False)
    url = HttpUrlField(label=_('الرابط'), clearable=False, max_length=1000)
    cover_image_url = HttpUrlField(label=_('رابط صورة الغلاف'), required=False, max_length=1000)
    collection_id = forms.CharField(label=_('المجموعة'), required=False)

    def clean_collection_id(self):
        value = self.cleaned_data.get('collection_id')
        if not value or value == NULL_OPTION:
            return None
        return value
