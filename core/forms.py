# core/forms.py

from .exceptions import ValidationFailedError


class PartialFormMixin:
    """في وضع التعديل الجزئي تبقى الحقول المرسلة فقط"""

    def __init__(self, data=None, *args, partial=False, **kwargs):
        super().__init__(data, *args, **kwargs)
        self.partial = partial
        if partial and data is not None:
            for name in list(self.fields):
                if name not in data:
                    del self.fields[name]

    def validated_data(self):
        """البيانات المنقحة أو خطأ يجمع كل الحقول المخالفة"""
        if not self.is_valid():
            errors = {field: [str(message) for message in messages] for field, messages in self.errors.items()}
            raise ValidationFailedError(errors)
        return dict(self.cleaned_data)
