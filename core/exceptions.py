# core/exceptions.py

"""أنواع الأخطاء المعتمدة في واجهات البرمجة وحالات HTTP المقابلة لها"""


class PortalError(Exception):
    """الخطأ الأساسي لكل أخطاء البوابة"""
    status_code = 500
    public_message = 'An unexpected error occurred. Please try again later.'

    def __init__(self, message=None):
        self.message = message or self.public_message
        super().__init__(self.message)

    def as_payload(self):
        return {'success': False, 'error': self.message}


class ValidationFailedError(PortalError):
    """أخطاء في الحقول يمكن للمستخدم تصحيحها"""
    status_code = 400
    public_message = 'Invalid input.'

    def __init__(self, errors=None, message=None):
        self.errors = dict(errors or {})
        super().__init__(message)

    def as_payload(self):
        payload = super().as_payload()
        payload['errors'] = self.errors
        return payload


class UnauthorizedError(PortalError):
    status_code = 401
    public_message = 'Unauthorized'


class NotFoundError(PortalError):
    status_code = 404
    public_message = 'Not found.'


class ConflictError(PortalError):
    """انتهاك قيد التفرد"""
    status_code = 409
    public_message = 'Conflict.'


class ServerConfigurationError(PortalError):
    """إعدادات خادم ناقصة، لا تكشف الرسالة أي قيمة داخلية"""
    status_code = 500
    public_message = 'Server configuration error'

    def __init__(self, detail=None):
        # التفاصيل للسجلات فقط
        self.detail = detail
        super().__init__(None)


class UploadError(PortalError):
    """فشل رفع ملف إلى مخزن الملفات"""
    status_code = 400
    public_message = 'File upload failed.'
