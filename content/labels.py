# content/labels.py

"""جداول التسميات لكل لغة

القيم المقبولة تأتي من التعدادات في models.py فقط، وهذه الجداول للعرض.
"""

from .models import Category, CollectionContentType, Language, ResourceType

DEFAULT_LOCALE = 'ar'

LABELS = {
    'en': {
        'type': {
            ResourceType.PDF: 'PDF Document',
            ResourceType.AUDIO: 'Audio',
            ResourceType.VIDEO: 'Video',
            ResourceType.ARTICLE: 'Article',
            ResourceType.IMAGE: 'Image',
            ResourceType.OTHER: 'Other',
        },
        'language': {
            Language.ARABIC: 'Arabic',
            Language.ENGLISH: 'English',
        },
        'category': {
            Category.AQIDAH: 'Aqidah',
            Category.AHADITH: 'Ahadith',
            Category.QURAN: 'Quran',
            Category.FIQH: 'Fiqh',
            Category.FAMILY: 'Family',
            Category.BUSINESS: 'Business',
            Category.PRAYER: 'Prayer',
        },
        'collection_content_type': {
            CollectionContentType.BOOK: 'Book',
            CollectionContentType.AUDIO: 'Audio',
            CollectionContentType.VIDEO: 'Video',
        },
    },
    'ar': {
        'type': {
            ResourceType.PDF: 'مستند PDF',
            ResourceType.AUDIO: 'صوتي',
            ResourceType.VIDEO: 'مرئي',
            ResourceType.ARTICLE: 'مقال',
            ResourceType.IMAGE: 'صورة',
            ResourceType.OTHER: 'أخرى',
        },
        'language': {
            Language.ARABIC: 'العربية',
            Language.ENGLISH: 'الإنجليزية',
        },
        'category': {
            Category.AQIDAH: 'العقيدة',
            Category.AHADITH: 'الأحاديث',
            Category.QURAN: 'القرآن',
            Category.FIQH: 'الفقه',
            Category.FAMILY: 'الأسرة',
            Category.BUSINESS: 'المعاملات',
            Category.PRAYER: 'الصلاة',
        },
        'collection_content_type': {
            CollectionContentType.BOOK: 'كتاب',
            CollectionContentType.AUDIO: 'صوتي',
            CollectionContentType.VIDEO: 'مرئي',
        },
    },
}


def get_label(group, value, locale=DEFAULT_LOCALE):
    """تسمية قيمة تعداد، وتعاد القيمة نفسها إن لم توجد تسمية"""
    table = LABELS.get(locale) or LABELS[DEFAULT_LOCALE]
    return table.get(group, {}).get(value, value)


def label_table(locale=DEFAULT_LOCALE):
    """جدول التسميات بصيغة قابلة للتحويل إلى JSON"""
    table = LABELS.get(locale) or LABELS[DEFAULT_LOCALE]
    return {
        group: [{'value': str(value), 'label': label} for value, label in entries.items()]
        for group, entries in table.items()
    }


def collection_display(item, locale=DEFAULT_LOCALE):
    """مثل: "شرح كتاب التوحيد (مستند PDF #3)" """
    collection = item.get('collection') or {}
    name = collection.get('name')
    if not name:
        return None
    position = item.get('position')
    if not position:
        return name
    return f"{name} ({get_label('type', item.get('type'), locale)} #{position})"
