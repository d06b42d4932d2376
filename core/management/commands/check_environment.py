# core/management/commands/check_environment.py

from django.core.management.base import BaseCommand, CommandError

from core.checks import check_environment
from core.exceptions import ServerConfigurationError


class Command(BaseCommand):
    help = 'التحقق من متغيرات البيئة المطلوبة (Firebase والبريد ورابط الموقع)'

    def handle(self, *args, **options):
        try:
            check_environment()
        except ServerConfigurationError as e:
            raise CommandError(e.detail)

        self.stdout.write(self.style.SUCCESS('جميع متغيرات البيئة المطلوبة معرفة'))
