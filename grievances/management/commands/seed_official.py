"""
Django management command to create the default official account.

Reads DEFAULT_OFFICIAL_USERNAME and DEFAULT_OFFICIAL_PASSWORD from settings.
Does nothing if the official already exists.

Usage:
    python manage.py seed_official
"""

from django.core.management.base import BaseCommand, CommandError
from grievances.services.auth_service import AuthService


class Command(BaseCommand):
    help = "Create the default official account if it does not exist"

    def handle(self, *args, **options):
        result = AuthService().seed_default_official()

        if not result["success"]:
            raise CommandError(result["message"])

        if result["created"]:
            self.stdout.write(self.style.SUCCESS(f"✓ {result['message']}"))
        else:
            self.stdout.write(result["message"])
