"""Development server that listens on settings.PORT unless a port is given."""

from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    default_port = str(settings.PORT)
