"""
WSGI config for the Payment Claims project.

Run `python manage.py bootstrap` before starting the server so the schema,
seed data and legacy import are in place.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
