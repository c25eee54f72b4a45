"""
Management command to import submissions from the legacy JSON store.

Runs only while the submissions table is empty, so repeating it is safe.

Usage:
    python manage.py import_legacy_submissions path/to/db.json
    python manage.py import_legacy_submissions --dry-run
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from apps.submissions.services import import_legacy_submissions


class Command(BaseCommand):
    help = 'Import legacy submissions once, if the submissions table is empty'

    def add_arguments(self, parser):
        parser.add_argument(
            'source',
            nargs='?',
            default=None,
            help='Legacy JSON file (defaults to LEGACY_DATA_PATH)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Count importable records without inserting them',
        )

    def handle(self, *args, **options):
        source = options['source'] or settings.LEGACY_DATA_PATH
        result = import_legacy_submissions(source, dry_run=options['dry_run'])

        if not result.ran:
            self.stdout.write(f'Legacy import skipped: {result.reason}.')
            return

        verb = 'Would import' if options['dry_run'] else 'Imported'
        self.stdout.write(
            self.style.SUCCESS(f'{verb} {result.imported} submission(s), skipped {result.skipped}.')
        )
