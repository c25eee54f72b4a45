"""
Management command to prepare storage before the server starts.

Steps, in order:
    1. Create the schema (apply migrations)
    2. Seed the administrator and the demo account details if missing
    3. Import legacy submissions if LEGACY_DATA_PATH is set and the
       submissions table is empty

Every step is idempotent, so the command runs on every deploy:

    python manage.py bootstrap && gunicorn config.wsgi

A failure in steps 1-2 exits non-zero so the server is not started.
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.accounts.services import BootstrapError, ensure_schema, ensure_seed_data
from apps.submissions.services import import_legacy_submissions


class Command(BaseCommand):
    help = 'Create schema, seed administrator and account details, import legacy data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--skip-legacy',
            action='store_true',
            help='Do not run the legacy submissions import',
        )

    def handle(self, *args, **options):
        try:
            ensure_schema(verbosity=max(options['verbosity'] - 1, 0))
            seed = ensure_seed_data()
        except BootstrapError as e:
            raise CommandError(f'Fatal startup error: {e}') from e

        if seed.admin_created:
            self.stdout.write(f'Created default admin: {settings.ADMIN_EMAIL}')
        else:
            self.stdout.write('Admin user exists; seeding skipped.')

        if seed.account_details_created:
            self.stdout.write('Inserted default account_details row')

        if not options['skip_legacy'] and settings.LEGACY_DATA_PATH:
            result = import_legacy_submissions(settings.LEGACY_DATA_PATH)
            if result.ran:
                self.stdout.write(
                    f'Imported {result.imported} legacy submission(s), skipped {result.skipped}.'
                )

        self.stdout.write(self.style.SUCCESS('Bootstrap complete.'))
