import os
from django.core.management.base import BaseCommand, CommandError
from django.contrib.auth.hashers import make_password


class Command(BaseCommand):
    help = 'Print a password hash for ADMIN_PASSWORD_HASH (uses --password or the ADMIN_PASSWORD env var)'

    def add_arguments(self, parser):
        parser.add_argument('--password', help='Password to hash. Defaults to ADMIN_PASSWORD.')

    def handle(self, *args, **options):
        password = options.get('password') or os.environ.get('ADMIN_PASSWORD')

        if not password:
            raise CommandError('Pass --password or set ADMIN_PASSWORD.')

        self.stdout.write(make_password(password))
        self.stderr.write('Set ADMIN_PASSWORD_MODE=hashed and ADMIN_PASSWORD_HASH to the value above.')
