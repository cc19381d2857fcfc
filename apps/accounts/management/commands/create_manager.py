"""
Management command to create a manager account.

Usage:
    python manage.py create_manager admin@example.com S3cretPass! --admin
"""

from django.core.management.base import BaseCommand, CommandError

from apps.accounts.services import register_manager, ManagerRegistrationError


class Command(BaseCommand):
    help = 'Create a manager account'

    def add_arguments(self, parser):
        parser.add_argument('email')
        parser.add_argument('password')
        parser.add_argument('--first-name', default='')
        parser.add_argument('--last-name', default='')
        parser.add_argument(
            '--admin',
            action='store_true',
            help='Allow this manager to register other managers',
        )

    def handle(self, *args, **options):
        try:
            manager = register_manager(
                email=options['email'],
                password=options['password'],
                first_name=options['first_name'],
                last_name=options['last_name'],
                is_admin=options['admin'],
            )
        except ManagerRegistrationError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(f'Created manager {manager.email} ({manager.id})'))
