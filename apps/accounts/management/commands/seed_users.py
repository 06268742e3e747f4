"""
Management command to create the initial shop accounts.

Usage:
    python manage.py seed_users
    python manage.py seed_users --admin-password s3cret

This creates (when missing):
- admin / admin123 (admin role)
- testuser / password123 (user role)

Existing accounts are left untouched, so the command is safe to re-run.
"""

from django.core.management.base import BaseCommand

from apps.accounts.models import UserRole
from apps.accounts.services import register_user, get_user_by_username


class Command(BaseCommand):
    help = 'Create the default admin and test user accounts'

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin-password',
            default='admin123',
            help='Password for the admin account (default: admin123)',
        )
        parser.add_argument(
            '--skip-test-user',
            action='store_true',
            help='Only create the admin account',
        )

    def handle(self, *args, **options):
        self.stdout.write('Seeding accounts...')

        self.ensure_user('admin', options['admin_password'], UserRole.ADMIN)

        if not options['skip_test_user']:
            self.ensure_user('testuser', 'password123', UserRole.USER)

        self.stdout.write(self.style.SUCCESS('Seeding complete.'))

    def ensure_user(self, username, password, role):
        """Create the account unless the username is taken."""
        existing = get_user_by_username(username=username)
        if existing:
            self.stdout.write(
                self.style.WARNING(f'  {username} already exists (role: {existing.role})')
            )
            return existing

        user = register_user(username=username, password=password, role=role)
        self.stdout.write(f'  Created {username} / {password} ({user.role})')
        return user
