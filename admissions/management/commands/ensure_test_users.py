# admissions/management/commands/ensure_test_users.py
from django.core.management.base import BaseCommand
from django.contrib.auth.hashers import make_password

from admissions.models import User

TEST_SET = [
    ("admin1", "admin", "admin@hospital.com"),
    ("staff1", "staff", "staff@hospital.com"),
]


class Command(BaseCommand):
    help = "Ensure development accounts exist with the given password (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--password', default='123456')

    def handle(self, *args, **opts):
        password = make_password(opts['password'])
        for username, role, email in TEST_SET:
            u, created = User.objects.get_or_create(
                username=username,
                defaults={"role": role, "email": email, "password": password, "is_active": True},
            )
            if not created:
                # reset password, role and active flag
                u.password = password
                u.role = role
                u.is_active = True
                u.save(update_fields=["password", "role", "is_active"])
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({role})"))
        self.stdout.write(self.style.SUCCESS("All test users ensured."))
