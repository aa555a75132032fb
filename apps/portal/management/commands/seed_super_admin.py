from __future__ import annotations

import os

from django.contrib.auth import get_user_model  # type: ignore
from django.core.management.base import BaseCommand, CommandError  # type: ignore

User = get_user_model()

MIN_PASSWORD_LENGTH = 8


class Command(BaseCommand):
    help = (
        "Create the super admin account from SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD "
        "and SUPER_ADMIN_NAME, or promote an existing account"
    )

    def handle(self, *args, **options):  # type: ignore
        email = os.environ.get("SUPER_ADMIN_EMAIL")
        password = os.environ.get("SUPER_ADMIN_PASSWORD")
        name = os.environ.get("SUPER_ADMIN_NAME", "Admin")

        if not email or not password:
            raise CommandError("Set SUPER_ADMIN_EMAIL and SUPER_ADMIN_PASSWORD")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise CommandError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        existing = User.objects.filter(email__iexact=email).first()
        if existing is not None:
            if existing.role == User.RoleChoices.SUPER_ADMIN:
                self.stdout.write(f"Super admin already exists: {existing.email}")
                return
            existing.role = User.RoleChoices.SUPER_ADMIN
            existing.save(update_fields=["role", "updated_at"])
            self.stdout.write(self.style.SUCCESS(f"Promoted {existing.email} to super admin"))
            return

        User.objects.create_user(
            email=email,
            password=password,
            name=name,
            role=User.RoleChoices.SUPER_ADMIN,
        )
        self.stdout.write(self.style.SUCCESS(f"Created super admin account: {email}"))
