from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.core.management.base import BaseCommand, CommandError  # type: ignore

User = get_user_model()

ASSIGNABLE_ROLES = (
    User.RoleChoices.SUPER_ADMIN,
    User.RoleChoices.OFFICE_ADMIN,
    User.RoleChoices.AGENT,
)


class Command(BaseCommand):
    help = "Create a portal account, or update the role of an existing one"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument("--email", required=True)
        parser.add_argument("--name", default=None)
        parser.add_argument("--role", default=User.RoleChoices.SUPER_ADMIN.value)

    def handle(self, *args, **options):  # type: ignore
        email = User.objects.normalize_email(options["email"] or "")
        role = options["role"]
        if not email:
            raise CommandError("--email must not be empty")
        if role not in ASSIGNABLE_ROLES:
            allowed = ", ".join(str(choice) for choice in ASSIGNABLE_ROLES)
            raise CommandError(f'Invalid role "{role}". Must be one of: {allowed}')

        existing = User.objects.filter(email__iexact=email).first()
        if existing is not None:
            self.stdout.write(f"User already exists: {existing.email}")
            if existing.role != role:
                self.stdout.write(f'Updating role from "{existing.role}" to "{role}"')
                existing.role = role
                existing.save(update_fields=["role", "updated_at"])
                self.stdout.write(self.style.SUCCESS("Role updated"))
            return

        name = options["name"] or email.split("@")[0]
        # Created without a usable password; one is set with changepassword or the admin.
        User.objects.create_user(email=email, password=None, name=name, role=role)
        self.stdout.write(self.style.SUCCESS(f"Created {role} account: {email}"))
        self.stdout.write(f"Set a password with: django-admin changepassword {email}")
