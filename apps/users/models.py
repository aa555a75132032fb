"""User domain models for the realty portal.

A single account table serves both the public site and the portal. The
``role`` column decides what an account may do: consumers browse and save
listings, while agents, office admins and super admins sign in to the
portal. Company admins exist in the data but are not admitted to the
portal session yet.
"""

from __future__ import annotations

import uuid
from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that logs people in by email."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("An email address is required to create a user.")
        email = self.normalize_email(email)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.CONSUMER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.SUPER_ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Platform account identified by email, carrying a portal role."""

    class RoleChoices(models.TextChoices):
        CONSUMER = "consumer", _("Consumer")
        AGENT = "agent", _("Agent")
        OFFICE_ADMIN = "office_admin", _("Office admin")
        COMPANY_ADMIN = "company_admin", _("Company admin")
        SUPER_ADMIN = "super_admin", _("Super admin")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    first_name = None
    last_name = None
    name = models.CharField(_("Name"), max_length=255, null=True, blank=True)
    email = models.EmailField(_("Email"), unique=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.CONSUMER,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def get_full_name(self) -> str:
        return self.name or ""

    def get_short_name(self) -> str:
        return self.name or self.email

    # --- Role helpers -------------------------------------------------------
    def is_agent(self) -> bool:
        return self.role == self.RoleChoices.AGENT

    def is_office_admin(self) -> bool:
        return self.role == self.RoleChoices.OFFICE_ADMIN

    def is_super_admin(self) -> bool:
        return self.role == self.RoleChoices.SUPER_ADMIN

    def has_portal_access(self) -> bool:
        return self.role in PORTAL_ROLES


# Roles admitted to the portal session
PORTAL_ROLES = (
    CustomUser.RoleChoices.AGENT,
    CustomUser.RoleChoices.OFFICE_ADMIN,
    CustomUser.RoleChoices.SUPER_ADMIN,
)

# Backwards compatibility alias used in tests and management commands
User = CustomUser
