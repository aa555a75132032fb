"""Tests for the custom user model and its manager."""

from __future__ import annotations

from django.db import IntegrityError
from django.test import TestCase

from apps.users.models import PORTAL_ROLES, User


class CustomUserManagerTests(TestCase):
    def test_create_user_defaults_to_consumer(self) -> None:
        user = User.objects.create_user(email="buyer@EXAMPLE.com", password="BuyerPass123")
        self.assertEqual(user.email, "buyer@example.com")
        self.assertEqual(user.role, User.RoleChoices.CONSUMER)
        self.assertFalse(user.is_staff)
        self.assertFalse(user.has_portal_access())
        self.assertTrue(user.check_password("BuyerPass123"))

    def test_create_user_requires_email(self) -> None:
        with self.assertRaises(ValueError):
            User.objects.create_user(email="", password="x")

    def test_email_is_unique(self) -> None:
        User.objects.create_user(email="dup@example.com")
        with self.assertRaises(IntegrityError):
            User.objects.create_user(email="dup@example.com")

    def test_create_superuser_is_portal_super_admin(self) -> None:
        user = User.objects.create_superuser(email="root@example.com", password="RootPass123")
        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)
        self.assertTrue(user.is_super_admin())
        self.assertTrue(user.has_portal_access())


class RoleHelperTests(TestCase):
    def test_portal_roles(self) -> None:
        self.assertEqual(
            [str(role) for role in PORTAL_ROLES],
            ["agent", "office_admin", "super_admin"],
        )

    def test_role_helpers(self) -> None:
        agent = User(email="a@example.com", role=User.RoleChoices.AGENT)
        office_admin = User(email="o@example.com", role=User.RoleChoices.OFFICE_ADMIN)
        company_admin = User(email="c@example.com", role=User.RoleChoices.COMPANY_ADMIN)

        self.assertTrue(agent.is_agent())
        self.assertTrue(office_admin.is_office_admin())
        self.assertFalse(company_admin.has_portal_access())
        self.assertEqual(str(agent), "a@example.com (Agent)")
        self.assertEqual(agent.get_short_name(), "a@example.com")
