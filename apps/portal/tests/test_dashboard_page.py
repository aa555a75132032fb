"""Tests for the server-rendered portal dashboard."""

from __future__ import annotations

from django.test import TestCase, override_settings
from django.urls import reverse

from apps.portal.models import Office, OfficeAdmin
from apps.users.models import User


@override_settings(PORTAL_LOGIN_URL="/portal/login/")
class PortalDashboardPageTests(TestCase):
    def setUp(self) -> None:
        self.url = reverse("portal-pages:dashboard")

    def test_anonymous_is_redirected_to_login(self) -> None:
        response = self.client.get(self.url)
        self.assertRedirects(response, "/portal/login/", fetch_redirect_response=False)

    def test_office_admin_sees_layout_and_offices(self) -> None:
        user = User.objects.create_user(
            email="office@example.com",
            password="OfficePass123",
            name="Olivia",
            role=User.RoleChoices.OFFICE_ADMIN,
        )
        office = Office.objects.create(name="Downtown", brokerage_name="ABC Realty")
        OfficeAdmin.objects.create(office=office, user=user)
        self.client.force_login(user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "portal/layout.html")
        self.assertContains(response, "Welcome, Olivia")
        self.assertContains(response, "Downtown (ABC Realty)")
        self.assertNotContains(response, "Viewing as")

    def test_super_admin_sees_impersonation_banner(self) -> None:
        admin = User.objects.create_user(
            email="admin@example.com",
            password="AdminPass123",
            role=User.RoleChoices.SUPER_ADMIN,
        )
        agent = User.objects.create_user(
            email="agent@example.com",
            password="AgentPass123",
            name="Jane Agent",
            role=User.RoleChoices.AGENT,
        )
        self.client.force_login(admin)
        self.client.cookies["portal_impersonate"] = str(agent.pk)

        response = self.client.get(self.url)

        self.assertContains(response, "Viewing as Jane Agent")
        self.assertContains(response, "signed in as admin@example.com")
