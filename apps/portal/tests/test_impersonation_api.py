"""API tests for super admin impersonation."""

from __future__ import annotations

import uuid

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class ImpersonationAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("portal:impersonate")
        self.super_admin = User.objects.create_user(
            email="admin@example.com",
            password="AdminPass123",
            name="Admin",
            role=User.RoleChoices.SUPER_ADMIN,
        )
        self.agent = User.objects.create_user(
            email="agent@example.com",
            password="AgentPass123",
            name="Jane Agent",
            role=User.RoleChoices.AGENT,
        )

    def test_requires_authentication(self) -> None:
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_401_UNAUTHORIZED)
        response = self.client.post(self.url, {"userId": str(self.agent.pk)}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"error": "Unauthorized"})

    def test_only_super_admin_can_start(self) -> None:
        self.client.force_authenticate(self.agent)
        response = self.client.post(self.url, {"userId": str(self.super_admin.pk)}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json(), {"error": "Forbidden"})

    def test_start_sets_cookie(self) -> None:
        self.client.force_authenticate(self.super_admin)
        response = self.client.post(self.url, {"userId": str(self.agent.pk)}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(
            response.json(),
            {
                "success": True,
                "impersonating": {
                    "id": str(self.agent.pk),
                    "email": "agent@example.com",
                    "name": "Jane Agent",
                    "role": "agent",
                },
            },
        )
        cookie = response.cookies["portal_impersonate"]
        self.assertEqual(cookie.value, str(self.agent.pk))
        self.assertTrue(cookie["httponly"])
        self.assertEqual(cookie["max-age"], 60 * 60 * 4)

    def test_start_validates_target(self) -> None:
        self.client.force_authenticate(self.super_admin)

        missing = self.client.post(self.url, {}, format="json")
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(missing.json(), {"error": "User ID is required"})

        unknown = self.client.post(self.url, {"userId": str(uuid.uuid4())}, format="json")
        self.assertEqual(unknown.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(unknown.json(), {"error": "User not found"})

        other_admin = User.objects.create_user(
            email="other@example.com",
            password="AdminPass123",
            role=User.RoleChoices.SUPER_ADMIN,
        )
        admin_target = self.client.post(self.url, {"userId": str(other_admin.pk)}, format="json")
        self.assertEqual(admin_target.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(admin_target.json(), {"error": "Cannot impersonate another super admin"})

    def test_start_rejects_non_object_body(self) -> None:
        self.client.force_authenticate(self.super_admin)
        response = self.client.post(self.url, ["x"], format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {"error": "User ID is required"})
        self.assertNotIn("portal_impersonate", response.cookies)

    def test_status_reports_active_impersonation(self) -> None:
        self.client.force_authenticate(self.super_admin)
        self.client.cookies["portal_impersonate"] = str(self.agent.pk)
        response = self.client.get(self.url)

        data = response.json()
        self.assertTrue(data["isImpersonating"])
        self.assertEqual(data["impersonating"]["email"], "agent@example.com")
        self.assertEqual(
            data["originalUser"],
            {"id": str(self.super_admin.pk), "email": "admin@example.com", "name": "Admin"},
        )

    def test_status_without_cookie(self) -> None:
        self.client.force_authenticate(self.super_admin)
        self.assertEqual(self.client.get(self.url).json(), {"isImpersonating": False})

    def test_status_for_non_super_admin(self) -> None:
        self.client.force_authenticate(self.agent)
        self.assertEqual(self.client.get(self.url).json(), {"isImpersonating": False})

    def test_status_clears_invalid_cookie(self) -> None:
        self.client.force_authenticate(self.super_admin)
        self.client.cookies["portal_impersonate"] = "garbage"
        response = self.client.get(self.url)

        self.assertEqual(response.json(), {"isImpersonating": False})
        self.assertEqual(response.cookies["portal_impersonate"].value, "")

    def test_stop_clears_cookie(self) -> None:
        self.client.force_authenticate(self.super_admin)
        self.client.cookies["portal_impersonate"] = str(self.agent.pk)
        response = self.client.delete(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"success": True})
        self.assertEqual(response.cookies["portal_impersonate"].value, "")

    def test_stop_requires_super_admin(self) -> None:
        self.client.force_authenticate(self.agent)
        self.assertEqual(self.client.delete(self.url).status_code, status.HTTP_403_FORBIDDEN)
