"""API tests for the super admin office list."""

from __future__ import annotations

from unittest import mock

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.portal.models import Office
from apps.users.models import User


class OfficeListAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("portal:office-list")
        self.super_admin = User.objects.create_user(
            email="admin@example.com",
            password="AdminPass123",
            role=User.RoleChoices.SUPER_ADMIN,
        )
        self.agent = User.objects.create_user(
            email="agent@example.com",
            password="AgentPass123",
            role=User.RoleChoices.AGENT,
        )

    def test_requires_authentication(self) -> None:
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json(), {"error": "Unauthorized"})

    def test_rejects_non_super_admin_before_querying(self) -> None:
        self.client.force_authenticate(self.agent)
        with mock.patch("apps.portal.views.Office") as office_model:
            response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json(), {"error": "Forbidden"})
        office_model.objects.order_by.assert_not_called()

    def test_office_admin_is_forbidden(self) -> None:
        office_admin = User.objects.create_user(
            email="office@example.com",
            password="OfficePass123",
            role=User.RoleChoices.OFFICE_ADMIN,
        )
        self.client.force_authenticate(office_admin)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_lists_offices_sorted_and_projected(self) -> None:
        Office.objects.create(name="Uptown", brokerage_name="ABC Realty", city="Austin", phone="555-0100")
        Office.objects.create(name="Downtown", brokerage_name="Zed Homes")
        Office.objects.create(name="Downtown", brokerage_name="ABC Realty")
        self.client.force_authenticate(self.super_admin)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        offices = response.json()["offices"]
        self.assertEqual(
            [(office["name"], office["brokerageName"]) for office in offices],
            [("Downtown", "ABC Realty"), ("Downtown", "Zed Homes"), ("Uptown", "ABC Realty")],
        )
        for office in offices:
            self.assertEqual(set(office), {"id", "name", "brokerageName"})

    def test_empty_office_list(self) -> None:
        self.client.force_authenticate(self.super_admin)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"offices": []})

    def test_impersonating_super_admin_loses_access(self) -> None:
        self.client.force_authenticate(self.super_admin)
        self.client.cookies["portal_impersonate"] = str(self.agent.pk)
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_repeated_requests_are_identical(self) -> None:
        Office.objects.create(name="Downtown", brokerage_name="ABC Realty")
        self.client.force_authenticate(self.super_admin)
        first = self.client.get(self.url)
        second = self.client.get(self.url)
        self.assertEqual(first.json(), second.json())
