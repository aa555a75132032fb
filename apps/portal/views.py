"""API views for the portal.

Endpoints:
- GET /api/portal/auth/me/ - current portal session
- GET /api/portal/auth/check/ - whether the signed-in account may use the portal
- GET /api/portal/offices/ - all offices (super admin only)
- GET/POST/DELETE /api/portal/impersonate/ - super admin impersonation
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import exceptions, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.models import PORTAL_ROLES

from .auth import (
    AuthResult,
    authorize,
    get_impersonation_cookie_name,
    get_portal_session,
    load_impersonation_target,
)
from .exceptions import PortalAuthError, portal_auth_error_response
from .models import Office
from .serializers import (
    ImpersonationTargetSerializer,
    OfficeSummarySerializer,
    PortalSessionSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


class PortalAPIView(APIView):
    """Base view for portal endpoints.

    Authorization is decided by the portal session rather than DRF
    permission classes, and every error is rendered by
    ``portal_auth_error_response``.
    """

    permission_classes = [permissions.AllowAny]
    # Swappable in tests; must accept the request and return a session or None.
    session_resolver = staticmethod(get_portal_session)

    def authorize(self, request, allowed_roles=None) -> AuthResult:
        return authorize(request, allowed_roles, resolver=self.session_resolver)

    def handle_exception(self, exc):  # type: ignore
        return portal_auth_error_response(exc)


class PortalMeView(PortalAPIView):
    """Return the current portal session."""

    def get(self, request, format=None):  # type: ignore
        result = self.authorize(request)
        if not result.ok:
            return portal_auth_error_response(result.error)
        return Response(PortalSessionSerializer(result.session).data)


class PortalAuthCheckView(APIView):
    """Tell the front end whether to show the portal entry point."""

    permission_classes = [permissions.AllowAny]

    def perform_authentication(self, request):  # type: ignore
        # Deferred to get() so a bad token reads as anonymous.
        pass

    def get(self, request, format=None):  # type: ignore
        try:
            user = request.user
        except exceptions.AuthenticationFailed:
            return Response({"hasPortalAccess": False})
        if not user.is_authenticated:
            return Response({"hasPortalAccess": False})

        has_access = user.role in PORTAL_ROLES
        return Response(
            {
                "hasPortalAccess": has_access,
                "role": user.role if has_access else None,
            }
        )


class OfficeListView(PortalAPIView):
    """List every office, ordered by name then brokerage name."""

    allowed_roles = (User.RoleChoices.SUPER_ADMIN,)

    def get(self, request, format=None):  # type: ignore
        result = self.authorize(request, self.allowed_roles)
        if not result.ok:
            return portal_auth_error_response(result.error)

        offices = Office.objects.order_by("name", "brokerage_name").values(
            "id", "name", "brokerage_name"
        )
        return Response({"offices": OfficeSummarySerializer(offices, many=True).data})


class ImpersonationView(APIView):
    """Start, stop and inspect super admin impersonation.

    Works on the real signed-in account, never on the impersonated session.
    """

    permission_classes = [permissions.AllowAny]

    def handle_exception(self, exc):  # type: ignore
        return portal_auth_error_response(exc)

    def _require_super_admin(self, request) -> None:
        user = request.user
        if not user.is_authenticated or not getattr(user, "email", None):
            raise PortalAuthError("Unauthorized", status.HTTP_401_UNAUTHORIZED)
        if user.role != User.RoleChoices.SUPER_ADMIN:
            raise PortalAuthError("Forbidden", status.HTTP_403_FORBIDDEN)

    def get(self, request, format=None):  # type: ignore
        user = request.user
        if not user.is_authenticated or not getattr(user, "email", None):
            raise PortalAuthError("Unauthorized", status.HTTP_401_UNAUTHORIZED)

        if user.role != User.RoleChoices.SUPER_ADMIN:
            return Response({"isImpersonating": False})

        cookie_name = get_impersonation_cookie_name()
        target_id = request.COOKIES.get(cookie_name)
        if not target_id:
            return Response({"isImpersonating": False})

        target = load_impersonation_target(target_id)
        if target is None or target.role == User.RoleChoices.SUPER_ADMIN:
            response = Response({"isImpersonating": False})
            response.delete_cookie(cookie_name)
            return response

        return Response(
            {
                "isImpersonating": True,
                "impersonating": ImpersonationTargetSerializer(target).data,
                "originalUser": {
                    "id": str(user.pk),
                    "email": user.email,
                    "name": user.name,
                },
            }
        )

    def post(self, request, format=None):  # type: ignore
        self._require_super_admin(request)

        payload = request.data if isinstance(request.data, dict) else {}
        user_id = payload.get("userId")
        if not user_id:
            return Response({"error": "User ID is required"}, status=status.HTTP_400_BAD_REQUEST)

        target = load_impersonation_target(user_id)
        if target is None:
            return Response({"error": "User not found"}, status=status.HTTP_404_NOT_FOUND)

        if target.role == User.RoleChoices.SUPER_ADMIN:
            return Response(
                {"error": "Cannot impersonate another super admin"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if target.pk == request.user.pk:
            return Response(
                {"error": "Cannot impersonate yourself"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(f"Super admin {request.user.pk} started impersonating {target.pk}")
        response = Response(
            {
                "success": True,
                "impersonating": ImpersonationTargetSerializer(target).data,
            }
        )
        response.set_cookie(
            get_impersonation_cookie_name(),
            str(target.pk),
            max_age=settings.PORTAL_IMPERSONATION_MAX_AGE,
            httponly=True,
            secure=settings.PORTAL_IMPERSONATION_COOKIE_SECURE,
            samesite="Lax",
            path="/",
        )
        return response

    def delete(self, request, format=None):  # type: ignore
        self._require_super_admin(request)

        logger.info(f"Super admin {request.user.pk} stopped impersonating")
        response = Response({"success": True})
        response.delete_cookie(get_impersonation_cookie_name(), path="/")
        return response
