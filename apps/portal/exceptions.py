"""Portal authorization errors and their HTTP mapping."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.exceptions import APIException  # type: ignore
from rest_framework.response import Response  # type: ignore

logger = logging.getLogger(__name__)


class PortalAuthError(Exception):
    """Raised when a portal request lacks a session or the required role."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"PortalAuthError({self.message!r}, {self.status})"


def _detail_message(error: APIException) -> str:
    # Structured details (simplejwt, validation errors) carry a "detail" entry
    # or a list of messages; only that text is sent to the client.
    detail = error.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", error.default_detail)
    elif isinstance(detail, list):
        detail = detail[0] if detail else error.default_detail
    if not isinstance(detail, str):
        detail = error.default_detail
    return str(detail)


def portal_auth_error_response(error: BaseException) -> Response:
    """Turn any error raised while serving a portal request into a JSON response.

    Portal auth errors keep their own status and message, DRF exceptions keep
    their status code, everything else is logged and reported as a generic 500
    so internal details never reach the client.
    """
    if isinstance(error, PortalAuthError):
        return Response({"error": error.message}, status=error.status)

    if isinstance(error, APIException):
        return Response({"error": _detail_message(error)}, status=error.status_code)

    logger.error(f"Unexpected error in portal auth: {error}", exc_info=error)
    return Response(
        {"error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
