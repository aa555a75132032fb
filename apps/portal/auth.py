"""Portal session resolution and role checks.

Every portal endpoint starts by turning the incoming request into a
``PortalSession``: the signed-in account (or the account a super admin is
impersonating), plus the agent record or administered offices that go with
its role. Consumers and anonymous visitors never get a session.

Two styles of check are offered on top of it:

* ``authorize`` returns an ``AuthResult`` so views can branch on the
  expected "not signed in" / "wrong role" outcomes without exceptions;
* ``require_portal_role`` raises ``PortalAuthError`` for callers that prefer
  to let the error travel to ``portal_auth_error_response``.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from django.conf import settings  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore

from apps.users.models import PORTAL_ROLES

from .exceptions import PortalAuthError
from .models import Agent, Office

logger = logging.getLogger(__name__)

User = get_user_model()


@dataclass(frozen=True)
class PortalUser:
    id: str
    email: str
    name: Optional[str]
    role: str


@dataclass(frozen=True)
class PortalAgent:
    id: int
    first_name: Optional[str]
    last_name: Optional[str]


@dataclass(frozen=True)
class PortalOffice:
    id: int
    name: Optional[str]
    brokerage_name: Optional[str]


@dataclass(frozen=True)
class OriginalUser:
    id: str
    email: str
    name: Optional[str]


@dataclass(frozen=True)
class PortalSession:
    """Authenticated portal context for one request."""

    user: PortalUser
    agent: Optional[PortalAgent] = None
    offices: Optional[list[PortalOffice]] = None
    is_impersonating: bool = False
    original_user: Optional[OriginalUser] = None

    @property
    def role(self) -> str:
        return self.user.role


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a portal authorization check: a session or an error."""

    session: Optional[PortalSession] = None
    error: Optional[PortalAuthError] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.session is not None

    @classmethod
    def success(cls, session: PortalSession) -> "AuthResult":
        return cls(session=session)

    @classmethod
    def failure(cls, message: str, status: int) -> "AuthResult":
        return cls(error=PortalAuthError(message, status))


SessionResolver = Callable[[object], Optional[PortalSession]]


def get_impersonation_cookie_name() -> str:
    return settings.PORTAL_IMPERSONATION_COOKIE


def load_impersonation_target(raw_user_id: object):
    """Return the user referenced by an impersonation cookie value, if any."""
    try:
        user_id = uuid.UUID(str(raw_user_id))
    except ValueError:
        return None
    return User.objects.filter(pk=user_id).first()


def _load_agent(user) -> Optional[PortalAgent]:
    agent = Agent.objects.filter(user=user).only("id", "first_name", "last_name").first()
    if agent is None:
        return None
    return PortalAgent(id=agent.id, first_name=agent.first_name, last_name=agent.last_name)


def _load_offices(user) -> list[PortalOffice]:
    rows = Office.objects.filter(admin_links__user=user).values("id", "name", "brokerage_name")
    return [
        PortalOffice(id=row["id"], name=row["name"], brokerage_name=row["brokerage_name"])
        for row in rows
    ]


def _build_session(user, original_user: Optional[OriginalUser] = None) -> PortalSession:
    agent = None
    offices = None
    if user.role == User.RoleChoices.AGENT:
        agent = _load_agent(user)
    if user.role == User.RoleChoices.OFFICE_ADMIN:
        offices = _load_offices(user)

    return PortalSession(
        user=PortalUser(
            id=str(user.pk),
            email=user.email or "",
            name=user.name or None,
            role=user.role,
        ),
        agent=agent,
        offices=offices,
        is_impersonating=original_user is not None,
        original_user=original_user,
    )


def get_portal_session(request) -> Optional[PortalSession]:
    """Resolve the portal session for ``request``.

    Returns ``None`` when the caller is anonymous, has no email or holds a
    non-portal role. A super admin carrying the impersonation cookie gets the
    session of the impersonated user instead, unless that user is missing or
    is a super admin too.
    """
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated or not getattr(user, "email", None):
        return None

    if user.role not in PORTAL_ROLES:
        return None

    if user.role == User.RoleChoices.SUPER_ADMIN:
        impersonated_id = request.COOKIES.get(get_impersonation_cookie_name())
        if impersonated_id:
            target = load_impersonation_target(impersonated_id)
            if target is not None and target.role != User.RoleChoices.SUPER_ADMIN:
                logger.debug(f"Super admin {user.pk} acting as {target.pk}")
                original = OriginalUser(id=str(user.pk), email=user.email, name=user.name or None)
                return _build_session(target, original_user=original)

    return _build_session(user)


def authorize(
    request,
    allowed_roles: Iterable[str] | None = None,
    resolver: SessionResolver = get_portal_session,
) -> AuthResult:
    """Resolve the session and check its role, returning an ``AuthResult``.

    ``allowed_roles=None`` only requires a portal session.
    """
    session = resolver(request)
    if session is None:
        return AuthResult.failure("Unauthorized", 401)
    if allowed_roles is not None and session.role not in tuple(allowed_roles):
        return AuthResult.failure("Forbidden", 403)
    return AuthResult.success(session)


def require_portal_role(
    request,
    allowed_roles: Iterable[str],
    resolver: SessionResolver = get_portal_session,
) -> PortalSession:
    """Return the session or raise ``PortalAuthError`` (401 or 403)."""
    result = authorize(request, allowed_roles, resolver=resolver)
    if not result.ok:
        raise result.error
    return result.session


# --- Access helpers -------------------------------------------------------


def can_access_lead(
    session: PortalSession,
    lead_agent_id: int | None,
    lead_office_id: int | None,
) -> bool:
    """Super admins see every lead, office admins their offices', agents their own."""
    if session.role == User.RoleChoices.SUPER_ADMIN:
        return True

    if session.role == User.RoleChoices.OFFICE_ADMIN and session.offices:
        office_ids = {office.id for office in session.offices}
        return lead_office_id is not None and lead_office_id in office_ids

    if session.role == User.RoleChoices.AGENT and session.agent:
        return lead_agent_id == session.agent.id

    return False


def can_manage_office(session: PortalSession, office_id: int) -> bool:
    if session.role == User.RoleChoices.SUPER_ADMIN:
        return True

    if session.role == User.RoleChoices.OFFICE_ADMIN and session.offices:
        return office_id in {office.id for office in session.offices}

    return False


def get_accessible_office_ids(session: PortalSession) -> list[int] | None:
    """Office ids visible to the session; ``None`` means every office."""
    if session.role == User.RoleChoices.SUPER_ADMIN:
        return None

    if session.role == User.RoleChoices.OFFICE_ADMIN and session.offices:
        return [office.id for office in session.offices]

    return []
