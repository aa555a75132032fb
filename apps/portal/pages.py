"""Server-rendered portal pages."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.shortcuts import redirect  # type: ignore
from django.views.generic import TemplateView  # type: ignore

from .auth import get_portal_session


class PortalDashboardView(TemplateView):
    """Portal landing page rendered inside the dashboard layout."""

    template_name = "portal/dashboard.html"
    session_resolver = staticmethod(get_portal_session)

    def get(self, request, *args, **kwargs):  # type: ignore
        self.portal_session = self.session_resolver(request)
        if self.portal_session is None:
            return redirect(settings.PORTAL_LOGIN_URL)
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs):  # type: ignore
        context = super().get_context_data(**kwargs)
        context["portal_session"] = self.portal_session
        return context
