"""Brokerage models used by the portal."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Agent(models.Model):
    """Listing agent, optionally linked to a portal account."""

    first_name = models.CharField(max_length=100, null=True, blank=True)
    last_name = models.CharField(max_length=100, null=True, blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True, db_index=True)
    license_num = models.CharField(max_length=50, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    photo_url = models.URLField(null=True, blank=True)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="agent_profile",
        help_text=_("Portal account of the agent."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Agent")
        verbose_name_plural = _("Agents")
        ordering = ["last_name", "first_name"]

    def __str__(self) -> str:
        full_name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return full_name or f"Agent #{self.pk}"


class Office(models.Model):
    """Brokerage office that owns listings and employs agents."""

    name = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    brokerage_name = models.CharField(max_length=255, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    email = models.EmailField(max_length=255, null=True, blank=True)
    street_address = models.CharField(max_length=255, null=True, blank=True)
    city = models.CharField(max_length=100, null=True, blank=True)
    state = models.CharField(max_length=2, null=True, blank=True)
    zip = models.CharField(max_length=10, null=True, blank=True)
    logo_url = models.URLField(null=True, blank=True)
    lead_routing_email = models.EmailField(max_length=255, null=True, blank=True)
    route_to_team_lead = models.BooleanField(default=False)
    admins = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="OfficeAdmin",
        related_name="administered_offices",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Office")
        verbose_name_plural = _("Offices")
        ordering = ["name", "brokerage_name"]

    def __str__(self) -> str:
        if self.brokerage_name:
            return f"{self.name} ({self.brokerage_name})"
        return self.name or f"Office #{self.pk}"


class OfficeAdmin(models.Model):
    """Grants a portal user admin rights over an office."""

    office = models.ForeignKey(Office, on_delete=models.CASCADE, related_name="admin_links")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="office_admin_links",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Office admin")
        verbose_name_plural = _("Office admins")
        constraints = [
            models.UniqueConstraint(fields=["office", "user"], name="unique_office_admin"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.office_id}"
