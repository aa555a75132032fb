"""Listing models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Listing(models.Model):
    """MLS listing imported from the brokerage feed."""

    class Status(models.TextChoices):
        ACTIVE = "Active", _("Active")
        PENDING = "Pending", _("Pending")
        SOLD = "Sold", _("Sold")
        LEASED = "Leased", _("Leased")

    mls_id = models.CharField(max_length=50, unique=True)
    internal_mls_id = models.CharField(max_length=50, null=True, blank=True)
    mls_board = models.CharField(max_length=100, null=True, blank=True)

    # Location
    street_address = models.CharField(max_length=255)
    unit_number = models.CharField(max_length=50, null=True, blank=True)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=2)
    zip = models.CharField(max_length=10)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)

    # Listing details
    status = models.CharField(max_length=50, default=Status.ACTIVE)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    listing_url = models.URLField(null=True, blank=True)
    property_type = models.CharField(max_length=50, null=True, blank=True)
    description = models.TextField(null=True, blank=True)
    bedrooms = models.PositiveSmallIntegerField(null=True, blank=True)
    bathrooms = models.DecimalField(max_digits=3, decimal_places=1, null=True, blank=True)
    living_area = models.PositiveIntegerField(null=True, blank=True)
    year_built = models.PositiveSmallIntegerField(null=True, blank=True)

    agent = models.ForeignKey(
        "portal.Agent",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="listings",
    )
    office = models.ForeignKey(
        "portal.Office",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="listings",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["city", "state"], name="listing_city_state_idx"),
            models.Index(fields=["status"], name="listing_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.mls_id}: {self.street_address}, {self.city}, {self.state}"
