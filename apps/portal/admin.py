"""Admin registrations for the portal domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Agent, Office, OfficeAdmin


class OfficeAdminInline(admin.TabularInline):
    model = OfficeAdmin
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(Office)
class OfficeModelAdmin(admin.ModelAdmin):
    list_display = ("name", "brokerage_name", "city", "state", "phone", "created_at")
    list_filter = ("state", "route_to_team_lead")
    search_fields = ("name", "brokerage_name", "city", "email")
    readonly_fields = ("created_at", "updated_at")
    inlines = [OfficeAdminInline]


@admin.register(Agent)
class AgentModelAdmin(admin.ModelAdmin):
    list_display = ("last_name", "first_name", "email", "license_num", "user")
    search_fields = ("first_name", "last_name", "email", "license_num")
    autocomplete_fields = ("user",)
    readonly_fields = ("created_at", "updated_at")
