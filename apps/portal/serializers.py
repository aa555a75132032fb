"""Serializers shaping portal session and office payloads."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class PortalUserSerializer(serializers.Serializer):
    id = serializers.CharField()
    email = serializers.CharField()
    name = serializers.CharField(allow_null=True)
    role = serializers.CharField()


class PortalAgentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    firstName = serializers.CharField(source="first_name", allow_null=True)
    lastName = serializers.CharField(source="last_name", allow_null=True)


class OfficeSummarySerializer(serializers.Serializer):
    """Office projection shared by the session payload and the office list."""

    id = serializers.IntegerField()
    name = serializers.CharField(allow_null=True)
    brokerageName = serializers.CharField(source="brokerage_name", allow_null=True)


class OriginalUserSerializer(serializers.Serializer):
    id = serializers.CharField()
    email = serializers.CharField()
    name = serializers.CharField(allow_null=True)


class PortalSessionSerializer(serializers.Serializer):
    """Payload of ``GET /api/portal/auth/me/``."""

    user = PortalUserSerializer()
    agent = PortalAgentSerializer(allow_null=True)
    offices = OfficeSummarySerializer(many=True, allow_null=True)
    isImpersonating = serializers.BooleanField(source="is_impersonating", default=False)
    originalUser = OriginalUserSerializer(source="original_user", allow_null=True)


class ImpersonationTargetSerializer(serializers.ModelSerializer):
    """Account shown while a super admin is impersonating it."""

    id = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "role"]
        read_only_fields = ["email", "name", "role"]
