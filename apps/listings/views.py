"""Public listing API views."""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import queries

logger = logging.getLogger(__name__)


class CityListView(APIView):
    """Cities that currently have listings, with their listing counts."""

    permission_classes = [permissions.AllowAny]
    authentication_classes: list = []

    def get(self, request, format=None):  # type: ignore
        try:
            cities = queries.get_cities_with_counts()
        except Exception as exc:
            logger.error(f"Error fetching cities: {exc}", exc_info=True)
            return Response(
                {"error": "Failed to fetch cities"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(cities)
