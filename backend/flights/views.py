import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from flights.providers import get_flight_provider
from flights.providers.base import ProviderError
from flights.serializers import build_criteria

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Failed to fetch flights"


class ProviderMixin:
    # Injected through as_view(provider=...); otherwise the process-wide choice.
    provider = None

    def get_provider(self):
        return self.provider or get_flight_provider()


class HealthView(ProviderMixin, APIView):
    def get(self, request):
        try:
            provider_name = self.get_provider().name
        except ProviderError:
            logger.exception("Flight provider is misconfigured.")
            return Response(
                {"status": "error", "provider": None},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({"status": "ok", "provider": provider_name})


class FlightSearchView(ProviderMixin, APIView):
    def get(self, request):
        criteria = build_criteria(request.query_params)

        try:
            result = self.get_provider().search_flights(criteria)
        except ProviderError as exc:
            logger.warning(
                "Flight search failed: %s",
                exc,
                extra={"status_code": exc.status_code, "details": exc.details},
            )
            return Response(
                {"error": SEARCH_FAILED_MESSAGE},
                status=exc.status_code or status.HTTP_502_BAD_GATEWAY,
            )
        except Exception:
            logger.exception("Unexpected flight search error.")
            return Response(
                {"error": SEARCH_FAILED_MESSAGE},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(result.to_dict())
