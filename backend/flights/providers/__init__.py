from functools import lru_cache

from django.conf import settings

from flights.providers.aviationstack import AviationStackProvider
from flights.providers.base import FlightProvider, ProviderError
from flights.providers.fixture import FixtureFlightProvider

__all__ = ["FlightProvider", "ProviderError", "get_flight_provider", "create_flight_provider"]


def create_flight_provider():
    """Build the provider named by settings; live when an API key is configured."""

    api_key = getattr(settings, "AVIATIONSTACK_API_KEY", None)
    raw_name = getattr(settings, "FLIGHTS_PROVIDER", None) or ("aviationstack" if api_key else "fixture")
    provider_name = str(raw_name).strip().lower()

    aliases = {
        "aviationstack": "aviationstack",
        "aviation-stack": "aviationstack",
        "live": "aviationstack",
        "fixture": "fixture",
        "fixtures": "fixture",
        "mock": "fixture",
    }

    provider_name = aliases.get(provider_name, provider_name)

    if provider_name == "aviationstack":
        return AviationStackProvider(
            api_key,
            base_url=getattr(settings, "AVIATIONSTACK_BASE_URL", None),
            reference_hub=getattr(settings, "FLIGHTS_REFERENCE_HUB", None),
        )

    if provider_name == "fixture":
        return FixtureFlightProvider()

    raise ProviderError(f"Unknown flights provider: {provider_name}", status_code=500)


@lru_cache(maxsize=1)
def get_flight_provider():
    """Return the process-wide provider, chosen once on first use."""
    return create_flight_provider()
