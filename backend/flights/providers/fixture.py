from flights.fixtures import FIXTURE_FLIGHTS
from flights.providers.base import FlightProvider
from flights.services.search import search_flights


class FixtureFlightProvider(FlightProvider):
    """Serves the bundled fixture flights; used when no live credentials are set."""

    name = "fixture"

    def __init__(self, flights=FIXTURE_FLIGHTS):
        self.flights = tuple(flights)

    def search_flights(self, criteria):
        return search_flights(self.flights, criteria)
