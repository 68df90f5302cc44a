from __future__ import annotations

from dataclasses import asdict, dataclass, field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Flight:
    """Canonical flight record returned by every provider."""

    id: str
    flight_number: str
    airline: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    duration: str
    price: float
    stops: int
    aircraft: str
    status: str
    origin_city: str | None = None
    destination_city: str | None = None
    gate: str | None = None
    terminal: str | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "flightNumber": self.flight_number,
            "airline": self.airline,
            "origin": self.origin,
            "destination": self.destination,
            "departureTime": self.departure_time,
            "arrivalTime": self.arrival_time,
            "duration": self.duration,
            "price": self.price,
            "stops": self.stops,
            "aircraft": self.aircraft,
            "status": self.status,
        }
        # Optional fields are omitted rather than sent as null.
        optional = {
            "originCity": self.origin_city,
            "destinationCity": self.destination_city,
            "gate": self.gate,
            "terminal": self.terminal,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


@dataclass(frozen=True)
class SearchCriteria:
    origin: str | None = None
    destination: str | None = None
    date: str | None = None
    max_price: float | None = None
    min_price: float | None = None
    stops: str | None = None
    min_duration: float | None = None
    max_duration: float | None = None
    flight_code: str | None = None
    status: str | None = None
    sort_by: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def has_location_filters(self) -> bool:
        """True when the caller narrowed the search by route, code or status."""
        return any((self.origin, self.destination, self.flight_code, self.status))


@dataclass(frozen=True)
class Pagination:
    total: int
    offset: int
    limit: int


@dataclass(frozen=True)
class SearchResponse:
    data: tuple[Flight, ...] = ()
    pagination: Pagination = field(default_factory=lambda: Pagination(0, 0, DEFAULT_LIMIT))

    def to_dict(self) -> dict:
        return {
            "data": [flight.to_dict() for flight in self.data],
            "pagination": asdict(self.pagination),
        }
