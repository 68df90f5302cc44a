from datetime import datetime, timezone

from flights.services.normalize import parse_duration_to_minutes, parse_timestamp
from flights.types import Pagination, SearchResponse

STOPS_NON_STOP = "non-stop"
STOPS_ONE_PLUS = "1+"

SORT_PRICE_ASC = "price_asc"
SORT_DEPARTURE_ASC = "departure_asc"
SORT_DURATION_ASC = "duration_asc"

STATUS_ALIASES = {
    "active": "On Time",
    "scheduled": "On Time",
    "landed": "On Time",
    "cancelled": "Cancelled",
}

# Unparseable departures sort after everything else.
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


def _contains(haystack, needle) -> bool:
    return needle.lower() in (haystack or "").lower()


def matches_place(flight, origin=None, destination=None) -> bool:
    """Case-insensitive substring match on airport or city names."""
    if origin and not (_contains(flight.origin, origin) or _contains(flight.origin_city, origin)):
        return False
    if destination and not (
        _contains(flight.destination, destination) or _contains(flight.destination_city, destination)
    ):
        return False
    return True


def matches_price(flight, min_price=None, max_price=None) -> bool:
    if max_price is not None and flight.price > max_price:
        return False
    if min_price is not None and flight.price < min_price:
        return False
    return True


def matches_duration(flight, min_duration=None, max_duration=None) -> bool:
    if min_duration is None and max_duration is None:
        return True
    minutes = parse_duration_to_minutes(flight.duration)
    if min_duration is not None and minutes < min_duration:
        return False
    if max_duration is not None and minutes > max_duration:
        return False
    return True


def matches_stops(flight, stops=None) -> bool:
    if stops == STOPS_NON_STOP:
        return flight.stops == 0
    if stops == STOPS_ONE_PLUS:
        return flight.stops >= 1
    return True


def matches_flight_code(flight, flight_code=None) -> bool:
    if not flight_code:
        return True
    return _contains(flight.flight_number, flight_code) or _contains(flight.airline, flight_code)


def matches_status(flight, status=None) -> bool:
    if not status:
        return True
    target = STATUS_ALIASES.get(status.lower(), status)
    return _contains(flight.status, target)


def filter_flights(flights, criteria) -> list:
    return [
        flight
        for flight in flights
        if matches_place(flight, criteria.origin, criteria.destination)
        and matches_price(flight, criteria.min_price, criteria.max_price)
        and matches_duration(flight, criteria.min_duration, criteria.max_duration)
        and matches_stops(flight, criteria.stops)
        and matches_flight_code(flight, criteria.flight_code)
        and matches_status(flight, criteria.status)
    ]


def _departure_key(flight):
    return parse_timestamp(flight.departure_time) or _LATEST


SORT_KEYS = {
    SORT_PRICE_ASC: lambda flight: flight.price,
    SORT_DEPARTURE_ASC: _departure_key,
    SORT_DURATION_ASC: lambda flight: parse_duration_to_minutes(flight.duration),
}


def sort_flights(flights, sort_by) -> list:
    key = SORT_KEYS.get(sort_by)
    if key is None:
        return list(flights)
    return sorted(flights, key=key)


def paginate(flights, page, limit) -> SearchResponse:
    offset = (page - 1) * limit
    return SearchResponse(
        data=tuple(flights[offset : offset + limit]),
        pagination=Pagination(total=len(flights), offset=offset, limit=limit),
    )


def search_flights(flights, criteria) -> SearchResponse:
    """Filter, sort and paginate an in-memory sequence of canonical flights."""
    matched = filter_flights(flights, criteria)
    ordered = sort_flights(matched, criteria.sort_by)
    return paginate(ordered, criteria.page, criteria.limit)
