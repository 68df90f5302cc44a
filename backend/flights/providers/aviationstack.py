import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import zip_longest

import requests

from flights.providers.base import FlightProvider, ProviderError
from flights.services.normalize import normalize_aviationstack_flight
from flights.services.search import (
    matches_duration,
    matches_place,
    matches_price,
    matches_stops,
    sort_flights,
)
from flights.types import Pagination, SearchResponse

logger = logging.getLogger(__name__)

# AviationStack: real-time flights endpoint (no fares on any plan).

AVIATIONSTACK_BASE_URL = "http://api.aviationstack.com/v1"
DEFAULT_REFERENCE_HUB = "SYD"

IATA_CODE_LENGTH = 3
_MISSING = object()


def _is_airport_code(value) -> bool:
    return isinstance(value, str) and len(value) == IATA_CODE_LENGTH


def _as_int(value, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _items(payload: dict) -> list[dict]:
    data = payload.get("data")
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]


def _pagination(payload: dict) -> dict:
    pagination = payload.get("pagination")
    return pagination if isinstance(pagination, dict) else {}


def interleave(first, second) -> list:
    """first[0], second[0], first[1], second[1], ... then whatever is left."""
    combined = []
    for left, right in zip_longest(first, second, fillvalue=_MISSING):
        if left is not _MISSING:
            combined.append(left)
        if right is not _MISSING:
            combined.append(right)
    return combined


class AviationStackProvider(FlightProvider):
    name = "aviationstack"

    def __init__(self, api_key, base_url=AVIATIONSTACK_BASE_URL, reference_hub=DEFAULT_REFERENCE_HUB):
        if not api_key:
            raise ProviderError("AviationStack API key is not configured.", status_code=500)
        self.api_key = api_key
        self.base_url = (base_url or AVIATIONSTACK_BASE_URL).rstrip("/")
        self.reference_hub = (reference_hub or DEFAULT_REFERENCE_HUB).upper()

    @property
    def flights_url(self) -> str:
        return f"{self.base_url}/flights"

    def search_flights(self, criteria):
        query = self._build_query(criteria)

        if not criteria.has_location_filters():
            try:
                return self._search_reference_hub(criteria, query)
            except ProviderError:
                # Best effort: keep serving departures rather than failing the page.
                logger.warning(
                    "AviationStack parallel fetch failed, falling back to departures from %s.",
                    self.reference_hub,
                )
                query["dep_iata"] = self.reference_hub
        else:
            if criteria.flight_code:
                query["flight_iata"] = criteria.flight_code
            if _is_airport_code(criteria.origin):
                query["dep_iata"] = criteria.origin.upper()
            if _is_airport_code(criteria.destination):
                query["arr_iata"] = criteria.destination.upper()
            if criteria.status:
                query["flight_status"] = criteria.status

        payload = self._request_json(query)
        flights = self._apply_local_filters(
            [normalize_aviationstack_flight(item) for item in _items(payload)],
            criteria,
        )
        pagination = _pagination(payload)

        return SearchResponse(
            data=tuple(flights),
            pagination=Pagination(
                total=_as_int(pagination.get("total"), 0),
                offset=_as_int(pagination.get("offset"), criteria.offset),
                limit=_as_int(pagination.get("limit"), criteria.limit),
            ),
        )

    def _build_query(self, criteria) -> dict:
        return {
            "access_key": self.api_key,
            "limit": criteria.limit,
            "offset": criteria.offset,
        }

    def _search_reference_hub(self, criteria, query):
        """Half a page of departures and half of arrivals at the hub, interleaved."""
        half_page = max(1, criteria.limit // 2)
        # Each side pages through its own list in half-page steps.
        half_offset = (criteria.page - 1) * half_page
        departures_query = {**query, "dep_iata": self.reference_hub, "limit": half_page, "offset": half_offset}
        arrivals_query = {**query, "arr_iata": self.reference_hub, "limit": half_page, "offset": half_offset}

        with ThreadPoolExecutor(max_workers=2) as pool:
            departures_future = pool.submit(self._request_json, departures_query)
            arrivals_future = pool.submit(self._request_json, arrivals_query)
            departures_payload = departures_future.result()
            arrivals_payload = arrivals_future.result()

        departures = [normalize_aviationstack_flight(item) for item in _items(departures_payload)]
        arrivals = [normalize_aviationstack_flight(item) for item in _items(arrivals_payload)]
        flights = self._apply_local_filters(interleave(departures, arrivals), criteria)[: criteria.limit]

        total = _as_int(_pagination(departures_payload).get("total"), 0) + _as_int(
            _pagination(arrivals_payload).get("total"), 0
        )
        return SearchResponse(
            data=tuple(flights),
            pagination=Pagination(total=total, offset=criteria.offset, limit=criteria.limit),
        )

    def _apply_local_filters(self, flights, criteria) -> list:
        """Filters AviationStack cannot apply server-side, then the requested ordering."""
        origin = criteria.origin if not _is_airport_code(criteria.origin) else None
        destination = criteria.destination if not _is_airport_code(criteria.destination) else None

        filtered = [
            flight
            for flight in flights
            if matches_place(flight, origin, destination)
            and matches_price(flight, criteria.min_price, criteria.max_price)
            and matches_stops(flight, criteria.stops)
            and matches_duration(flight, criteria.min_duration, criteria.max_duration)
        ]
        return sort_flights(filtered, criteria.sort_by)

    def _redact(self, text: str) -> str:
        return text.replace(self.api_key, "***") if self.api_key else text

    def _request_json(self, query: dict) -> dict:
        try:
            response = requests.get(self.flights_url, params=query)
        except requests.RequestException as exc:
            logger.error("AviationStack request failed: %s", self._redact(str(exc)))
            raise ProviderError(
                "AviationStack request failed.",
                details={"error": self._redact(str(exc))},
            ) from exc

        if response.status_code >= 400:
            try:
                details = response.json()
            except ValueError:
                details = {"error": response.text}
            logger.warning(
                "AviationStack error response",
                extra={"status_code": response.status_code, "details": details},
            )
            raise ProviderError(
                "AviationStack returned an error.",
                details={"upstreamStatus": response.status_code, "body": details},
            )

        try:
            payload = response.json()
        except ValueError:
            raise ProviderError("AviationStack response was not valid JSON.")

        if not isinstance(payload, dict):
            raise ProviderError("AviationStack response had an unexpected shape.")

        error = payload.get("error")
        if error:
            info = error.get("info") if isinstance(error, dict) else str(error)
            logger.warning("AviationStack error payload", extra={"details": error})
            raise ProviderError(
                f"AviationStack API error: {info or 'Unknown error'}",
                details={"body": error},
            )

        return payload
