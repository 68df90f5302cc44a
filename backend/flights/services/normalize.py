import re
from datetime import datetime, timezone

from flights.types import Flight

HOURS_RE = re.compile(r"(-?\d+)\s*h")
MINUTES_RE = re.compile(r"(-?\d+)\s*m")

DEFAULT_FLIGHT_NUMBER = "Unknown"
DEFAULT_AIRLINE = "Unknown Airline"
DEFAULT_AIRPORT = "Unknown"
DEFAULT_AIRCRAFT = "Boeing 737"
DEFAULT_STATUS = "Unknown"
DEFAULT_FLIGHT_CODE = "UK"

# Timezones alone give the wrong city for these airports (e.g. Gold Coast
# reports Australia/Brisbane), so they are pinned by IATA code.
CITY_OVERRIDES = {
    "CBR": "Canberra",
    "OOL": "Gold Coast",
    "HBA": "Hobart",
    "LST": "Launceston",
    "NTL": "Newcastle",
    "AVV": "Avalon",
    "CHC": "Christchurch",
    "WOL": "Wollongong",
    "MCY": "Sunshine Coast",
    "TSV": "Townsville",
    "CNS": "Cairns",
    "DRW": "Darwin",
    "ASP": "Alice Springs",
    "BNE": "Brisbane",
    "MEL": "Melbourne",
    "SYD": "Sydney",
    "ADL": "Adelaide",
    "PER": "Perth",
    "AKL": "Auckland",
    "WLG": "Wellington",
    "ZQN": "Queenstown",
}

BASE_PRICE = 100
PRICE_PER_HOUR = 50


def parse_duration_to_minutes(value):
    """Parse "7h 30m", "45m" or "2h" into total minutes; anything else is 0."""
    if not value or not isinstance(value, str):
        return 0
    hours = HOURS_RE.search(value)
    minutes = MINUTES_RE.search(value)
    total = 0
    if hours:
        total += int(hours.group(1)) * 60
    if minutes:
        total += int(minutes.group(1))
    return total


def format_duration(minutes: int) -> str:
    hours, rest = divmod(int(minutes), 60)
    return f"{hours}h {rest}m"


def parse_timestamp(value) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def minutes_between(start, end) -> int:
    """Whole minutes from start to end, floored; 0 when either side is missing."""
    depart_at = parse_timestamp(start)
    arrive_at = parse_timestamp(end)
    if depart_at is None or arrive_at is None:
        return 0
    return int((arrive_at - depart_at).total_seconds() // 60)


def city_from_timezone(tz_name) -> str | None:
    """"Australia/Sydney" -> "Sydney", "America/Los_Angeles" -> "Los Angeles"."""
    if not tz_name or not isinstance(tz_name, str):
        return None
    parts = tz_name.split("/")
    if len(parts) < 2 or not parts[-1]:
        return None
    return parts[-1].replace("_", " ")


def resolve_city(iata, tz_name, airport_name=None) -> str:
    if iata and iata in CITY_OVERRIDES:
        return CITY_OVERRIDES[iata]
    return city_from_timezone(tz_name) or airport_name or DEFAULT_AIRPORT


def flight_number_hash(flight_number: str) -> int:
    """Stable character-code sum. Not a cryptographic hash."""
    return sum(ord(char) for char in flight_number or "")


def simulate_price(flight_number: str, duration_minutes: int) -> float:
    """Deterministic stand-in price for providers that do not quote fares."""
    hours = int(duration_minutes) // 60
    price = BASE_PRICE + hours * PRICE_PER_HOUR + flight_number_hash(flight_number) % 100
    return float(max(price, 0))


def _section(item, key) -> dict:
    value = item.get(key)
    return value if isinstance(value, dict) else {}


def normalize_aviationstack_flight(item) -> Flight:
    """Map one AviationStack `/flights` item onto the canonical Flight.

    Every provider field is treated as optional; missing values fall back to
    the module defaults instead of failing the whole response.
    """
    if not isinstance(item, dict):
        item = {}

    flight = _section(item, "flight")
    airline = _section(item, "airline")
    departure = _section(item, "departure")
    arrival = _section(item, "arrival")
    aircraft = _section(item, "aircraft")

    flight_date = item.get("flight_date") or ""
    departure_time = departure.get("scheduled") or (f"{flight_date}T00:00:00+00:00" if flight_date else "")
    arrival_time = arrival.get("scheduled") or departure_time

    duration_minutes = minutes_between(departure_time, arrival_time)
    flight_number = flight.get("iata") or flight.get("number") or DEFAULT_FLIGHT_NUMBER

    return Flight(
        id=f"{flight.get('iata') or DEFAULT_FLIGHT_CODE}-{flight_date or 'unknown'}",
        flight_number=str(flight_number),
        airline=airline.get("name") or DEFAULT_AIRLINE,
        origin=departure.get("iata") or departure.get("airport") or DEFAULT_AIRPORT,
        destination=arrival.get("iata") or arrival.get("airport") or DEFAULT_AIRPORT,
        origin_city=resolve_city(departure.get("iata"), departure.get("timezone"), departure.get("airport")),
        destination_city=resolve_city(arrival.get("iata"), arrival.get("timezone"), arrival.get("airport")),
        departure_time=departure_time,
        arrival_time=arrival_time,
        duration=format_duration(duration_minutes),
        price=simulate_price(str(flight_number), duration_minutes),
        # The live feed only carries direct legs.
        stops=0,
        aircraft=aircraft.get("iata") or DEFAULT_AIRCRAFT,
        status=item.get("flight_status") or DEFAULT_STATUS,
        gate=departure.get("gate"),
        terminal=departure.get("terminal"),
    )
