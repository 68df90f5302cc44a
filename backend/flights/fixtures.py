from flights.types import Flight

FIXTURE_FLIGHTS = (
    Flight(
        id="1",
        airline="SkyHigh Airways",
        flight_number="SH101",
        origin="New York (JFK)",
        destination="London (LHR)",
        origin_city="New York",
        destination_city="London",
        departure_time="2024-05-20T08:00:00Z",
        arrival_time="2024-05-20T20:00:00Z",
        duration="7h 00m",
        price=450,
        stops=0,
        aircraft="Boeing 787",
        status="On Time",
    ),
    Flight(
        id="2",
        airline="Oceanic Airlines",
        flight_number="OA815",
        origin="Sydney (SYD)",
        destination="Los Angeles (LAX)",
        origin_city="Sydney",
        destination_city="Los Angeles",
        departure_time="2024-05-21T14:30:00Z",
        # Local arrival time, earlier than departure in UTC terms.
        arrival_time="2024-05-21T06:00:00Z",
        duration="13h 30m",
        price=1200,
        stops=0,
        aircraft="Airbus A350",
        status="On Time",
    ),
    Flight(
        id="3",
        airline="Global Transit",
        flight_number="GT303",
        origin="Dubai (DXB)",
        destination="Tokyo (HND)",
        origin_city="Dubai",
        destination_city="Tokyo",
        departure_time="2024-05-22T22:00:00Z",
        arrival_time="2024-05-23T12:00:00Z",
        duration="9h 00m",
        price=800,
        stops=1,
        aircraft="Boeing 777",
        status="Delayed",
    ),
    Flight(
        id="4",
        airline="EuroWings",
        flight_number="EW456",
        origin="Berlin (BER)",
        destination="Paris (CDG)",
        origin_city="Berlin",
        destination_city="Paris",
        departure_time="2024-05-20T09:00:00Z",
        arrival_time="2024-05-20T10:45:00Z",
        duration="1h 45m",
        price=120,
        stops=0,
        aircraft="Airbus A320",
        status="On Time",
    ),
    Flight(
        id="5",
        airline="Liberty Air",
        flight_number="LA789",
        origin="San Francisco (SFO)",
        destination="New York (JFK)",
        origin_city="San Francisco",
        destination_city="New York",
        departure_time="2024-05-21T06:00:00Z",
        arrival_time="2024-05-21T14:30:00Z",
        duration="5h 30m",
        price=350,
        stops=0,
        aircraft="Boeing 737 MAX",
        status="Cancelled",
    ),
)
