from dataclasses import replace

from django.test import SimpleTestCase

from flights.fixtures import FIXTURE_FLIGHTS
from flights.providers.fixture import FixtureFlightProvider
from flights.services.search import search_flights, sort_flights
from flights.types import SearchCriteria


def ids(response):
    return [flight.id for flight in response.data]


class FixtureSearchTests(SimpleTestCase):
    def setUp(self):
        self.provider = FixtureFlightProvider()

    def test_empty_criteria_returns_everything_in_fixture_order(self):
        response = self.provider.search_flights(SearchCriteria())

        self.assertEqual(ids(response), ["1", "2", "3", "4", "5"])
        self.assertEqual(response.pagination.total, 5)
        self.assertEqual(response.pagination.offset, 0)
        self.assertEqual(response.pagination.limit, 10)

    def test_origin_and_max_price(self):
        response = self.provider.search_flights(SearchCriteria(origin="JFK", max_price=500))

        self.assertEqual(ids(response), ["1"])
        self.assertEqual(response.pagination.total, 1)

    def test_origin_match_is_case_insensitive_substring(self):
        response = self.provider.search_flights(SearchCriteria(origin="sydney"))
        self.assertEqual(ids(response), ["2"])

    def test_non_stop_excludes_connecting_flights(self):
        response = self.provider.search_flights(SearchCriteria(stops="non-stop"))

        self.assertNotIn("3", ids(response))
        self.assertTrue(all(flight.stops == 0 for flight in response.data))

    def test_one_plus_stops(self):
        response = self.provider.search_flights(SearchCriteria(stops="1+"))
        self.assertEqual(ids(response), ["3"])

    def test_price_bounds_are_inclusive(self):
        response = self.provider.search_flights(SearchCriteria(min_price=350, max_price=800))

        self.assertEqual(ids(response), ["1", "3", "5"])
        for flight in response.data:
            self.assertTrue(350 <= flight.price <= 800)

    def test_zero_max_price_is_a_real_bound(self):
        response = self.provider.search_flights(SearchCriteria(max_price=0))
        self.assertEqual(response.pagination.total, 0)

    def test_duration_bounds(self):
        response = self.provider.search_flights(SearchCriteria(min_duration=300, max_duration=540))
        self.assertEqual(ids(response), ["1", "3", "5"])

    def test_flight_code_matches_number_or_airline(self):
        self.assertEqual(ids(self.provider.search_flights(SearchCriteria(flight_code="gt3"))), ["3"])
        self.assertEqual(ids(self.provider.search_flights(SearchCriteria(flight_code="oceanic"))), ["2"])

    def test_status_aliases(self):
        on_time = self.provider.search_flights(SearchCriteria(status="active"))
        self.assertEqual(ids(on_time), ["1", "2", "4"])

        cancelled = self.provider.search_flights(SearchCriteria(status="cancelled"))
        self.assertEqual(ids(cancelled), ["5"])

        delayed = self.provider.search_flights(SearchCriteria(status="delayed"))
        self.assertEqual(ids(delayed), ["3"])

    def test_date_does_not_filter(self):
        response = self.provider.search_flights(SearchCriteria(origin="JFK", date="2026-10-19"))
        self.assertEqual(ids(response), ["1"])

    def test_fractional_duration_bound(self):
        response = self.provider.search_flights(SearchCriteria(min_duration=419.5, max_duration=420.5))
        self.assertEqual(ids(response), ["1"])

    def test_no_matches_is_an_empty_page(self):
        response = self.provider.search_flights(SearchCriteria(origin="Reykjavik"))

        self.assertEqual(response.data, ())
        self.assertEqual(response.pagination.total, 0)

    def test_fixture_source_is_stable(self):
        first = self.provider.search_flights(SearchCriteria())
        second = self.provider.search_flights(SearchCriteria())
        self.assertEqual(first, second)


class SortingTests(SimpleTestCase):
    def test_price_asc_is_non_decreasing_and_idempotent(self):
        response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="price_asc"))
        prices = [flight.price for flight in response.data]

        self.assertEqual(prices, sorted(prices))
        self.assertEqual(list(response.data), sort_flights(response.data, "price_asc"))

    def test_departure_asc(self):
        response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="departure_asc"))
        self.assertEqual(ids(response), ["1", "4", "5", "2", "3"])

    def test_duration_asc(self):
        response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="duration_asc"))
        self.assertEqual(ids(response), ["4", "5", "1", "3", "2"])

    def test_unknown_sort_keeps_order(self):
        response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="cheapest_first"))
        self.assertEqual(ids(response), ["1", "2", "3", "4", "5"])

    def test_ties_keep_source_order(self):
        flights = [replace(flight, price=100) for flight in FIXTURE_FLIGHTS]
        self.assertEqual([f.id for f in sort_flights(flights, "price_asc")], ["1", "2", "3", "4", "5"])

    def test_unparseable_departure_sorts_last(self):
        flights = [replace(FIXTURE_FLIGHTS[0], departure_time="tbd")] + list(FIXTURE_FLIGHTS[1:])
        ordered = sort_flights(flights, "departure_asc")
        self.assertEqual(ordered[-1].id, "1")


class PaginationTests(SimpleTestCase):
    def test_page_size_and_offset(self):
        for limit in range(1, 7):
            total = len(FIXTURE_FLIGHTS)
            for page in range(1, 8):
                response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(page=page, limit=limit))
                offset = (page - 1) * limit

                self.assertEqual(response.pagination.offset, offset)
                self.assertEqual(response.pagination.total, total)
                self.assertLessEqual(len(response.data), limit)
                self.assertEqual(len(response.data), max(0, min(limit, total - offset)))

    def test_pages_concatenate_to_full_result(self):
        full = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="price_asc", limit=100))

        collected = []
        page = 1
        while True:
            response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(sort_by="price_asc", page=page, limit=2))
            if not response.data:
                break
            collected.extend(response.data)
            page += 1

        self.assertEqual(collected, list(full.data))
        self.assertEqual(len({flight.id for flight in collected}), len(collected))

    def test_second_page(self):
        response = search_flights(FIXTURE_FLIGHTS, SearchCriteria(page=2, limit=2))

        self.assertEqual(ids(response), ["3", "4"])
        self.assertEqual(response.pagination.offset, 2)
        self.assertEqual(response.pagination.limit, 2)
