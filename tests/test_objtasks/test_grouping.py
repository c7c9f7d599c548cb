"""Tests for sorting and grouping records."""

from objtasks import group, sort_cities_array


class TestSortCitiesArray:
    def test_sorts_by_country_then_city(self):
        arr = [
            {"country": "Russia", "city": "Moscow"},
            {"country": "Belarus", "city": "Minsk"},
            {"country": "Poland", "city": "Warsaw"},
            {"country": "Russia", "city": "Saint Petersburg"},
            {"country": "Poland", "city": "Krakow"},
            {"country": "Belarus", "city": "Brest"},
        ]
        assert sort_cities_array(arr) == [
            {"country": "Belarus", "city": "Brest"},
            {"country": "Belarus", "city": "Minsk"},
            {"country": "Poland", "city": "Krakow"},
            {"country": "Poland", "city": "Warsaw"},
            {"country": "Russia", "city": "Moscow"},
            {"country": "Russia", "city": "Saint Petersburg"},
        ]

    def test_sorts_in_place(self):
        arr = [{"country": "B", "city": "x"}, {"country": "A", "city": "y"}]
        assert sort_cities_array(arr) is arr
        assert arr[0]["country"] == "A"

    def test_country_compared_before_city(self):
        # concatenating the fields would order these the other way
        arr = [{"country": "AB", "city": "A"}, {"country": "A", "city": "ZZ"}]
        assert [c["country"] for c in sort_cities_array(arr)] == ["A", "AB"]


class TestGroup:
    def test_multimap(self):
        items = [
            {"country": "Belarus", "city": "Brest"},
            {"country": "Russia", "city": "Omsk"},
            {"country": "Russia", "city": "Samara"},
            {"country": "Belarus", "city": "Grodno"},
            {"country": "Belarus", "city": "Minsk"},
            {"country": "Poland", "city": "Lodz"},
        ]
        result = group(items, lambda item: item["country"], lambda item: item["city"])
        assert result == {
            "Belarus": ["Brest", "Grodno", "Minsk"],
            "Russia": ["Omsk", "Samara"],
            "Poland": ["Lodz"],
        }
        assert list(result) == ["Belarus", "Russia", "Poland"]

    def test_empty(self):
        assert group([], str, str) == {}

    def test_non_string_keys(self):
        assert group(range(6), lambda n: n % 2, lambda n: n * 10) == {0: [0, 20, 40], 1: [10, 30, 50]}
