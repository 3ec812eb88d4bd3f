"""
Unit Tests - SearchQuery validation and clamping
"""

import pytest

from schemas.search import SearchQuery, clamp_int
from services.exceptions import SearchValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 2),
        ("", 2),
        ("abc", 2),
        ("2.5", 2),
        ("0", 1),
        ("-4", 1),
        ("1", 1),
        ("7", 7),
        ("12", 12),
        ("13", 12),
        ("999", 12),
        (5, 5),
        (" 3 ", 3),
        ("+5", 5),
        ("1_0", 2),
        ("\u0661\u0662", 2),
        ("9" * 5000, 12),
        ("-" + "9" * 5000, 1),
    ],
)
def test_clamp_adults(raw, expected):
    assert clamp_int(raw, 1, 12, 2) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 1), ("x", 1), ("0", 1), ("4", 4), ("8", 8), ("9", 8), ("100", 8)],
)
def test_clamp_rooms(raw, expected):
    assert clamp_int(raw, 1, 8, 1) == expected


def test_from_params_defaults():
    q = SearchQuery.from_params(city="Vancouver", check_in="2024-01-01", check_out="2024-01-02")

    assert q.hotel_name is None
    assert q.city == "Vancouver"
    assert q.adults == 2
    assert q.rooms == 1
    assert q.currency == "USD"


def test_from_params_clamps_and_uppercases():
    q = SearchQuery.from_params(
        hotel_name="Fairmont",
        check_in="2024-01-01",
        check_out="2024-01-02",
        adults="40",
        rooms="-1",
        currency="cad",
    )

    assert q.adults == 12
    assert q.rooms == 1
    assert q.currency == "CAD"


def test_from_params_non_numeric_falls_back_to_defaults():
    q = SearchQuery.from_params(
        city="Paris", check_in="a", check_out="b", adults="two", rooms="many"
    )

    assert q.adults == 2
    assert q.rooms == 1


@pytest.mark.parametrize("hotel_name, city", [(None, None), ("", ""), ("  ", None)])
def test_from_params_requires_hotel_or_city(hotel_name, city):
    with pytest.raises(SearchValidationError):
        SearchQuery.from_params(
            hotel_name=hotel_name, city=city, check_in="2024-01-01", check_out="2024-01-02"
        )


@pytest.mark.parametrize(
    "check_in, check_out",
    [(None, "2024-01-02"), ("2024-01-01", None), ("", ""), ("  ", "2024-01-02")],
)
def test_from_params_requires_dates(check_in, check_out):
    with pytest.raises(SearchValidationError):
        SearchQuery.from_params(city="Vancouver", check_in=check_in, check_out=check_out)


def test_dates_are_not_format_checked():
    q = SearchQuery.from_params(city="Oslo", check_in="next friday", check_out="sunday")
    assert q.check_in == "next friday"


def test_query_text_joins_present_parts():
    both = SearchQuery.from_params(hotel_name="Test", city="Vancouver", check_in="a", check_out="b")
    hotel_only = SearchQuery.from_params(hotel_name=" Test ", check_in="a", check_out="b")
    city_only = SearchQuery.from_params(city="Vancouver", check_in="a", check_out="b")

    assert both.query_text == "Test Vancouver"
    assert hotel_only.query_text == "Test"
    assert city_only.query_text == "Vancouver"
