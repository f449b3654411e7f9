"""Tests for envelope and key-alias tolerant response parsing."""

from __future__ import annotations

import pytest

from flight_alert_core.schemas import EnvelopeShape
from flight_alert_search.response_parser import (
    UNKNOWN_AIRPORT,
    UNKNOWN_CITY,
    UNKNOWN_COUNTRY,
    parse_airport,
    parse_airport_response,
)

JFK = {
    "iata_code": "JFK",
    "name": "JFK Intl",
    "city_name": "NYC",
    "country_name": "US",
}


def test_bare_array():
    parsed = parse_airport_response([JFK])
    assert parsed is not None
    assert parsed.shape == EnvelopeShape.BARE_ARRAY
    assert [ap.iata_code for ap in parsed.airports] == ["JFK"]
    assert parsed.airports[0].city_name == "NYC"


@pytest.mark.parametrize(
    ("key", "shape"),
    [
        ("data", EnvelopeShape.DATA),
        ("results", EnvelopeShape.RESULTS),
        ("airports", EnvelopeShape.AIRPORTS),
    ],
)
def test_object_envelopes(key, shape):
    parsed = parse_airport_response({key: [JFK], "total": 1})
    assert parsed is not None
    assert parsed.shape == shape
    assert parsed.airports[0].iata_code == "JFK"


def test_results_envelope_with_alias_keys():
    parsed = parse_airport_response(
        {"results": [{"code": "LAX", "city": "LA", "country": "US"}]}
    )
    assert parsed is not None
    assert parsed.shape == EnvelopeShape.RESULTS
    ap = parsed.airports[0]
    assert ap.iata_code == "LAX"
    assert ap.name == UNKNOWN_AIRPORT
    assert ap.city_name == "LA"
    assert ap.country_name == "US"


def test_data_envelope_wins_over_results():
    parsed = parse_airport_response(
        {"data": [{"iata": "AAA"}], "results": [{"iata": "BBB"}]}
    )
    assert parsed is not None
    assert parsed.shape == EnvelopeShape.DATA
    assert parsed.airports[0].iata_code == "AAA"


def test_falls_through_when_earlier_envelope_fails():
    parsed = parse_airport_response(
        {"data": [{"name": "no code"}], "airports": [{"airport_code": "CCC"}]}
    )
    assert parsed is not None
    assert parsed.shape == EnvelopeShape.AIRPORTS
    assert parsed.airports[0].iata_code == "CCC"


def test_unknown_object_shape_is_no_match():
    assert parse_airport_response({"items": [JFK]}) is None


def test_element_without_iata_fails_whole_array():
    assert parse_airport_response([JFK, {"name": "Nowhere"}]) is None


def test_empty_array_matches():
    parsed = parse_airport_response({"data": []})
    assert parsed is not None
    assert parsed.airports == []


def test_iata_key_priority():
    ap = parse_airport({"airport_code": "DDD", "code": "CCC", "iata": "BBB"})
    assert ap is not None
    assert ap.iata_code == "BBB"


def test_placeholders_when_names_missing():
    ap = parse_airport({"iata_code": "XYZ"})
    assert ap is not None
    assert ap.name == UNKNOWN_AIRPORT
    assert ap.city_name == UNKNOWN_CITY
    assert ap.country_name == UNKNOWN_COUNTRY
    assert ap.icao_code is None
    assert ap.country_code is None
    assert ap.latitude is None
    assert ap.longitude is None


def test_alternate_optional_keys():
    ap = parse_airport(
        {
            "iata": "COK",
            "icao": "VOCI",
            "airport_name": "Cochin International Airport",
            "cityName": "Kochi",
            "countryName": "India",
            "countryCode": "IN",
            "lat": 10.152,
            "lon": 76,
        }
    )
    assert ap is not None
    assert ap.icao_code == "VOCI"
    assert ap.name == "Cochin International Airport"
    assert ap.city_name == "Kochi"
    assert ap.country_code == "IN"
    assert ap.latitude == pytest.approx(10.152)
    assert ap.longitude == 76.0


def test_longitude_prefers_lng_over_lon():
    ap = parse_airport({"iata": "AAA", "lng": 1.5, "lon": 2.5})
    assert ap is not None
    assert ap.longitude == 1.5


def test_wrongly_typed_values_count_as_absent():
    ap = parse_airport({"iata_code": 123, "iata": "AAA", "name": None, "lat": True})
    assert ap is not None
    assert ap.iata_code == "AAA"
    assert ap.name == UNKNOWN_AIRPORT
    assert ap.latitude is None


def test_non_dict_element_fails():
    assert parse_airport("JFK") is None


def test_unrepresentable_coordinates_are_absent():
    ap = parse_airport(
        {"iata": "AAA", "latitude": 10**400, "lat": 12.5, "lng": float("inf")}
    )
    assert ap is not None
    assert ap.latitude == 12.5
    assert ap.longitude is None


def test_oversized_coordinate_does_not_fail_envelope():
    parsed = parse_airport_response([{"iata": "AAA", "lat": 10**400}])
    assert parsed is not None
    assert parsed.airports[0].latitude is None
