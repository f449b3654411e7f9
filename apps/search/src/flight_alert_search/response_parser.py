"""Parse an airport search response body into Airport objects.

The endpoint has been seen returning several envelope shapes and several key
spellings inside each record.  Each envelope is handled by its own parser and
the parsers are tried in a fixed order::

    [ {...}, ... ]                 bare array
    {"data": [ {...}, ... ]}       data envelope
    {"results": [ {...}, ... ]}    results envelope
    {"airports": [ {...}, ... ]}   airports envelope

The first parser that accepts the body wins.  A parser only accepts when every
record in its array decodes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from flight_alert_core.schemas import Airport, EnvelopeShape

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_IATA_KEYS = ("iata_code", "iata", "code", "airport_code")
_ICAO_KEYS = ("icao_code", "icao")
_NAME_KEYS = ("name", "airport_name", "airportName")
_CITY_KEYS = ("city_name", "city", "cityName")
_COUNTRY_KEYS = ("country_name", "country", "countryName")
_COUNTRY_CODE_KEYS = ("country_code", "countryCode")
_LATITUDE_KEYS = ("latitude", "lat")
_LONGITUDE_KEYS = ("longitude", "lng", "lon")

UNKNOWN_AIRPORT = "Unknown Airport"
UNKNOWN_CITY = "Unknown City"
UNKNOWN_COUNTRY = "Unknown Country"


@dataclass(frozen=True)
class ParsedResponse:
    """Airports decoded from a body, tagged with the envelope that matched."""

    shape: EnvelopeShape
    airports: list[Airport]


def _first_str(item: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str):
            return value
    return None


def _first_float(item: dict[str, Any], keys: tuple[str, ...]) -> float | None:
    for key in keys:
        value = item.get(key)
        # bool is an int subclass
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except OverflowError:
            continue
        if math.isfinite(number):
            return number
    return None


def parse_airport(item: object) -> Airport | None:
    """Decode one airport record, or return ``None`` if it has no IATA code."""
    if not isinstance(item, dict):
        return None

    iata_code = _first_str(item, _IATA_KEYS)
    if iata_code is None:
        return None

    return Airport(
        iata_code=iata_code,
        icao_code=_first_str(item, _ICAO_KEYS),
        name=_first_str(item, _NAME_KEYS) or UNKNOWN_AIRPORT,
        city_name=_first_str(item, _CITY_KEYS) or UNKNOWN_CITY,
        country_name=_first_str(item, _COUNTRY_KEYS) or UNKNOWN_COUNTRY,
        country_code=_first_str(item, _COUNTRY_CODE_KEYS),
        latitude=_first_float(item, _LATITUDE_KEYS),
        longitude=_first_float(item, _LONGITUDE_KEYS),
    )


def _parse_records(records: object) -> list[Airport] | None:
    if not isinstance(records, list):
        return None
    airports: list[Airport] = []
    for item in records:
        airport = parse_airport(item)
        if airport is None:
            return None
        airports.append(airport)
    return airports


def _parse_bare_array(raw: object) -> ParsedResponse | None:
    airports = _parse_records(raw)
    if airports is None:
        return None
    return ParsedResponse(shape=EnvelopeShape.BARE_ARRAY, airports=airports)


def _envelope_parser(
    key: str, shape: EnvelopeShape
) -> Callable[[object], ParsedResponse | None]:
    def _parse(raw: object) -> ParsedResponse | None:
        if not isinstance(raw, dict) or key not in raw:
            return None
        airports = _parse_records(raw[key])
        if airports is None:
            return None
        return ParsedResponse(shape=shape, airports=airports)

    _parse.__name__ = f"_parse_{key}_envelope"
    return _parse


_PARSERS: tuple[Callable[[object], ParsedResponse | None], ...] = (
    _parse_bare_array,
    _envelope_parser("data", EnvelopeShape.DATA),
    _envelope_parser("results", EnvelopeShape.RESULTS),
    _envelope_parser("airports", EnvelopeShape.AIRPORTS),
)


def parse_airport_response(raw: object) -> ParsedResponse | None:
    """Try each envelope parser in priority order; ``None`` if none matched."""
    for parser in _PARSERS:
        parsed = parser(raw)
        if parsed is not None:
            logger.debug(
                "Parsed %d airports from %s envelope",
                len(parsed.airports),
                parsed.shape.value,
            )
            return parsed
    return None
