"""Pydantic-compatible enums for airport search schemas."""

from enum import StrEnum


class SearchField(StrEnum):
    """Which of the two location inputs is receiving edits."""

    ORIGIN = "ORIGIN"
    DESTINATION = "DESTINATION"


class EnvelopeShape(StrEnum):
    """Top-level JSON structure wrapping the airport records, in priority order."""

    BARE_ARRAY = "BARE_ARRAY"
    DATA = "DATA"
    RESULTS = "RESULTS"
    AIRPORTS = "AIRPORTS"


class NetworkFailure(StrEnum):
    """Transport failure reason, used only to choose a user-facing message."""

    NOT_CONNECTED = "NOT_CONNECTED"
    TIMED_OUT = "TIMED_OUT"
    CANNOT_CONNECT = "CANNOT_CONNECT"
    OTHER = "OTHER"
