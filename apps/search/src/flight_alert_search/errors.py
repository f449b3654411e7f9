"""Error taxonomy surfaced by the airport search client."""

from __future__ import annotations

from flight_alert_core.schemas import NetworkFailure


class AirportSearchError(Exception):
    """Base class for every failure of an airport search."""

    default_message = "Search failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidURLError(AirportSearchError):
    default_message = "Invalid URL"


class NetworkError(AirportSearchError):
    """Connectivity, timeout, or host-resolution failure.

    ``reason`` only drives the user-facing message; callers never branch on
    it for control flow.
    """

    default_message = "Network error"

    def __init__(
        self,
        cause: BaseException,
        reason: NetworkFailure = NetworkFailure.OTHER,
    ) -> None:
        super().__init__(f"Network error: {cause}")
        self.cause = cause
        self.reason = reason


class DecodingError(AirportSearchError):
    default_message = "Failed to decode response"


class EncodingError(AirportSearchError):
    default_message = "Failed to encode request"


class NoDataError(AirportSearchError):
    default_message = "No data received"
