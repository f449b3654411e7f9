"""Core schemas for Flight Alert."""

from .airport import Airport, AirportSearchParameters
from .alert import PriceAlert
from .enums import EnvelopeShape, NetworkFailure, SearchField

__all__ = [
    "Airport",
    "AirportSearchParameters",
    "EnvelopeShape",
    "NetworkFailure",
    "PriceAlert",
    "SearchField",
]
