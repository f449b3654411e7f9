"""Price-drop alert draft."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from .airport import Airport


class PriceAlert(BaseModel):
    """An alert for price drops between two selected airports.

    Origin and destination are not checked against each other.
    """

    origin: Airport
    destination: Airport
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))

    @property
    def route(self) -> str:
        return f"{self.origin.iata_code}-{self.destination.iata_code}"
