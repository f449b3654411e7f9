"""Airport record and search parameter DTOs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Airport(BaseModel):
    """One searchable location.

    Identity is the IATA code: two records with the same ``iata_code`` compare
    equal (and hash the same) regardless of their other fields.
    """

    model_config = ConfigDict(frozen=True)

    iata_code: str = Field(description="IATA airport code")
    icao_code: str | None = None
    name: str
    city_name: str
    country_name: str
    country_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @property
    def display_name(self) -> str:
        """Text echoed into a location field once the airport is selected."""
        return f"{self.city_name}, {self.country_name}"

    @property
    def full_name(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Airport):
            return NotImplemented
        return self.iata_code == other.iata_code

    def __hash__(self) -> int:
        return hash(self.iata_code)


class AirportSearchParameters(BaseModel):
    """Query parameters for one airport search request."""

    query: str
    limit: int = Field(default=10, ge=1)
    page: int = Field(default=1, ge=1)

    def to_query_params(self) -> dict[str, str | int]:
        return {"q": self.query, "limit": self.limit, "page": self.page}
