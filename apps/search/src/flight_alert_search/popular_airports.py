"""Built-in popular airports, shown while the active field is empty."""

from __future__ import annotations

from flight_alert_core.schemas import Airport

POPULAR_AIRPORTS: tuple[Airport, ...] = (
    Airport(
        iata_code="JFK",
        icao_code="KJFK",
        name="John F. Kennedy International Airport",
        city_name="New York",
        country_name="United States",
        country_code="US",
        latitude=40.6413,
        longitude=-73.7781,
    ),
    Airport(
        iata_code="LAX",
        icao_code="KLAX",
        name="Los Angeles International Airport",
        city_name="Los Angeles",
        country_name="United States",
        country_code="US",
        latitude=33.9416,
        longitude=-118.4085,
    ),
    Airport(
        iata_code="LHR",
        icao_code="EGLL",
        name="Heathrow Airport",
        city_name="London",
        country_name="United Kingdom",
        country_code="GB",
        latitude=51.4700,
        longitude=-0.4543,
    ),
    Airport(
        iata_code="CDG",
        icao_code="LFPG",
        name="Charles de Gaulle Airport",
        city_name="Paris",
        country_name="France",
        country_code="FR",
        latitude=49.0097,
        longitude=2.5479,
    ),
    Airport(
        iata_code="DXB",
        icao_code="OMDB",
        name="Dubai International Airport",
        city_name="Dubai",
        country_name="United Arab Emirates",
        country_code="AE",
        latitude=25.2532,
        longitude=55.3657,
    ),
    Airport(
        iata_code="SIN",
        icao_code="WSSS",
        name="Singapore Changi Airport",
        city_name="Singapore",
        country_name="Singapore",
        country_code="SG",
        latitude=1.3644,
        longitude=103.9915,
    ),
    Airport(
        iata_code="HND",
        icao_code="RJTT",
        name="Tokyo Haneda Airport",
        city_name="Tokyo",
        country_name="Japan",
        country_code="JP",
        latitude=35.5494,
        longitude=139.7798,
    ),
    Airport(
        iata_code="BOM",
        icao_code="VABB",
        name="Chhatrapati Shivaji Maharaj International Airport",
        city_name="Mumbai",
        country_name="India",
        country_code="IN",
        latitude=19.0896,
        longitude=72.8656,
    ),
    Airport(
        iata_code="DEL",
        icao_code="VIDP",
        name="Indira Gandhi International Airport",
        city_name="New Delhi",
        country_name="India",
        country_code="IN",
        latitude=28.5562,
        longitude=77.1000,
    ),
    Airport(
        iata_code="COK",
        icao_code="VOCI",
        name="Cochin International Airport",
        city_name="Kochi",
        country_name="India",
        country_code="IN",
        latitude=10.1520,
        longitude=76.4019,
    ),
)


def match_popular(query: str = "") -> list[Airport]:
    """Filter popular airports by code, name, or city (case-insensitive)."""
    needle = query.strip().lower()
    if not needle:
        return list(POPULAR_AIRPORTS)
    return [
        ap
        for ap in POPULAR_AIRPORTS
        if needle in ap.iata_code.lower()
        or needle in ap.name.lower()
        or needle in ap.city_name.lower()
    ]
