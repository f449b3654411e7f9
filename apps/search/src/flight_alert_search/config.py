"""Search configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHT_ALERT_", env_file=".env", extra="ignore"
    )

    # Airport search endpoint
    base_url: str = "https://staging.flight.lascade.com"
    airports_path: str = "v1/airports/"

    # Timeout (seconds), enforced by the transport only
    request_timeout: float = 10.0

    # Search session
    debounce_ms: int = 300
    search_limit: int = 10

    log_level: str = "INFO"


settings = SearchSettings()
