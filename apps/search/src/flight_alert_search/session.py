"""In-memory state of one airport search session."""

from __future__ import annotations

from pydantic import BaseModel, Field

from flight_alert_core.schemas import Airport, SearchField


class SearchSession(BaseModel):
    """Everything the location picker shows; discarded with the screen."""

    origin_text: str = ""
    destination_text: str = ""
    active_field: SearchField = SearchField.ORIGIN
    is_loading: bool = False
    error_message: str | None = None
    results: list[Airport] = Field(default_factory=list)
    selected_origin: Airport | None = None
    selected_destination: Airport | None = None

    def text_for(self, field: SearchField) -> str:
        if field == SearchField.ORIGIN:
            return self.origin_text
        return self.destination_text

    def set_text(self, field: SearchField, value: str) -> None:
        if field == SearchField.ORIGIN:
            self.origin_text = value
        else:
            self.destination_text = value

    def set_selection(self, field: SearchField, airport: Airport | None) -> None:
        if field == SearchField.ORIGIN:
            self.selected_origin = airport
        else:
            self.selected_destination = airport
