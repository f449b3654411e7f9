"""Debounced, cancelable airport search for the origin/destination picker."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from flight_alert_core.schemas import PriceAlert, SearchField
from flight_alert_search.config import settings

from .errors import AirportSearchError
from .popular_airports import match_popular
from .session import SearchSession
from .sink import ResultSink

if TYPE_CHECKING:
    from collections.abc import Callable

    from flight_alert_core.schemas import Airport

    from .client import AirportClient

logger = logging.getLogger(__name__)


class SearchController:
    """Turns keystrokes into rate-limited, field-scoped search requests.

    All methods must be called from the event loop that owns the controller;
    state is only ever touched from that loop, so nothing is locked.  At most
    one search request is in flight: starting a new one cancels the previous.
    """

    def __init__(
        self,
        client: AirportClient,
        *,
        session: SearchSession | None = None,
        debounce: float | None = None,
        limit: int | None = None,
        on_update: Callable[[SearchSession], None] | None = None,
    ) -> None:
        self._client = client
        self.session = session or SearchSession()
        self._sink = ResultSink(self.session, on_update)
        self._debounce = (
            debounce if debounce is not None else settings.debounce_ms / 1000
        )
        self._limit = limit or settings.search_limit

        self._timers: dict[SearchField, asyncio.TimerHandle] = {}
        self._last_debounced: dict[SearchField, str] = {f: "" for f in SearchField}
        self._search_task: asyncio.Task[None] | None = None

    @property
    def active_field(self) -> SearchField:
        return self.session.active_field

    # ------------------------------------------------------------------
    # Field events
    # ------------------------------------------------------------------

    def on_text_changed(self, field: SearchField, text: str) -> None:
        """Store *text* and (re)start the field's quiet-window timer."""
        self.session.set_text(field, text)
        self._cancel_timer(field)
        loop = asyncio.get_running_loop()
        self._timers[field] = loop.call_later(
            self._debounce, self._on_debounced, field
        )

    def set_active_field(self, field: SearchField) -> None:
        """Switch fields; search the field's existing text right away."""
        self.session.active_field = field
        text = self.session.text_for(field)
        self._cancel_timer(field)
        self._last_debounced[field] = text
        # Empty text goes through the empty-query path and clears results.
        self.search(text)

    def clear_field(self, field: SearchField) -> None:
        self.session.set_text(field, "")
        self.session.set_selection(field, None)
        self._cancel_timer(field)
        self._last_debounced[field] = ""
        if field == self.session.active_field:
            self._reset_results()
        else:
            # The active field's in-flight search still lands.
            self.session.results = []

    def select_airport(self, airport: Airport) -> None:
        """Fill the active field with *airport* and end its search."""
        field = self.session.active_field
        self.session.set_selection(field, airport)
        self.session.set_text(field, airport.display_name)
        # The echoed display name must not come back as a query.
        self._cancel_timer(field)
        self._last_debounced[field] = airport.display_name
        self._reset_results()

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------

    def can_create_alert(self) -> bool:
        return (
            self.session.selected_origin is not None
            and self.session.selected_destination is not None
        )

    def create_alert(self) -> PriceAlert:
        origin = self.session.selected_origin
        destination = self.session.selected_destination
        if origin is None or destination is None:
            msg = "Both origin and destination must be selected"
            raise ValueError(msg)
        return PriceAlert(origin=origin, destination=destination)

    def suggestions(self) -> list[Airport]:
        """Search results, or popular airports while the active field is empty."""
        if self.session.text_for(self.session.active_field).strip():
            return list(self.session.results)
        return match_popular()

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    def search(self, query: str) -> asyncio.Task[None] | None:
        """Start a search for *query*, superseding any in-flight one.

        Returns the task running the request, or ``None`` when the trimmed
        query is empty (no request is made and results are cleared).
        """
        trimmed = query.strip()
        if not trimmed:
            self._reset_results()
            return None

        self._cancel_in_flight()
        self._sink.begin()
        task = asyncio.get_running_loop().create_task(self._run_search(trimmed))
        self._search_task = task
        return task

    async def aclose(self) -> None:
        """Cancel pending timers and the in-flight request."""
        for field in list(self._timers):
            self._cancel_timer(field)
        task = self._search_task
        self._cancel_in_flight()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run_search(self, query: str) -> None:
        try:
            airports = await self._client.search(query, limit=self._limit, page=1)
        except AirportSearchError as exc:
            if self._is_current():
                self._sink.apply_error(exc)
                self._search_task = None
            return
        except Exception as exc:
            logger.exception("Unexpected error searching airports for %r", query)
            if self._is_current():
                self._sink.apply_error(exc)
                self._search_task = None
            return

        if self._is_current():
            self._sink.apply_results(airports)
            self._search_task = None

    def _is_current(self) -> bool:
        return asyncio.current_task() is self._search_task

    def _on_debounced(self, field: SearchField) -> None:
        self._timers.pop(field, None)
        text = self.session.text_for(field)
        if text == self._last_debounced[field]:
            return
        self._last_debounced[field] = text
        if field == self.session.active_field:
            self.search(text)

    def _cancel_timer(self, field: SearchField) -> None:
        timer = self._timers.pop(field, None)
        if timer is not None:
            timer.cancel()

    def _cancel_in_flight(self) -> None:
        task = self._search_task
        self._search_task = None
        if task is not None and not task.done():
            logger.debug("Cancelling superseded airport search")
            task.cancel()

    def _reset_results(self) -> None:
        self._cancel_in_flight()
        self._sink.clear()
