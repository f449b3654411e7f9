"""Turn airport client outcomes into user-facing session state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flight_alert_core.schemas import NetworkFailure

from .errors import DecodingError, InvalidURLError, NetworkError

if TYPE_CHECKING:
    from collections.abc import Callable

    from flight_alert_core.schemas import Airport

    from .session import SearchSession

logger = logging.getLogger(__name__)

_NETWORK_MESSAGES: dict[NetworkFailure, str] = {
    NetworkFailure.NOT_CONNECTED: (
        "No internet connection. Please check your network settings."
    ),
    NetworkFailure.TIMED_OUT: "The request timed out. Please try again.",
    NetworkFailure.CANNOT_CONNECT: (
        "Cannot connect to server. Please try again later."
    ),
    NetworkFailure.OTHER: (
        "Network connection error. Please check your internet connection."
    ),
}

DECODING_MESSAGE = "Server response format error. Unable to process search results."
INVALID_URL_MESSAGE = "Invalid search request."
GENERIC_MESSAGE = "Search failed. Please try again."


def error_message_for(exc: BaseException) -> str:
    """Fixed mapping from failure kind to the message shown to the user."""
    if isinstance(exc, NetworkError):
        return _NETWORK_MESSAGES[exc.reason]
    if isinstance(exc, DecodingError):
        return DECODING_MESSAGE
    if isinstance(exc, InvalidURLError):
        return INVALID_URL_MESSAGE
    return GENERIC_MESSAGE


class ResultSink:
    """Applies search outcomes to a :class:`SearchSession`.

    ``on_update`` is called once per settled request (success or failure).
    """

    def __init__(
        self,
        session: SearchSession,
        on_update: Callable[[SearchSession], None] | None = None,
    ) -> None:
        self.session = session
        self._on_update = on_update

    def begin(self) -> None:
        self.session.is_loading = True
        self.session.error_message = None

    def apply_results(self, airports: list[Airport]) -> None:
        self.session.results = list(airports)
        self.session.error_message = None
        self.session.is_loading = False
        self._notify()

    def apply_error(self, exc: BaseException) -> None:
        logger.warning("Airport search failed: %s", exc)
        self.session.results = []
        self.session.error_message = error_message_for(exc)
        self.session.is_loading = False
        self._notify()

    def clear(self) -> None:
        self.session.results = []
        self.session.error_message = None
        self.session.is_loading = False

    def _notify(self) -> None:
        if self._on_update is not None:
            self._on_update(self.session)
