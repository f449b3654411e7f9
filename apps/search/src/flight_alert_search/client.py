"""HTTP client for the airport search endpoint.

URL pattern::

    GET {base_url}/v1/airports/?q={query}&limit={limit}&page={page}

No authentication.  The body may come in any of the envelope shapes handled
by :mod:`flight_alert_search.response_parser`.
"""

from __future__ import annotations

import errno
import logging
import socket

import httpx
from pydantic import ValidationError

from flight_alert_core.schemas import Airport, AirportSearchParameters, NetworkFailure
from flight_alert_search.config import settings

from .errors import (
    AirportSearchError,
    DecodingError,
    EncodingError,
    InvalidURLError,
    NetworkError,
)
from .response_parser import parse_airport_response

logger = logging.getLogger(__name__)

_NOT_CONNECTED_ERRNOS = frozenset({errno.ENETUNREACH, errno.ENETDOWN})


def _exception_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def classify_transport_error(exc: httpx.TransportError) -> NetworkFailure:
    """Map an HTTPX transport failure to the reason shown to the user."""
    if isinstance(exc, httpx.TimeoutException):
        return NetworkFailure.TIMED_OUT
    if isinstance(exc, httpx.ConnectError):
        for err in _exception_chain(exc):
            if isinstance(err, socket.gaierror):
                return NetworkFailure.CANNOT_CONNECT
            if isinstance(err, OSError) and err.errno in _NOT_CONNECTED_ERRNOS:
                return NetworkFailure.NOT_CONNECTED
        return NetworkFailure.CANNOT_CONNECT
    return NetworkFailure.OTHER


class AirportClient:
    """Async wrapper around the airport search endpoint.

    One instance is meant to be created per process and passed to whatever
    needs it; the client holds a pooled ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._path = settings.airports_path
        try:
            self._client = httpx.AsyncClient(
                base_url=base_url or settings.base_url,
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(timeout or settings.request_timeout),
                transport=transport,
            )
        except httpx.InvalidURL as exc:
            raise InvalidURLError(str(exc)) from exc

    async def fetch_raw(
        self, query: str, limit: int = 10, page: int = 1
    ) -> httpx.Response:
        """Issue the search request and return the undecoded response."""
        try:
            params = AirportSearchParameters(query=query, limit=limit, page=page)
        except ValidationError as exc:
            raise EncodingError(str(exc)) from exc

        try:
            resp = await self._client.get(
                self._path, params=params.to_query_params()
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise InvalidURLError(str(exc)) from exc
        except httpx.TransportError as exc:
            reason = classify_transport_error(exc)
            logger.debug("Airport search transport failure (%s): %s", reason, exc)
            raise NetworkError(exc, reason) from exc

        logger.debug("GET %s -> %d", resp.request.url, resp.status_code)
        return resp

    async def search(
        self, query: str, limit: int = 10, page: int = 1
    ) -> list[Airport]:
        """Search airports matching *query*.

        Raises
        ------
        NetworkError
            Connectivity, timeout, or host-resolution failure.
        DecodingError
            The body is not JSON, or matches none of the known shapes.
        """
        resp = await self.fetch_raw(query, limit=limit, page=page)
        if resp.status_code != httpx.codes.OK:
            # Not branched on; decoding below fails naturally on error bodies.
            logger.warning(
                "Airport search for %r returned HTTP %d", query, resp.status_code
            )

        try:
            raw = resp.json()
        except ValueError as exc:
            raise DecodingError() from exc

        parsed = parse_airport_response(raw)
        if parsed is None:
            logger.warning("Airport search for %r: unrecognised response shape", query)
            raise DecodingError()

        logger.debug(
            "Airport search for %r returned %d results", query, len(parsed.airports)
        )
        return parsed.airports

    async def health_check(self) -> bool:
        """Return *True* if the endpoint answers a probe search."""
        try:
            await self.search("new", limit=1)
        except AirportSearchError as exc:
            logger.debug("Airport search health check failed: %s", exc)
            return False
        return True

    async def close(self) -> None:
        """Shut down the underlying HTTPX client."""
        await self._client.aclose()
