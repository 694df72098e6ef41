"""GitHub REST client for a user's public events feed."""

from __future__ import annotations

import datetime as dt
import time
import typing as typ

import httpx
import msgspec

from .errors import (
    DecodeError,
    FetchError,
    ForbiddenError,
    GitHubAPIError,
    NotFoundError,
    TransportError,
)
from .models import Event
from .observability import FetchEventLogger

if typ.TYPE_CHECKING:
    from ghactivity.config import ActivityConfig

_HTTP_OK = 200
_HTTP_FORBIDDEN = 403
_HTTP_NOT_FOUND = 404

_ACCEPT = "application/vnd.github+json"
_EVENTS_PATH = "/users/{identifier}/events"

# A null body or null entries are valid JSON; they decode to no events and to
# empty events respectively.
_events_decoder = msgspec.json.Decoder(list[Event | None] | None)


class EventsSource(typ.Protocol):
    """Anything that can fetch the events feed for an identifier."""

    def fetch_events(self, identifier: str) -> list[Event]:
        """Return the first page of public events for ``identifier``."""
        ...


def events_url(api_url: str, identifier: str) -> str:
    """Build the feed URL; the identifier is interpolated as-is."""
    return f"{api_url}{_EVENTS_PATH.format(identifier=identifier)}"


def _raise_for_status(status: int, body: bytes, identifier: str) -> None:
    if status == _HTTP_OK:
        return
    text = body.decode("utf-8", errors="replace")
    if status == _HTTP_NOT_FOUND:
        raise NotFoundError(identifier)
    if status == _HTTP_FORBIDDEN:
        raise ForbiddenError(text)
    raise GitHubAPIError.http_error(status, text)


def decode_events(body: bytes) -> list[Event]:
    """Decode a JSON array of events, preserving order.

    ``null`` decodes to an empty list and ``null`` entries to empty events.

    Raises
    ------
    DecodeError
        If the body is not valid JSON or not an array of event objects.

    """
    try:
        decoded = _events_decoder.decode(body)
    except msgspec.DecodeError as exc:
        raise DecodeError.invalid_body(exc) from exc
    if decoded is None:
        return []
    return [Event() if event is None else event for event in decoded]


def _read_body(
    response: httpx.Response, url: str, timeout_s: float, deadline: float
) -> bytes:
    """Read the body, failing once the overall deadline has passed."""
    chunks: list[bytes] = []
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        if time.monotonic() > deadline:
            raise TransportError.timeout(url, timeout_s)
    return b"".join(chunks)


class GitHubEventsClient:
    """Synchronous :class:`EventsSource` backed by ``httpx``.

    Performs exactly one GET per :meth:`fetch_events` call and never retries.
    ``timeout_s`` bounds the whole exchange, including a body that arrives
    slowly.
    """

    def __init__(
        self,
        config: ActivityConfig,
        *,
        http_client: httpx.Client | None = None,
        event_logger: FetchEventLogger | None = None,
    ) -> None:
        """Initialise the client, building an owned HTTP client if none is given."""
        self._config = config
        self._events = event_logger or FetchEventLogger()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> typ.Self:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(self, *exc_info: object) -> None:
        """Close owned resources on exit."""
        self.close()

    def fetch_events(self, identifier: str) -> list[Event]:
        """Fetch and decode the public events feed for ``identifier``.

        Raises
        ------
        NotFoundError
            On HTTP 404.
        ForbiddenError
            On HTTP 403, including anonymous rate limiting.
        GitHubAPIError
            On any other non-200 status.
        TransportError
            When the request times out or no response is received.
        DecodeError
            When the body is not a JSON array of events.

        """
        url = events_url(self._config.api_url, identifier)
        self._events.log_fetch_started(identifier, url)
        started = time.monotonic()
        try:
            events = self._fetch(url, identifier)
        except FetchError as exc:
            self._events.log_fetch_failed(identifier, exc, _elapsed(started))
            raise
        self._events.log_fetch_completed(identifier, len(events), _elapsed(started))
        return events

    def _fetch(self, url: str, identifier: str) -> list[Event]:
        timeout_s = self._config.timeout_s
        deadline = time.monotonic() + timeout_s
        try:
            with self._client.stream(
                "GET",
                url,
                headers={"User-Agent": self._config.user_agent, "Accept": _ACCEPT},
                timeout=timeout_s,
            ) as response:
                status = response.status_code
                body = _read_body(response, url, timeout_s, deadline)
        except httpx.TimeoutException as exc:
            raise TransportError.timeout(url, timeout_s) from exc
        except httpx.TransportError as exc:
            raise TransportError.request_failed(url, exc) from exc

        _raise_for_status(status, body, identifier)
        return decode_events(body)


def _elapsed(started: float) -> dt.timedelta:
    return dt.timedelta(seconds=time.monotonic() - started)


__all__ = [
    "EventsSource",
    "GitHubEventsClient",
    "decode_events",
    "events_url",
]
