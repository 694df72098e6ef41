"""GitHub events feed client, models and errors."""

from __future__ import annotations

from .client import EventsSource, GitHubEventsClient, decode_events, events_url
from .errors import (
    ArgumentError,
    DecodeError,
    FetchError,
    ForbiddenError,
    GitHubAPIError,
    NotFoundError,
    TransportError,
)
from .models import Event, Repo
from .observability import ErrorCategory, FetchEventLogger, categorize_error

__all__ = [
    "ArgumentError",
    "DecodeError",
    "ErrorCategory",
    "Event",
    "EventsSource",
    "FetchError",
    "FetchEventLogger",
    "ForbiddenError",
    "GitHubAPIError",
    "GitHubEventsClient",
    "NotFoundError",
    "Repo",
    "TransportError",
    "categorize_error",
    "decode_events",
    "events_url",
]
