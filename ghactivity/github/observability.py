"""Observability primitives for activity feed fetches.

Provides error categorization and structured log events for a single fetch.
Messages follow a ``[event.type] key=value`` layout so they can be parsed by
log aggregators.
"""

from __future__ import annotations

import enum
import typing as typ

from ghactivity.logging import get_logger, log_info, log_warning

from .errors import (
    DecodeError,
    ForbiddenError,
    GitHubAPIError,
    NotFoundError,
    TransportError,
)

if typ.TYPE_CHECKING:
    import datetime as dt

logger = get_logger(__name__)

# HTTP status code threshold for server errors (5xx)
_HTTP_SERVER_ERROR_THRESHOLD = 500


class FetchEventType(enum.StrEnum):
    """Structured log event types for feed fetches."""

    FETCH_STARTED = "fetch.started"
    FETCH_COMPLETED = "fetch.completed"
    FETCH_FAILED = "fetch.failed"


class ErrorCategory(enum.StrEnum):
    """Categories for fetch failure classification."""

    TRANSIENT = "transient"
    CLIENT_ERROR = "client_error"
    RATE_LIMITED = "rate_limited"
    SCHEMA_DRIFT = "schema_drift"
    UNKNOWN = "unknown"


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (NotFoundError, ErrorCategory.CLIENT_ERROR),
    (ForbiddenError, ErrorCategory.RATE_LIMITED),
    (TransportError, ErrorCategory.TRANSIENT),
    (DecodeError, ErrorCategory.SCHEMA_DRIFT),
)


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize an exception for log routing.

    Returns:
        ErrorCategory indicating the type of failure.

    """
    # GitHubAPIError requires special handling for status code distinction
    if isinstance(exc, GitHubAPIError):
        if exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD:
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR

    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    return ErrorCategory.UNKNOWN


class FetchEventLogger:
    """Emit structured fetch events via femtologging.

    Events are emitted at INFO level for progress and WARNING for failures.
    A logger may be injected for tests.
    """

    def __init__(self, log: typ.Any | None = None) -> None:  # noqa: ANN401
        """Initialise with an optional femtologging-compatible logger."""
        self._logger = log if log is not None else logger

    def log_fetch_started(self, identifier: str, url: str) -> None:
        """Log the start of a fetch."""
        log_info(
            self._logger,
            "[%s] identifier=%s url=%s",
            FetchEventType.FETCH_STARTED,
            identifier,
            url,
        )

    def log_fetch_completed(
        self, identifier: str, event_count: int, duration: dt.timedelta
    ) -> None:
        """Log a successful fetch with the number of decoded events."""
        log_info(
            self._logger,
            "[%s] identifier=%s event_count=%d duration_seconds=%.3f",
            FetchEventType.FETCH_COMPLETED,
            identifier,
            event_count,
            duration.total_seconds(),
        )

    def log_fetch_failed(
        self, identifier: str, error: BaseException, duration: dt.timedelta
    ) -> None:
        """Log a failed fetch with error categorization."""
        log_warning(
            self._logger,
            "[%s] identifier=%s duration_seconds=%.3f error_type=%s "
            "error_category=%s status_code=%s",
            FetchEventType.FETCH_FAILED,
            identifier,
            duration.total_seconds(),
            type(error).__name__,
            categorize_error(error),
            getattr(error, "status_code", None),
        )
