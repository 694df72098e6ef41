"""Errors raised while fetching a GitHub activity feed."""

from __future__ import annotations


class ArgumentError(RuntimeError):
    """Raised when the command line does not name exactly one account."""

    @classmethod
    def wrong_arity(cls, count: int) -> ArgumentError:
        """Return an error for an unexpected number of positional arguments."""
        return cls(f"expected exactly one username, got {count} arguments")


class FetchError(RuntimeError):
    """Base class for failures that abort a feed fetch."""


class NotFoundError(FetchError):
    """Raised when GitHub reports the account does not exist."""

    status_code = 404

    def __init__(self, identifier: str) -> None:
        """Initialise with the identifier that could not be resolved."""
        self.identifier = identifier
        super().__init__(f"user {identifier} not found")


class ForbiddenError(FetchError):
    """Raised on HTTP 403, typically the anonymous rate limit."""

    status_code = 403

    def __init__(self, body: str) -> None:
        """Initialise with the raw response body."""
        self.body = body
        super().__init__(f"forbidden (403), response: {body}")


class GitHubAPIError(FetchError):
    """Raised when GitHub returns any other non-200 response."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        """Initialise with a message, the HTTP status code and response body."""
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, body: str) -> GitHubAPIError:
        """Return an error for an unexpected HTTP status."""
        return cls(
            f"GitHub API error {status_code}, response: {body}",
            status_code=status_code,
            body=body,
        )


class TransportError(FetchError):
    """Raised when no HTTP status could be obtained."""

    @classmethod
    def timeout(cls, url: str, timeout_s: float) -> TransportError:
        """Return an error for a request that exceeded its timeout."""
        return cls(f"request to {url} timed out after {timeout_s:g}s")

    @classmethod
    def request_failed(cls, url: str, reason: object) -> TransportError:
        """Return an error for a connection or protocol failure."""
        return cls(f"request to {url} failed: {reason}")


class DecodeError(FetchError):
    """Raised when the response body is not a JSON array of events."""

    @classmethod
    def invalid_body(cls, reason: object) -> DecodeError:
        """Return an error wrapping the decoder's complaint."""
        return cls(f"invalid JSON in events response: {reason}")
