"""Typed structures for the GitHub events API.

The envelope is decoded once; each payload stays as raw JSON until the
formatter re-decodes it into the structure selected by the event type.
Unknown fields are ignored throughout, and ``null`` is accepted wherever the
API is known to send it.
"""

from __future__ import annotations

import msgspec


class Repo(msgspec.Struct, frozen=True, kw_only=True):
    """Repository reference attached to an event."""

    name: str | None = None


class Event(msgspec.Struct, frozen=True, kw_only=True):
    """One activity record from a user's public feed.

    Attributes
    ----------
    type_tag : str | None
        Open-ended type tag such as ``PushEvent``; sent as ``type``.
    repo : Repo | None
        Repository the event happened in.
    payload : msgspec.Raw
        Undecoded payload. Empty when the API omitted it.

    """

    type_tag: str | None = msgspec.field(default=None, name="type")
    repo: Repo | None = None
    payload: msgspec.Raw = msgspec.field(default_factory=msgspec.Raw)

    @property
    def event_type(self) -> str:
        """Return the type tag, or an empty string when it is missing."""
        return self.type_tag or ""

    @property
    def repo_name(self) -> str:
        """Return the ``owner/repo`` display name, or an empty string."""
        if self.repo is None or self.repo.name is None:
            return ""
        return self.repo.name


class Commit(msgspec.Struct, kw_only=True):
    """Commit summary inside a push payload."""

    sha: str = ""


class PushPayload(msgspec.Struct, kw_only=True):
    """Payload of a ``PushEvent``; only the commit count is used."""

    commits: list[Commit]


class ActionPayload(msgspec.Struct, kw_only=True):
    """Minimal view of payloads that carry an ``action`` field."""

    action: str | None = None


class PullRequest(msgspec.Struct, kw_only=True):
    """Subset of the pull request object embedded in its payload."""

    merged: bool | None = None


class PullRequestPayload(msgspec.Struct, kw_only=True):
    """Payload of a ``PullRequestEvent``."""

    action: str | None = None
    pull_request: PullRequest | None = None

    @property
    def merged(self) -> bool:
        """Return whether the pull request was merged."""
        return self.pull_request is not None and bool(self.pull_request.merged)


class CreatePayload(msgspec.Struct, kw_only=True):
    """Payload of a ``CreateEvent``.

    ``ref_type`` is ``repository``, ``branch`` or ``tag``; ``ref`` is null
    when a repository is created.
    """

    ref_type: str | None = None
    ref: str | None = None


__all__ = [
    "ActionPayload",
    "Commit",
    "CreatePayload",
    "Event",
    "PullRequest",
    "PullRequestPayload",
    "PushPayload",
    "Repo",
]
