"""Render GitHub events as one-line human-readable summaries.

Each known event type re-decodes its raw payload into the structure it
needs. A payload that does not match falls back to a generic sentence, so a
single malformed event never aborts a run. An empty string means the event
is suppressed; none of the built-in renderers suppress.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from ghactivity.github.models import (
    ActionPayload,
    CreatePayload,
    Event,
    PullRequestPayload,
    PushPayload,
)
from ghactivity.logging import get_logger, log_debug

logger = get_logger(__name__)

T = typ.TypeVar("T")


def capitalize_verb(text: str) -> str:
    """Upper-case the first character if it is an ASCII lowercase letter.

    >>> capitalize_verb("opened")
    'Opened'
    >>> capitalize_verb("123abc")
    '123abc'

    """
    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


def _redecode(event: Event, payload_type: type[T]) -> T | None:
    """Decode the raw payload, returning ``None`` when it does not fit."""
    try:
        return msgspec.json.decode(event.payload, type=payload_type)
    except msgspec.DecodeError as exc:
        log_debug(
            logger,
            "payload for %s in %r did not match %s: %s",
            event.event_type,
            event.repo_name,
            payload_type.__name__,
            exc,
        )
        return None


def extract_action(payload: msgspec.Raw | bytes) -> str:
    """Return the payload's ``action`` field, or ``""`` if it has none."""
    try:
        decoded = msgspec.json.decode(payload, type=ActionPayload)
    except msgspec.DecodeError:
        return ""
    return decoded.action or ""


def _quote(text: str) -> str:
    """Return ``text`` as a double-quoted string literal with escapes."""
    return msgspec.json.encode(text).decode()


def _format_push(event: Event, repo: str) -> str:
    payload = _redecode(event, PushPayload)
    if payload is None:
        return f"Pushed commits to {repo}"
    count = len(payload.commits)
    if count == 1:
        return f"Pushed 1 commit to {repo}"
    return f"Pushed {count} commits to {repo}"


def _format_issues(event: Event, repo: str) -> str:
    action = extract_action(event.payload) or "updated"
    return f"{capitalize_verb(action)} an issue in {repo}"


def _format_issue_comment(event: Event, repo: str) -> str:
    return f"Commented on an issue in {repo}"


def _format_pull_request(event: Event, repo: str) -> str:
    payload = _redecode(event, PullRequestPayload)
    if payload is not None:
        if payload.action == "closed" and payload.merged:
            return f"Merged a pull request in {repo}"
        if payload.action:
            return f"{capitalize_verb(payload.action)} a pull request in {repo}"
    return f"Updated a pull request in {repo}"


def _format_watch(event: Event, repo: str) -> str:
    return f"Starred {repo}"


def _format_fork(event: Event, repo: str) -> str:
    return f"Forked {repo}"


def _format_create(event: Event, repo: str) -> str:
    payload = _redecode(event, CreatePayload)
    if payload is None:
        return f"Created something in {repo}"
    ref_type = payload.ref_type or ""
    if ref_type == "repository":
        return f"Created repository {repo}"
    if payload.ref:
        return f"Created {ref_type} {_quote(payload.ref)} in {repo}"
    return f"Created {ref_type} in {repo}"


EventFormatter = cabc.Callable[[Event, str], str]

_FORMATTERS: dict[str, EventFormatter] = {
    "PushEvent": _format_push,
    "IssuesEvent": _format_issues,
    "IssueCommentEvent": _format_issue_comment,
    "PullRequestEvent": _format_pull_request,
    "WatchEvent": _format_watch,
    "ForkEvent": _format_fork,
    "CreateEvent": _format_create,
}


def format_event(event: Event) -> str:
    """Return a summary line for ``event``; an empty string suppresses it."""
    repo = event.repo_name
    formatter = _FORMATTERS.get(event.event_type)
    if formatter is not None:
        return formatter(event, repo)
    if repo:
        return f"{event.event_type} in {repo}"
    return event.event_type


__all__ = ["capitalize_verb", "extract_action", "format_event"]
