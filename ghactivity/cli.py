"""Show a GitHub user's recent public activity."""

from __future__ import annotations

import argparse
import sys
import typing as typ

from ghactivity.config import ActivityConfig
from ghactivity.formatting import format_event
from ghactivity.github.client import GitHubEventsClient
from ghactivity.github.errors import ArgumentError, FetchError
from ghactivity.logging import configure_logging, get_logger, log_warning

if typ.TYPE_CHECKING:
    from ghactivity.github.client import EventsSource

logger = get_logger(__name__)

PROG = "github-activity"
NO_ACTIVITY = "no recent activity"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with status 2."""

    def error(self, message: str) -> typ.NoReturn:
        raise ArgumentError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog=PROG, description=__doc__)
    parser.add_argument(
        "usernames",
        nargs="*",
        metavar="username",
        help="GitHub account whose public events are shown",
    )
    return parser


def _parse_identifier(parser: argparse.ArgumentParser, argv: list[str] | None) -> str:
    args = parser.parse_args(argv)
    usernames: list[str] = args.usernames
    if len(usernames) != 1:
        raise ArgumentError.wrong_arity(len(usernames))
    return usernames[0]


def _configure_logging(config: ActivityConfig) -> None:
    normalized_level, invalid_level = configure_logging(config.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GHACTIVITY_LOG_LEVEL %r, falling back to %s",
            config.log_level,
            normalized_level,
        )


def render_events(source: EventsSource, identifier: str) -> int:
    """Fetch the feed for ``identifier`` and print one line per event.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when the fetch fails.

    """
    try:
        events = source.fetch_events(identifier)
    except FetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if not events:
        print(NO_ACTIVITY)
        return 0

    for event in events:
        line = format_event(event)
        if line:
            print(f"- {line}")
    return 0


def main(argv: list[str] | None = None, *, source: EventsSource | None = None) -> int:
    """Run the CLI.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.
    source : EventsSource | None, optional
        Feed source to use instead of the GitHub REST API.

    Returns
    -------
    int
        Exit code: 0 on success, 1 on usage, configuration or fetch errors.

    """
    parser = _build_parser()
    try:
        identifier = _parse_identifier(parser, argv)
    except ArgumentError as exc:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        config = ActivityConfig.from_env()
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    _configure_logging(config)

    if source is not None:
        return render_events(source, identifier)
    with GitHubEventsClient(config) as client:
        return render_events(client, identifier)


if __name__ == "__main__":
    raise SystemExit(main())
