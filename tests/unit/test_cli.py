"""CLI behaviour tests."""
# ruff: noqa: D103

from __future__ import annotations

import subprocess
import sys

import pytest

from ghactivity import cli
from ghactivity.github.errors import ForbiddenError
from tests.helpers.github_events import EventSpec, feed_body, push
from tests.helpers.stub_feed import StubFeed


class _FailingSource:
    def fetch_events(self, identifier: str) -> list[object]:
        raise ForbiddenError('{"message":"API rate limit exceeded"}')


def _run_cli(args: list[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(  # noqa: S603 - fixed argv
        [sys.executable, "-m", "ghactivity", *args],
        text=True,
        capture_output=True,
        check=False,
    )


def test_prints_one_bullet_per_event_in_order(
    stub_feed: StubFeed, capsys: pytest.CaptureFixture[str]
) -> None:
    stub_feed.body = feed_body(
        push(3),
        EventSpec("PullRequestEvent", payload={"action": "opened"}),
        EventSpec("CreateEvent", payload={"ref_type": "branch", "ref": "dev"}),
        EventSpec("GollumEvent", repo="octo/wiki"),
    )

    exit_code = cli.main(["octocat"], source=stub_feed.client())

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.splitlines() == [
        "- Pushed 3 commits to octo/reef",
        "- Opened a pull request in octo/reef",
        '- Created branch "dev" in octo/reef',
        "- GollumEvent in octo/wiki",
    ]
    assert captured.err == ""


def test_empty_feed_prints_no_recent_activity(
    stub_feed: StubFeed, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(["octocat"], source=stub_feed.client())

    assert exit_code == 0
    assert capsys.readouterr().out == "no recent activity\n"


def test_null_feed_prints_no_recent_activity(
    stub_feed: StubFeed, capsys: pytest.CaptureFixture[str]
) -> None:
    stub_feed.body = b"null"

    exit_code = cli.main(["octocat"], source=stub_feed.client())

    assert exit_code == 0
    assert capsys.readouterr().out == "no recent activity\n"


def test_null_entries_print_nothing(
    stub_feed: StubFeed, capsys: pytest.CaptureFixture[str]
) -> None:
    stub_feed.body = b'[null, {"type": null}]'

    exit_code = cli.main(["octocat"], source=stub_feed.client())

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == ""
    assert captured.err == ""


def test_not_found_exits_non_zero(
    stub_feed: StubFeed, capsys: pytest.CaptureFixture[str]
) -> None:
    stub_feed.status_code = 404

    exit_code = cli.main(["ghost"], source=stub_feed.client())

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == "error: user ghost not found\n"


def test_forbidden_reports_body(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["octocat"], source=_FailingSource())

    assert exit_code == 1
    assert "API rate limit exceeded" in capsys.readouterr().err


def test_suppressed_lines_are_skipped(
    monkeypatch: pytest.MonkeyPatch,
    stub_feed: StubFeed,
    capsys: pytest.CaptureFixture[str],
) -> None:
    stub_feed.body = feed_body(EventSpec("WatchEvent"), EventSpec("ForkEvent"))
    monkeypatch.setattr(
        cli,
        "format_event",
        lambda event: "" if event.event_type == "WatchEvent" else "kept",
    )

    cli.main(["octocat"], source=stub_feed.client())

    assert capsys.readouterr().out == "- kept\n"


@pytest.mark.parametrize("argv", [[], ["octocat", "hubot"]])
def test_wrong_arity_prints_usage(
    argv: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(argv, source=_FailingSource())

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err.startswith("usage: github-activity")
    assert f"got {len(argv)} arguments" in captured.err


def test_unknown_option_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["--token", "abc", "octocat"], source=_FailingSource())

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("usage: github-activity")


def test_invalid_timeout_is_reported(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GHACTIVITY_TIMEOUT_S", "forever")

    exit_code = cli.main(["octocat"], source=_FailingSource())

    assert exit_code == 1
    assert "GHACTIVITY_TIMEOUT_S must be a number" in capsys.readouterr().err


def test_invalid_log_level_warns(
    monkeypatch: pytest.MonkeyPatch, stub_feed: StubFeed
) -> None:
    warnings: list[tuple[object, ...]] = []
    monkeypatch.setenv("GHACTIVITY_LOG_LEVEL", "chatty")
    monkeypatch.setattr(cli, "configure_logging", lambda level: ("INFO", True))
    monkeypatch.setattr(
        cli, "log_warning", lambda _logger, *args: warnings.append(args)
    )

    cli.main(["octocat"], source=stub_feed.client())

    assert warnings == [
        ("Invalid GHACTIVITY_LOG_LEVEL %r, falling back to %s", "chatty", "INFO")
    ]


def test_module_entry_point_rejects_missing_argument() -> None:
    result = _run_cli([])

    assert result.returncode == 1
    assert result.stdout == ""
    assert "usage: github-activity" in result.stderr
