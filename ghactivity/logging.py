"""femtologging setup and percent-style log helpers.

Summary lines go to stdout and fetch errors to stderr; log records are a
separate diagnostic channel. Its verbosity comes from ``GHACTIVITY_LOG_LEVEL``
and defaults to ``ERROR``, so a normal run prints no diagnostics.

Example:
>>> from ghactivity.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Fetched %d events", 3)

"""

from __future__ import annotations

import typing as typ

from femtologging import basicConfig, get_logger

FALLBACK_LEVEL = "INFO"

_KNOWN_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL"}
)


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Upper-case a level name and report whether it had to be replaced.

    Unknown or empty names are replaced with ``FALLBACK_LEVEL``.

    Returns
    -------
    tuple[str, bool]
        The level to configure and ``True`` when the input was rejected.

    """
    normalized = (level or "").strip().upper()
    if normalized in _KNOWN_LEVELS:
        return (normalized, False)
    return (FALLBACK_LEVEL, True)


def configure_logging(level: str) -> tuple[str, bool]:
    """Install femtologging's default handler at the normalized ``level``."""
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized)
    return (normalized, invalid)


def format_log_message(template: str, *args: object) -> str:
    """Interpolate ``args`` into a percent-style ``template``."""
    return template % args


class _SupportsLog(typ.Protocol):
    """Protocol for femtologging-compatible loggers."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: str,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    logger.log(
        level,
        format_log_message(template, *args),
        exc_info=exc_info,
        stack_info=False,
    )


def log_debug(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a DEBUG record; used for payloads rendered with a fallback."""
    _emit(logger, "DEBUG", template, args, exc_info)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO record; used for fetch progress."""
    _emit(logger, "INFO", template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING record; used for failed fetches and bad settings."""
    _emit(logger, "WARNING", template, args, exc_info)


__all__ = [
    "FALLBACK_LEVEL",
    "configure_logging",
    "format_log_message",
    "get_logger",
    "log_debug",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
