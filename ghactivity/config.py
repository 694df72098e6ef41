"""Runtime configuration for the activity feed CLI.

Usage
-----
Create a configuration with defaults:

>>> config = ActivityConfig()
>>> config.timeout_s
10.0

Or load from environment variables:

>>> import os
>>> os.environ["GHACTIVITY_TIMEOUT_S"] = "2.5"
>>> ActivityConfig.from_env().timeout_s
2.5

"""

from __future__ import annotations

import dataclasses as dc
import os

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "github-activity-cli"
DEFAULT_LOG_LEVEL = "ERROR"


@dc.dataclass(frozen=True, slots=True)
class ActivityConfig:
    """Configuration for fetching and rendering an activity feed.

    Attributes
    ----------
    api_url
        Base URL of the GitHub REST API, without a trailing slash.
    timeout_s
        Total request timeout in seconds.
    user_agent
        Value sent in the ``User-Agent`` header.
    log_level
        femtologging level for diagnostic output.

    """

    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Strip trailing slashes so endpoint paths join cleanly."""
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @staticmethod
    def _parse_positive_float(env_var: str, default: float) -> float:
        """Read a positive float env var, falling back to a default."""
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError as exc:
            msg = f"{env_var} must be a number, got: {raw!r}"
            raise ValueError(msg) from exc
        if value <= 0:
            msg = f"{env_var} must be positive, got: {value}"
            raise ValueError(msg)
        return value

    @staticmethod
    def _read_str(env_var: str, default: str) -> str:
        value = os.environ.get(env_var, "").strip()
        return value or default

    @classmethod
    def from_env(cls) -> ActivityConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``GHACTIVITY_API_URL``: Base URL of the REST API.
        - ``GHACTIVITY_TIMEOUT_S``: Request timeout in seconds.
        - ``GHACTIVITY_USER_AGENT``: Client identification header.
        - ``GHACTIVITY_LOG_LEVEL``: Log level for diagnostics.

        Raises
        ------
        ValueError
            If ``GHACTIVITY_TIMEOUT_S`` is not a positive number.

        """
        return cls(
            api_url=cls._read_str("GHACTIVITY_API_URL", DEFAULT_API_URL),
            timeout_s=cls._parse_positive_float(
                "GHACTIVITY_TIMEOUT_S", DEFAULT_TIMEOUT_S
            ),
            user_agent=cls._read_str("GHACTIVITY_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=cls._read_str("GHACTIVITY_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
