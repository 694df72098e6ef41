"""Command-line summaries of a GitHub user's recent public activity."""

from __future__ import annotations

from .config import ActivityConfig
from .formatting import capitalize_verb, format_event

__all__ = ["ActivityConfig", "capitalize_verb", "format_event"]
