from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resolution:
    """Effective media type and optional charset label for one input."""
    mime: str
    charset: str | None = None


@dataclass(frozen=True)
class BuildOptions:
    """User-supplied overrides; empty strings behave like ``None``."""
    mime: str | None = None
    charset: str | None = None
