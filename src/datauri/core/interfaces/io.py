from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SourceReaderProtocol(Protocol):
    def __call__(self, path: Path) -> bytes:
        ...


@runtime_checkable
class OutputSinkProtocol(Protocol):
    """Anything with a text ``write``; file objects and ``OutputSink`` qualify."""

    def write(self, text: str) -> int:
        ...
