from __future__ import annotations

from pathlib import Path


class SourceReadError(OSError):
    """The input file could not be opened or fully read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f'could not read {path}: {cause.strerror or cause}')
        self.errno = cause.errno
        self.path = path


def read_source_bytes(path: Path) -> bytes:
    """Read the whole file as raw bytes, no decoding or newline translation."""
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SourceReadError(Path(path), exc) from exc
