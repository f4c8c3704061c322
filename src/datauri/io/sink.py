from __future__ import annotations

"""Output destination for a finished data URI.

`OutputSink` wraps either standard output or a file given with ``-o``. The
file is created lazily by the single `write` call, so a run that fails
before producing output leaves no file behind. Standard output is flushed,
never closed.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from datauri.core.interfaces.logging import LoggerLikeProtocol
from datauri.logging.helpers import get_logger


class SinkWriteError(OSError):
    """The output destination could not be opened or written."""

    def __init__(self, target: str, cause: OSError) -> None:
        super().__init__(f'could not write {target}: {cause.strerror or cause}')
        self.errno = cause.errno
        self.target = target


class OutputSink:
    def __init__(
            self,
            path: Optional[Path] = None,
            *,
            stream: Optional[TextIO] = None,
            encoding: str = 'utf-8',
            logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._stream = stream
        self._encoding = encoding
        self._log = logger or get_logger('io.sink')
        self._handle: Optional[TextIO] = None
        self._written = False
        self._closed = False

    @property
    def target(self) -> str:
        return str(self._path) if self._path is not None else '<stdout>'

    @property
    def closed(self) -> bool:
        return self._closed

    def _open(self) -> TextIO:
        if self._path is None:
            return self._stream or sys.stdout
        self._log.info("Output file is '%s'", self._path.resolve())
        try:
            return open(self._path, 'w', encoding=self._encoding, newline='')
        except OSError as exc:
            raise SinkWriteError(self.target, exc) from exc

    def write(self, text: str) -> int:
        if self._closed:
            raise ValueError('write to closed OutputSink')
        if self._written:
            raise ValueError('OutputSink accepts a single write')
        self._handle = self._open()
        self._written = True
        try:
            count = self._handle.write(text)
            self._handle.flush()
        except OSError as exc:
            raise SinkWriteError(self.target, exc) from exc
        return count

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        handle, self._handle = self._handle, None
        if handle is None or self._path is None:
            return
        try:
            handle.close()
        except OSError as exc:
            raise SinkWriteError(self.target, exc) from exc

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.close()
        except SinkWriteError:
            # A failure already in flight outranks the close error.
            if exc_type is None:
                raise
