from __future__ import annotations

"""
Data URI assembly.

This module exposes:
  * `assemble_data_uri`: Pure formatting of ``data:<mime>[;charset=<cs>];base64,<payload>``.
  * `DataUriBuilder`: Resolves MIME type and charset, then assembles the URI.
  * `build_data_uri`: One-shot helper around a default `DataUriBuilder`.
"""

import base64
from pathlib import Path
from typing import Optional

from datauri.constants import BASE64_MARKER, CHARSET_PARAM, DATA_SCHEME
from datauri.core.interfaces import (
    CharsetResolverProtocol,
    LoggerLikeProtocol,
    MimeResolverProtocol,
    OutputSinkProtocol,
    SourceReaderProtocol,
)
from datauri.core.models import BuildOptions, Resolution
from datauri.io.source import read_source_bytes
from datauri.logging.helpers import get_logger
from datauri.resolution.charset import CharsetResolver
from datauri.resolution.mime import MimeTypeResolver


def encode_base64(data: bytes) -> str:
    """Standard alphabet, '=' padding, no line breaks."""
    return base64.b64encode(data).decode('ascii')


def assemble_data_uri(data: bytes, mime: str, charset: Optional[str] = None) -> str:
    parts = [DATA_SCHEME, mime]
    if charset is not None:
        parts.append(CHARSET_PARAM + charset)
    parts.append(BASE64_MARKER)
    parts.append(encode_base64(data))
    return ''.join(parts)


class DataUriBuilder:
    """Turn file content into a data URI.

    Resolvers and the file reader are injectable; by default they log
    through the 'datauri' logger tree, which only shows the diagnostics
    when the base logger is at INFO.
    """

    def __init__(
            self,
            *,
            mime_resolver: Optional[MimeResolverProtocol] = None,
            charset_resolver: Optional[CharsetResolverProtocol] = None,
            reader: Optional[SourceReaderProtocol] = None,
            logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('builder')
        self._mime = mime_resolver or MimeTypeResolver(logger=logger)
        self._charset = charset_resolver or CharsetResolver(logger=logger)
        self._read = reader or read_source_bytes

    def resolve(self, filename: str, mime: Optional[str] = None, charset: Optional[str] = None) -> Resolution:
        """Resolve the effective MIME type and charset for *filename*.

        Raises:
            ResolutionError: No override and the extension is not in either table.
        """
        return Resolution(
            mime=self._mime.resolve(filename, mime),
            charset=self._charset.resolve(filename, charset),
        )

    def resolve_options(self, filename: str, options: BuildOptions) -> Resolution:
        return self.resolve(filename, options.mime, options.charset)

    def build(
            self,
            data: bytes,
            filename: str,
            mime: Optional[str] = None,
            charset: Optional[str] = None,
    ) -> str:
        res = self.resolve(filename, mime, charset)
        return assemble_data_uri(data, res.mime, res.charset)

    def generate(
            self,
            path: Path,
            out: OutputSinkProtocol,
            mime: Optional[str] = None,
            charset: Optional[str] = None,
    ) -> str:
        """Read *path*, write its data URI to *out* in one call and return it.

        Resolution happens before the read, so an unresolvable input touches
        neither the file nor *out*.
        """
        path = Path(path)
        res = self.resolve(path.name, mime, charset)
        data = self._read(path)
        self._log.debug('read %d bytes from %s', len(data), path)
        uri = assemble_data_uri(data, res.mime, res.charset)
        out.write(uri)
        return uri


def build_data_uri(
        data: bytes,
        filename: str,
        mime: Optional[str] = None,
        charset: Optional[str] = None,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
) -> str:
    """Shortcut for ``DataUriBuilder(logger=logger).build(...)``."""
    return DataUriBuilder(logger=logger).build(data, filename, mime, charset)
