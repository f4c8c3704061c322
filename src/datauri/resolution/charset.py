from __future__ import annotations

"""Charset label resolution.

The charset only labels the URI; file bytes are never re-encoded. An
unknown charset is dropped rather than rejected, and image inputs never
carry one.
"""

import codecs
import re
from typing import Optional

from datauri.core.interfaces.logging import LoggerLikeProtocol
from datauri.logging.helpers import get_logger
from datauri.resolution.mime import is_image_file

# Legal charset names; anything else could not be embedded as a URI parameter.
_CHARSET_NAME_RE = re.compile(r'^[A-Za-z0-9][A-Za-z0-9.:_+-]*$')

# Registered codecs that are not character encodings.
_NON_CHARSET_CODECS = frozenset({'undefined'})


def is_supported_charset(name: str) -> bool:
    """Return True if *name* is a legal charset name for a known text encoding.

    ``codecs.lookup`` folds punctuation and spaces into ``_`` before the
    lookup, so the name is checked against the charset-name grammar first.
    Bytes-to-bytes and str-to-str codecs (``base64``, ``rot13``...) resolve
    through ``codecs.lookup`` as well and are filtered out here.
    """
    if not name or not _CHARSET_NAME_RE.match(name):
        return False
    try:
        info = codecs.lookup(name)
    except (LookupError, ValueError):
        return False
    if info.name in _NON_CHARSET_CODECS:
        return False
    return getattr(info, '_is_text_encoding', True)


class CharsetResolver:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('resolve.charset')

    def resolve(self, filename: str, override: Optional[str] = None) -> Optional[str]:
        if not override:
            self._log.info('Charset not specified, skipping.')
            return None

        if not is_supported_charset(override):
            self._log.info("Charset '%s' is invalid, skipping.", override)
            return None

        if is_image_file(filename):
            self._log.info("Image file detected, skipping charset '%s'.", override)
            return None

        self._log.info("Using charset '%s'.", override)
        return override
