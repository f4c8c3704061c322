from __future__ import annotations

"""Project-wide constants used across modules.

The extension tables are read-only views; lookups are case-sensitive and
keys carry no leading dot.
"""

from types import MappingProxyType
from typing import Mapping

IMAGE_TYPES: Mapping[str, str] = MappingProxyType({
    'gif': 'image/gif',
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
})

TEXT_TYPES: Mapping[str, str] = MappingProxyType({
    'htm': 'text/html',
    'html': 'text/html',
    'xml': 'application/xml',
    'xhtml': 'application/xhtml+xml',
    'js': 'application/x-javascript',
    'css': 'text/css',
    'txt': 'text/plain',
})

DATA_SCHEME: str = 'data:'
CHARSET_PARAM: str = ';charset='
BASE64_MARKER: str = ';base64,'
