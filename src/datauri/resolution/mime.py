from __future__ import annotations

"""Extension-based MIME type resolution.

Resolution order:
    1) a non-empty override, used verbatim;
    2) the image table;
    3) the text table.
Anything else is a `ResolutionError`.
"""

from typing import Optional

from datauri.constants import IMAGE_TYPES, TEXT_TYPES
from datauri.core.interfaces.logging import LoggerLikeProtocol
from datauri.logging.helpers import get_logger


class ResolutionError(ValueError):
    """Raised when no MIME type can be determined for an input."""

    def __init__(self, filename: str) -> None:
        super().__init__(f'no MIME type could be determined for {filename!r}')
        self.filename = filename


def file_extension(filename: str) -> str:
    """Return everything after the final '.', or '' when there is none.

    A trailing dot also yields ''. Case is preserved.
    """
    idx = filename.rfind('.')
    if 0 <= idx < len(filename) - 1:
        return filename[idx + 1:]
    return ''


def is_image_file(filename: str) -> bool:
    return file_extension(filename) in IMAGE_TYPES


class MimeTypeResolver:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('resolve.mime')

    def resolve(self, filename: str, override: Optional[str] = None) -> str:
        if override:
            return override

        ext = file_extension(filename)
        mime = IMAGE_TYPES.get(ext) or TEXT_TYPES.get(ext)
        if mime is None:
            raise ResolutionError(filename)

        self._log.info("No MIME type provided, defaulting to '%s'.", mime)
        return mime
