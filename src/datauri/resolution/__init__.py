"""Public API surface for datauri.resolution."""
from .charset import CharsetResolver, is_supported_charset
from .mime import MimeTypeResolver, ResolutionError, file_extension, is_image_file

__all__ = [
    "CharsetResolver",
    "MimeTypeResolver",
    "ResolutionError",
    "file_extension",
    "is_image_file",
    "is_supported_charset",
]
