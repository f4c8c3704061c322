from __future__ import annotations

"""Public surface for datauri.core.

Stable import location for the data carriers and the protocol seams:

    from datauri.core import Resolution, MimeResolverProtocol, ...
"""

from datauri.core.models import BuildOptions, Resolution
from datauri.core.interfaces import (
    CharsetResolverProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    MimeResolverProtocol,
    OutputSinkProtocol,
    SourceReaderProtocol,
)

__all__ = [
    # Models
    "BuildOptions",
    "Resolution",
    # Protocols
    "CharsetResolverProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "MimeResolverProtocol",
    "OutputSinkProtocol",
    "SourceReaderProtocol",
]
