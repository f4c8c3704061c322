from .io import OutputSinkProtocol, SourceReaderProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .resolve import CharsetResolverProtocol, MimeResolverProtocol

__all__ = [
    'CharsetResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MimeResolverProtocol',
    'OutputSinkProtocol',
    'SourceReaderProtocol',
]
