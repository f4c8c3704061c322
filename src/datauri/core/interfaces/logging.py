from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Diagnostic sink injected into resolvers, the builder and the output sink.

    Any `logging.Logger` qualifies; tests pass a `Mock`. Calls never affect
    the values the caller computes.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of configured, 'datauri'-namespaced loggers."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
