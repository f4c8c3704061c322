from __future__ import annotations

"""Small logging helpers to standardize datauri logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration for the 'datauri' base logger.
    - get_logger: Namespaced logger factory ('datauri.*').
    - verbosity_level: Maps the -v flag onto a logging level.

Plain output renders as ``[INFO] message`` on stderr, which is the shape of
the verbose diagnostics.
"""

import logging
import os
from typing import Optional, TextIO

BASE_LOGGER_NAME = 'datauri'
PLAIN_FORMAT = '[%(levelname)s] %(message)s'


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'datauri.resolve.mime').
        - msg: Formatted message string.
        - version: datauri.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import; the package imports this module during start-up.
            from datauri import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv('DATAURI_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def verbosity_level(verbose: bool) -> int:
    """INFO shows the diagnostics; WARNING keeps only problems."""
    return logging.INFO if verbose else logging.WARNING


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'datauri' logger and return it.

    Repeated calls replace the handler so that a new stream or format takes
    effect (the CLI may run several times in one process, e.g. under tests).

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER_NAME)
    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'datauri'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER_NAME}.{name}')
