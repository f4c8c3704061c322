from __future__ import annotations

import os
from typing import Optional, TextIO

from datauri.core.interfaces.logging import LoggerLikeProtocol
from datauri.logging.helpers import get_logger, setup_base_logger, verbosity_level

JSON_LOGS_ENV = 'DATAURI_JSON_LOGS'


class DefaultLoggerFactory:
    """Configure the 'datauri' logger tree for one invocation and hand out loggers.

    ``verbose`` decides whether the INFO diagnostics show; an explicit
    ``level`` wins over it. JSON lines are used when ``json_logs`` is set or
    when ``DATAURI_JSON_LOGS=1`` is in the environment. Configuration runs on
    the first `get_logger` call.
    """

    def __init__(
            self,
            *,
            verbose: bool = False,
            json_logs: bool = False,
            level: Optional[int] = None,
            stream: Optional[TextIO] = None,
    ) -> None:
        self._json = bool(json_logs) or self.json_logs_from_env()
        self._level = verbosity_level(verbose) if level is None else int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @staticmethod
    def json_logs_from_env() -> bool:
        return os.getenv(JSON_LOGS_ENV) == '1'

    @property
    def level(self) -> int:
        return self._level

    @property
    def json_logs(self) -> bool:
        return self._json

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        self._ensure_config()
        return get_logger(name)
