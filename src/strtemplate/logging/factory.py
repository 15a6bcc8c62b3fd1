from __future__ import annotations

import logging
from typing import Dict, Optional, TextIO

from strtemplate.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """LoggerFactoryProtocol implementation handing out 'strtemplate.*' loggers.

    Pass one to ``StringInterpolator(logger_factory=...)`` or
    ``encode_as_str(logger_factory=...)``. The base logger is configured on
    the first request, not at construction.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json_logs = json_logs
        self._level = level
        self._stream = stream
        self._loggers: Dict[str, logging.Logger] = {}

    @property
    def configured(self) -> bool:
        return bool(self._loggers)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._loggers:
            setup_base_logger(json_logs=self._json_logs, level=self._level, stream=self._stream)
        if name not in self._loggers:
            self._loggers[name] = get_logger(name)
        return self._loggers[name]
