"""Logger naming, base configuration and opt-in tracing for strtemplate.

Library modules never attach handlers. Components obtain their logger through
:func:`resolve_logger`, which honours, in order, an explicit logger, a
:class:`~strtemplate.core.interfaces.LoggerFactoryProtocol`, and finally the
``strtemplate.*`` namespace. Applications that want output call
:func:`setup_base_logger` (or use ``DefaultLoggerFactory``).

Per-call tracing is DEBUG-level and only fires with ``STRTEMPLATE_TRACE=1``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from strtemplate.constants import LOGGER_NAMESPACE, TRACE_ENV_VAR, VERSION_ENV_VAR

PLAIN_FORMAT = "%(levelname)s: %(message)s"


def _package_version() -> str:
    try:
        from strtemplate import __version__
    except ImportError:
        return os.getenv(VERSION_ENV_VAR, "unknown")
    return str(__version__)


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and optional ctx.

    ``ctx`` is taken from a ``context`` dict passed via ``extra=``; values that
    are not JSON-serialisable are rendered with ``repr``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = _package_version()

    @staticmethod
    def _timestamp(record: logging.LogRecord) -> str:
        when = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return when.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def _payload(self, record: logging.LogRecord) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "ts": self._timestamp(record),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        context = getattr(record, "context", None)
        if isinstance(context, dict) and context:
            payload["ctx"] = context
        return payload

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self._payload(record), ensure_ascii=False, default=repr)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the 'strtemplate' logger.

    Repeated calls only adjust the level; the first handler is kept.
    """
    base = logging.getLogger(LOGGER_NAMESPACE)
    base.setLevel(level)
    if base.handlers:
        return base

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    base.propagate = False
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return *name* as a logger under the 'strtemplate' namespace."""
    if not name or name == LOGGER_NAMESPACE:
        return logging.getLogger(LOGGER_NAMESPACE)
    prefix = f"{LOGGER_NAMESPACE}."
    return logging.getLogger(name if name.startswith(prefix) else prefix + name)


def resolve_logger(name: str, *, logger=None, factory=None):
    """Pick the logger a component should use: explicit, factory-made, or namespaced."""
    if logger is not None:
        return logger
    if factory is not None:
        return factory.get_logger(name)
    return get_logger(name)


def is_trace_enabled() -> bool:
    return os.getenv(TRACE_ENV_VAR) == "1"


def trace(logger, message: str, **ctx) -> None:
    """Log *message* at DEBUG with *ctx* attached, only when tracing is enabled."""
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
