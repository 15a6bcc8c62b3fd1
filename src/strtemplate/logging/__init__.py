"""Logging helpers for strtemplate."""
from strtemplate.logging.factory import DefaultLoggerFactory
from strtemplate.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_enabled,
    resolve_logger,
    setup_base_logger,
    trace,
)

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "is_trace_enabled",
    "resolve_logger",
    "setup_base_logger",
    "trace",
]
