from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Default character encoding for percent-encoding processors.
DEFAULT_ENCODING: str = 'utf-8'

# Characters quote_plus leaves untouched on top of its own unreserved set.
URL_SAFE_CHARS: str = '*'

LOGGER_NAMESPACE: str = 'strtemplate'

TRACE_ENV_VAR: str = 'STRTEMPLATE_TRACE'
VERSION_ENV_VAR: str = 'STRTEMPLATE_VERSION'
