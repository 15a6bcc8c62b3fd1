from __future__ import annotations
"""Character-encoding argument handling.

Encoding names follow the :mod:`codecs` registry, so aliases resolve to a
canonical name:
    normalize_encoding("UTF8")      -> "utf-8"
    normalize_encoding("US-ASCII")  -> "ascii"
    normalize_encoding("latin_1")   -> "iso8859-1"
"""

import codecs

from strtemplate.core.errors import require_present


def normalize_encoding(encoding: str | None) -> str:
    """Return the canonical codec name for *encoding*.

    Raises:
        InvalidArgumentError: If *encoding* is None.
        LookupError: If no codec is registered under *encoding*.
    """
    require_present(encoding, "encoding")
    return codecs.lookup(encoding).name
