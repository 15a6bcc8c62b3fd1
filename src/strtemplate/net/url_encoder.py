"""
url_encoder – Template processor percent-encoding every embedded value.

Literal fragments are kept as-is; each value is stringified and form-encoded
the way ``java.net.URLEncoder`` does it:

  • alphanumerics and ``.-*_`` are kept, space becomes ``+``
  • everything else, ``~`` included, is escaped from the encoded bytes
  • characters the encoding cannot represent are sent as ``?`` (``%3F``)

    encode_as_str()(StringTemplate.of(["https://host/path/", "?url=", ""],
                                      ["id/123", "https://example.org?q=1"]))
    # 'https://host/path/id%2F123?url=https%3A%2F%2Fexample.org%3Fq%3D1'

``encode_as_url`` additionally parses the joined text with
:func:`urllib.parse.urlsplit`. Parser errors propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar
from urllib.parse import SplitResult, quote_plus, urlsplit

from strtemplate.constants import DEFAULT_ENCODING, URL_SAFE_CHARS
from strtemplate.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from strtemplate.logging.helpers import resolve_logger
from strtemplate.processing.processors import MappedProcessor, mapped_as_str_processor
from strtemplate.utils.encodings import normalize_encoding

T = TypeVar("T")


def _identity(text: str) -> str:
    return text


def form_encode(text: str, encoding: str) -> str:
    """Form-encode *text* with *encoding*, unrepresentable characters becoming ``%3F``."""
    encoded = quote_plus(text, safe=URL_SAFE_CHARS, encoding=encoding, errors="replace")
    # quote_plus treats '~' as unreserved.
    return encoded.replace("~", "%7E")


class UrlEncoderProcessor(Generic[T]):
    """Percent-encode template values, then apply a finisher to the result."""

    def __init__(
        self,
        encoding: str,
        finisher: Callable[[str], T],
        *,
        logger: Optional[LoggerLikeProtocol] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._encoding = normalize_encoding(encoding)
        self._finisher = finisher
        self._log = resolve_logger("net.url_encoder", logger=logger, factory=logger_factory)
        self._delegate: MappedProcessor = mapped_as_str_processor(self._encode)
        self._log.debug("url encoder processor created (encoding=%s)", self._encoding)

    @property
    def encoding(self) -> str:
        return self._encoding

    def _encode(self, text: str) -> str:
        return form_encode(text, self._encoding)

    def process(self, template: Any) -> T:
        result = self._delegate.process(template)
        return self._finisher(result)

    def __call__(self, template: Any) -> T:
        return self.process(template)

    def __repr__(self) -> str:
        finisher = getattr(self._finisher, "__name__", repr(self._finisher))
        return f"UrlEncoderProcessor(encoding={self._encoding!r}, finisher={finisher})"


def encode_as_str(
    encoding: str = DEFAULT_ENCODING,
    *,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> UrlEncoderProcessor[str]:
    """Processor encoding each value with *encoding* and returning a ``str``.

    Raises:
        InvalidArgumentError: If *encoding* is None.
        LookupError: If *encoding* is not a known codec.
    """
    return UrlEncoderProcessor(encoding, _identity, logger_factory=logger_factory)


def encode_as_url(
    encoding: str = DEFAULT_ENCODING,
    *,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> UrlEncoderProcessor[SplitResult]:
    """Processor encoding each value with *encoding* and returning a parsed URL.

    The URL is a :class:`urllib.parse.SplitResult`; ``geturl()`` gives the text back.

    Raises:
        InvalidArgumentError: If *encoding* is None.
        LookupError: If *encoding* is not a known codec.
    """
    return UrlEncoderProcessor(encoding, urlsplit, logger_factory=logger_factory)
