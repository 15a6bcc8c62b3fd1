"""
processors – Reusable template processors closing over a mapper.

A processor is built once and applied to many templates:

    upper = mapped_as_str_processor(str.upper)
    upper(StringTemplate.of(["name: ", ""], ["robtimus"]))   # 'name: ROBTIMUS'

Processors are immutable. They add no locking, so they are as thread-safe as
the mapper they wrap.
"""

from dataclasses import dataclass
from typing import Any, Callable

from strtemplate.core.errors import require_callable
from strtemplate.logging.helpers import get_logger
from strtemplate.processing.string_interpolator import (
    Mapper,
    StrMapper,
    interpolate_mapped,
    interpolate_mapped_as_str,
)

_log = get_logger("processing.processors")


@dataclass(frozen=True)
class MappedProcessor:
    """Processor delegating to an interpolation function with a fixed mapper."""

    mapper: Callable[[Any], str]
    strategy: Callable[[Any, Callable[[Any], str]], str] = interpolate_mapped

    def process(self, template: Any) -> str:
        return self.strategy(template, self.mapper)

    def __call__(self, template: Any) -> str:
        return self.process(template)


def mapped_processor(mapper: Mapper) -> MappedProcessor:
    """Return a processor that delegates to :func:`interpolate_mapped`.

    Raises:
        InvalidArgumentError: If *mapper* is None or not callable.
    """
    require_callable(mapper, "mapper")
    _log.debug("mapped processor created for %r", mapper)
    return MappedProcessor(mapper=mapper, strategy=interpolate_mapped)


def mapped_as_str_processor(mapper: StrMapper) -> MappedProcessor:
    """Return a processor that delegates to :func:`interpolate_mapped_as_str`.

    Raises:
        InvalidArgumentError: If *mapper* is None or not callable.
    """
    require_callable(mapper, "mapper")
    _log.debug("mapped-as-str processor created for %r", mapper)
    return MappedProcessor(mapper=mapper, strategy=interpolate_mapped_as_str)
