"""Public API surface for strtemplate.processing."""
from strtemplate.processing.processors import (
    MappedProcessor,
    mapped_as_str_processor,
    mapped_processor,
)
from strtemplate.processing.string_interpolator import (
    StringInterpolator,
    interpolate_mapped,
    interpolate_mapped_as_str,
    to_str_then,
)

__all__ = [
    "MappedProcessor",
    "StringInterpolator",
    "interpolate_mapped",
    "interpolate_mapped_as_str",
    "mapped_as_str_processor",
    "mapped_processor",
    "to_str_then",
]
