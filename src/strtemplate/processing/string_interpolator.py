"""
string_interpolator – Mapped interpolation of decomposed string templates.

A template is a list of literal fragments plus a list of embedded values,
with exactly one fragment more than values. Rendering alternates them:

  f0 + mapper(v0) + f1 + mapper(v1) + ... + mapper(v(n-1)) + fn

Unlike ``StringTemplate.interpolate()``, which applies ``str()`` to every
value, the functions below apply a caller-supplied mapper.

  • The mapper is called once per value, strictly left to right.
  • A value-less template returns its single fragment; the mapper is not called.
  • Anything the mapper raises propagates unchanged; no partial result.
"""

from typing import Any, Callable, Optional

from strtemplate.core.errors import require_callable, require_present
from strtemplate.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from strtemplate.core.models import template_parts
from strtemplate.logging.helpers import resolve_logger, trace

Mapper = Callable[[Any], str]
StrMapper = Callable[[str], str]


def to_str_then(mapper: StrMapper) -> Mapper:
    """Compose ``str()`` with *mapper*: ``lambda v: mapper(str(v))``."""

    def _mapped(value: Any) -> str:
        return mapper(str(value))

    return _mapped


class StringInterpolator:
    """Interleave template fragments with mapped values."""

    def __init__(
        self,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> None:
        self._log = resolve_logger("processing.interpolator", logger=logger, factory=logger_factory)

    def interpolate(self, template: Any, mapper: Mapper) -> str:
        """Interpolate *template*, applying *mapper* to each value.

        Parameters
        ----------
        template:
            A StringTemplate or any template-like object (``fragments``/``values``
            or PEP 750 ``strings``/``values``).
        mapper:
            Function turning each value into its final text.

        Returns
        -------
        str
            The interpolated result.

        Raises
        ------
        InvalidArgumentError
            If *template* or *mapper* is None, or *mapper* is not callable.
        """
        require_present(template, "template")
        require_callable(mapper, "mapper")

        fragments, values = template_parts(template)
        trace(self._log, "interpolating template", template=type(template).__name__)

        out: list[str] = []
        index = 0
        for value in values:
            out.append(fragments[index])
            out.append(mapper(value))
            index += 1
        out.append(fragments[index])

        return "".join(out)

    def interpolate_as_str(self, template: Any, mapper: StrMapper) -> str:
        """Like :meth:`interpolate`, but *mapper* receives ``str(value)``."""
        require_present(template, "template")
        require_callable(mapper, "mapper")
        return self.interpolate(template, to_str_then(mapper))


_DEFAULT = StringInterpolator()


def interpolate_mapped(template: Any, mapper: Mapper) -> str:
    """Return the interpolation of *template* with *mapper* applied to each value."""
    return _DEFAULT.interpolate(template, mapper)


def interpolate_mapped_as_str(template: Any, mapper: StrMapper) -> str:
    """Return the interpolation of *template* with ``mapper(str(value))`` per value."""
    return _DEFAULT.interpolate_as_str(template, mapper)
