from dataclasses import dataclass, field
from typing import Any, Sequence, Tuple

from strtemplate.core.errors import InvalidArgumentError, require_present


@dataclass(frozen=True)
class StringTemplate:
    """Decomposed template: literal fragments interleaved with embedded values.

    ``fragments`` always holds exactly one item more than ``values``::

        StringTemplate.of(["name: ", ", x: ", ""], ["robtimus", 13])

    stands for ``"name: {name}, x: {x}"`` with ``name="robtimus"`` and ``x=13``.
    """

    fragments: Tuple[str, ...]
    values: Tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        if isinstance(self.values, str):
            raise InvalidArgumentError("values must be a sequence of values, not a str")
        # Frozen: normalise through object.__setattr__.
        object.__setattr__(self, "fragments", tuple(self.fragments))
        object.__setattr__(self, "values", tuple(self.values))

        if len(self.fragments) != len(self.values) + 1:
            raise InvalidArgumentError(
                f"a template needs exactly one fragment more than values "
                f"(got {len(self.fragments)} fragments, {len(self.values)} values)"
            )
        for frag in self.fragments:
            if not isinstance(frag, str):
                raise InvalidArgumentError(f"fragments must be str, got {type(frag).__name__}")

    @classmethod
    def of(cls, fragments: Sequence[str] | str, values: Sequence[Any] = ()) -> "StringTemplate":
        """Build a template from fragments and values.

        A bare string is treated as a single fragment with no values.
        """
        require_present(fragments, "fragments")
        require_present(values, "values")
        if isinstance(fragments, str):
            fragments = (fragments,)
        return cls(tuple(fragments), tuple(values))

    @classmethod
    def from_template(cls, template: Any) -> "StringTemplate":
        """Convert any template-like object into a StringTemplate.

        Accepted shapes:
          • objects exposing ``fragments`` and ``values`` (StringTemplate included)
          • PEP 750 templates exposing ``strings`` and ``values``
        """
        require_present(template, "template")
        if isinstance(template, cls):
            return template
        fragments, values = template_parts(template)
        return cls(tuple(fragments), tuple(values))

    def interpolate(self) -> str:
        """Join fragments and ``str(value)`` left to right."""
        out: list[str] = []
        for frag, value in zip(self.fragments, self.values):
            out.append(frag)
            out.append(str(value))
        out.append(self.fragments[-1])
        return "".join(out)

    def __str__(self) -> str:
        return f"StringTemplate{{fragments=[{', '.join(map(repr, self.fragments))}], values={list(self.values)!r}}}"


def template_parts(template: Any) -> Tuple[Sequence[str], Sequence[Any]]:
    """Return ``(fragments, values)`` for a template-like object.

    The fragment/value count invariant is not checked here.
    """
    if hasattr(template, "fragments") and hasattr(template, "values"):
        return template.fragments, template.values
    if hasattr(template, "strings") and hasattr(template, "values"):
        return template.strings, template.values
    raise InvalidArgumentError(
        f"{type(template).__name__} is not template-like "
        f"(expected 'fragments'/'values' or 'strings'/'values' attributes)"
    )
