from __future__ import annotations
from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class TemplateLikeProtocol(Protocol):
    """Anything exposing ordered fragments and values (one more fragment than values)."""

    @property
    def fragments(self) -> Sequence[str]:
        ...

    @property
    def values(self) -> Sequence[Any]:
        ...


@runtime_checkable
class TemplateProcessorProtocol(Protocol[R_co]):
    """Reusable capability turning a template into a result."""

    def process(self, template: Any) -> R_co:
        ...

    def __call__(self, template: Any) -> R_co:
        ...
