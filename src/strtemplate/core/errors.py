"""Error types raised by strtemplate itself.

Failures raised by caller-supplied mappers are never wrapped; only argument
validation performed by this package produces the errors below.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent or malformed."""


def require_present(value, name: str):
    """Return *value* unchanged, raising InvalidArgumentError when it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def require_callable(func, name: str = "mapper"):
    """Return *func* unchanged if it is a non-None callable."""
    require_present(func, name)
    if not callable(func):
        raise InvalidArgumentError(f"{name} must be callable, got {type(func).__name__}")
    return func
