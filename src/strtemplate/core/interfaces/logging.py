from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What StringInterpolator and UrlEncoderProcessor call on their logger."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of component loggers, keyed by a dotted component name such as 'net.url_encoder'."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
