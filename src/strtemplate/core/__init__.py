"""Public surface for strtemplate.core.

Stable import location for the template model, error types and protocols:

    from strtemplate.core import StringTemplate, InvalidArgumentError, ...
"""

from strtemplate.core.errors import InvalidArgumentError
from strtemplate.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateLikeProtocol,
    TemplateProcessorProtocol,
)
from strtemplate.core.models import StringTemplate, template_parts

__all__ = [
    # Model
    "StringTemplate",
    "template_parts",
    # Errors
    "InvalidArgumentError",
    # Protocols
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "TemplateLikeProtocol",
    "TemplateProcessorProtocol",
]
