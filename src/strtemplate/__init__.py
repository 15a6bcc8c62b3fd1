from __future__ import annotations

__version__ = '0.1.0'

from strtemplate.core.errors import InvalidArgumentError
from strtemplate.core.models import StringTemplate
from strtemplate.core.interfaces.templating import TemplateLikeProtocol, TemplateProcessorProtocol
from strtemplate.processing.string_interpolator import (
    StringInterpolator,
    interpolate_mapped,
    interpolate_mapped_as_str,
)
from strtemplate.processing.processors import (
    MappedProcessor,
    mapped_as_str_processor,
    mapped_processor,
)
from strtemplate.net.url_encoder import UrlEncoderProcessor, encode_as_str, encode_as_url
from strtemplate.logging.helpers import get_logger

__all__ = [
    '__version__',
    'InvalidArgumentError',
    'StringTemplate',
    'TemplateLikeProtocol',
    'TemplateProcessorProtocol',
    'StringInterpolator',
    'interpolate_mapped',
    'interpolate_mapped_as_str',
    'MappedProcessor',
    'mapped_processor',
    'mapped_as_str_processor',
    'UrlEncoderProcessor',
    'encode_as_str',
    'encode_as_url',
    'get_logger',
]
