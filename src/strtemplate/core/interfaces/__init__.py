from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .templating import TemplateLikeProtocol, TemplateProcessorProtocol

__all__ = [
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateLikeProtocol',
    'TemplateProcessorProtocol',
]
