"""
Utility modules for the number formatter.
"""

from .logger import FormatterLogger, get_logger, init_logger
from .patterns import group_dotted, strip_non_digits

__all__ = [
    'FormatterLogger',
    'get_logger',
    'init_logger',
    'group_dotted',
    'strip_non_digits',
]
