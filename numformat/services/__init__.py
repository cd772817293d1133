"""
Service modules for formatting and external collaborators.
"""

from .formatter import DEFAULT_REGION, PhoneFormatter, format_number
from .clipboard import ClipboardPort, SystemClipboard

__all__ = [
    'DEFAULT_REGION',
    'PhoneFormatter',
    'format_number',
    'ClipboardPort',
    'SystemClipboard',
]
