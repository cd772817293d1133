"""
Terminal front-end.
Decodes keyboard and mouse input and renders the format list.
"""

from .reader import InputDecoder, parse_input, raw_terminal
from .render import FIRST_ROW, render_screen, row_for_click
from .app import TerminalApp

__all__ = [
    'InputDecoder',
    'parse_input',
    'raw_terminal',
    'FIRST_ROW',
    'render_screen',
    'row_for_click',
    'TerminalApp',
]
