"""
Interaction layer.
Selection state, key bindings and the feedback timer.
"""

from .timer import FeedbackTimer
from .controller import InteractionController
from .keys import Key, KeyDispatcher, KeyEvent, PointerEvent

__all__ = [
    'FeedbackTimer',
    'InteractionController',
    'Key',
    'KeyDispatcher',
    'KeyEvent',
    'PointerEvent',
]
