"""
Keyboard and pointer bindings for the interaction controller.
"""

import asyncio
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..models import CopySource, Direction
from .controller import InteractionController


class Key(str, Enum):
    """Named keys delivered by the event source."""
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    BACKSPACE = "Backspace"
    ENTER = "Enter"
    ESCAPE = "Escape"


class KeyEvent(BaseModel):
    """A single key press with its modifiers."""
    model_config = ConfigDict(frozen=True)

    key: str
    ctrl: bool = False
    meta: bool = False

    @property
    def is_copy_chord(self) -> bool:
        return self.key.lower() == "c" and (self.ctrl or self.meta)

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable() and not (self.ctrl or self.meta)


class PointerEvent(BaseModel):
    """A left-button press at a terminal cell (1-based)."""
    model_config = ConfigDict(frozen=True)

    column: int
    row: int


class KeyDispatcher:
    """
    Route the three core chords to the controller:
    down/up arrows navigate, ctrl/cmd+c copies the selected format.
    Everything else is left to the caller.
    """

    def __init__(self, controller: InteractionController):
        self.controller = controller
        self.last_copy: Optional[asyncio.Task] = None

    def dispatch(self, event: KeyEvent) -> bool:
        """Handle a key event. Returns True if the core consumed it."""
        if event.key == Key.ARROW_DOWN.value:
            self.controller.on_navigate(Direction.NEXT)
            return True

        if event.key == Key.ARROW_UP.value:
            self.controller.on_navigate(Direction.PREVIOUS)
            return True

        if event.is_copy_chord:
            self.last_copy = self.controller.on_copy_requested(CopySource.KEYBOARD_SHORTCUT)
            return True

        return False

    def dispatch_click(self, index: int) -> Optional[asyncio.Task]:
        """Pointer click on a rendered row: select it and copy it."""
        self.last_copy = self.controller.on_copy_requested(index)
        return self.last_copy
