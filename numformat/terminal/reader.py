"""
Terminal input decoding.
Turns raw stdin bytes into key and pointer events, and puts the terminal
into a mode where every key (including ctrl+c) reaches us as bytes.
"""

import codecs
import os
import sys
from contextlib import contextmanager
from typing import List, Optional, TextIO, Tuple, Union

from ..errors import TerminalError
from ..interaction import Key, KeyEvent, PointerEvent
from ..utils.patterns import (
    CURSOR_KEY_PATTERN,
    INCOMPLETE_ESCAPE_PATTERN,
    OTHER_CSI_PATTERN,
    SGR_MOUSE_PATTERN,
)

if os.name != "nt":
    import termios

InputEvent = Union[KeyEvent, PointerEvent]

ESC = '\x1b'

# Left-button press in SGR mouse mode
MOUSE_LEFT_BUTTON = 0

# Report clicks (1000) using SGR coordinates (1006)
MOUSE_ON = '\x1b[?1000h\x1b[?1006h'
MOUSE_OFF = '\x1b[?1006l\x1b[?1000l'

CURSOR_KEYS = {
    'A': Key.ARROW_UP,
    'B': Key.ARROW_DOWN,
    'C': Key.ARROW_RIGHT,
    'D': Key.ARROW_LEFT,
}


class InputDecoder:
    """
    Stateful terminal input decoder.

    Multi-byte characters and escape sequences may be split across reads;
    the unfinished tail is held back until the next feed(). A lone ESC only
    becomes the Escape key once flush() is called (after a short quiet
    period), since it may still be the start of an arrow key.
    """

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='ignore')
        self._pending = ''

    @property
    def pending(self) -> bool:
        return bool(self._pending)

    def feed(self, data: bytes) -> List[InputEvent]:
        text = self._pending + self._decoder.decode(data)
        events, self._pending = _parse_text(text, final=False)
        return events

    def flush(self) -> List[InputEvent]:
        """Emit whatever is held back, reading a lone ESC as Escape."""
        text = self._pending + self._decoder.decode(b'', final=True)
        events, self._pending = _parse_text(text, final=True)
        return events


def parse_input(data: bytes) -> List[InputEvent]:
    """Decode a complete chunk of terminal input in one go."""
    decoder = InputDecoder()
    return decoder.feed(data) + decoder.flush()


def _parse_text(text: str, final: bool) -> Tuple[List[InputEvent], str]:
    """
    Split decoded text into events.

    ESC followed by a plain character is that character with the meta
    modifier (how terminals send Alt/Option chords).

    Returns:
        (events, unparsed tail kept for the next read)
    """
    events: List[InputEvent] = []
    i = 0

    while i < len(text):
        ch = text[i]

        if ch == ESC:
            match = SGR_MOUSE_PATTERN.match(text, i)
            if match:
                button, column, row, kind = match.groups()
                if kind == 'M' and int(button) == MOUSE_LEFT_BUTTON:
                    events.append(PointerEvent(column=int(column), row=int(row)))
                i = match.end()
                continue

            match = CURSOR_KEY_PATTERN.match(text, i)
            if match:
                events.append(KeyEvent(key=CURSOR_KEYS[match.group(1)].value))
                i = match.end()
                continue

            match = OTHER_CSI_PATTERN.match(text, i)
            if match:
                i = match.end()
                continue

            if not final and INCOMPLETE_ESCAPE_PATTERN.match(text, i):
                return events, text[i:]

            if i + 1 < len(text) and text[i + 1].isprintable():
                events.append(KeyEvent(key=text[i + 1], meta=True))
                i += 2
                continue

            events.append(KeyEvent(key=Key.ESCAPE.value))
            i += 1
            continue

        if ch in ('\x7f', '\x08'):
            events.append(KeyEvent(key=Key.BACKSPACE.value))
        elif ch in ('\r', '\n'):
            events.append(KeyEvent(key=Key.ENTER.value))
        elif ord(ch) < 32:
            # Control chords arrive as 0x01-0x1a: ctrl+a .. ctrl+z
            events.append(KeyEvent(key=chr(ord(ch) + 96), ctrl=True))
        elif ch.isprintable():
            events.append(KeyEvent(key=ch))

        i += 1

    return events, ''


@contextmanager
def raw_terminal(fd: int, mouse: bool = True, stream: Optional[TextIO] = None):
    """
    Disable line buffering, echo, signal keys and flow control on fd,
    optionally enabling mouse reporting. Restores the old mode on exit.
    """
    if os.name == "nt":
        raise TerminalError("The interactive formatter needs a POSIX terminal")
    if not os.isatty(fd):
        raise TerminalError("Standard input is not a terminal; use --number instead")

    stream = stream or sys.stdout
    old_settings = termios.tcgetattr(fd)

    new_settings = termios.tcgetattr(fd)
    new_settings[0] &= ~(termios.IXON | termios.ICRNL)
    new_settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG | termios.IEXTEN)
    new_settings[6][termios.VMIN] = 1
    new_settings[6][termios.VTIME] = 0

    termios.tcsetattr(fd, termios.TCSADRAIN, new_settings)
    if mouse:
        stream.write(MOUSE_ON)
        stream.flush()

    try:
        yield
    finally:
        if mouse:
            stream.write(MOUSE_OFF)
            stream.flush()
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
