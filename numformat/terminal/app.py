"""
Interactive terminal front-end.
Feeds keystrokes and mouse clicks into the interaction controller and
redraws the screen whenever its state changes.
"""

import asyncio
import os
import sys
from typing import Iterable, Optional

from rich.console import Console

from ..interaction import InteractionController, Key, KeyDispatcher, KeyEvent, PointerEvent
from ..models import AppConfig, ControllerState
from ..services import ClipboardPort, SystemClipboard
from ..utils import get_logger
from .reader import InputDecoder, InputEvent, raw_terminal
from .render import render_screen, row_for_click

QUIT_CHORDS = ('d', 'q')

# Seconds to wait for the rest of an escape sequence before reading ESC as Escape
ESCAPE_TIMEOUT = 0.1


class TerminalApp:
    """
    Full-screen formatter session.
    Editing keys live here; navigation and copy belong to KeyDispatcher.
    """

    def __init__(
        self,
        config: AppConfig,
        clipboard: Optional[ClipboardPort] = None,
        console: Optional[Console] = None
    ):
        self.config = config
        self.console = console or Console()
        self.logger = get_logger()

        self.controller = InteractionController(clipboard or SystemClipboard(), config=config)
        self.dispatcher = KeyDispatcher(self.controller)
        self.controller.add_listener(self._render)

        self.decoder = InputDecoder()
        self._escape_handle: Optional[asyncio.TimerHandle] = None
        self._done: Optional[asyncio.Future] = None

    def run(self):
        """Run until the user quits."""
        asyncio.run(self.run_async())

    async def run_async(self):
        fd = sys.stdin.fileno()
        loop = asyncio.get_running_loop()
        self._done = loop.create_future()

        with raw_terminal(fd, mouse=self.config.mouse_enabled):
            with self.console.screen(hide_cursor=True):
                self._render(self.controller.state)
                loop.add_reader(fd, self._on_readable, fd)
                try:
                    await self._done
                finally:
                    loop.remove_reader(fd)
                    if self._escape_handle is not None:
                        self._escape_handle.cancel()
                    self.controller.close()

        self.logger.debug("Session closed")

    def _on_readable(self, fd: int):
        data = os.read(fd, 1024)
        if not data:
            self.handle_events(self.decoder.flush())
            self.quit()
            return
        self.feed(data)

    def feed(self, data: bytes):
        """
        Decode one read from the terminal. A held-back ESC is flushed as the
        Escape key if nothing follows within ESCAPE_TIMEOUT.
        """
        if self._escape_handle is not None:
            self._escape_handle.cancel()
            self._escape_handle = None

        self.handle_events(self.decoder.feed(data))

        if self.decoder.pending:
            self._escape_handle = asyncio.get_running_loop().call_later(
                ESCAPE_TIMEOUT, self._flush_input
            )

    def _flush_input(self):
        self._escape_handle = None
        self.handle_events(self.decoder.flush())

    def handle_events(self, events: Iterable[InputEvent]):
        """Apply decoded input events in order."""
        for event in events:
            if isinstance(event, PointerEvent):
                index = row_for_click(event.row, len(self.controller.formats))
                if index is not None:
                    self.dispatcher.dispatch_click(index)
                continue

            if self.dispatcher.dispatch(event):
                continue

            self._edit(event)

    def _edit(self, event: KeyEvent):
        if event.key == Key.ESCAPE.value or (event.ctrl and event.key in QUIT_CHORDS):
            self.quit()
            return

        raw = self.controller.raw_input
        if event.key == Key.BACKSPACE.value:
            new_raw = raw[:-1]
        elif event.ctrl and event.key == 'u':
            new_raw = ""
        elif event.is_printable:
            new_raw = raw + event.key
        else:
            return

        if new_raw != raw:
            self.controller.on_input_changed(new_raw)

    def quit(self):
        if self._done is not None and not self._done.done():
            self._done.set_result(None)

    @property
    def finished(self) -> bool:
        return self._done is not None and self._done.done()

    def _render(self, state: ControllerState):
        render_screen(self.console, state, self.config.title)
