"""
Interaction controller.
Owns the typed input, its derived formats, the selection cursor and the
copy feedback message. Every transition runs synchronously; only the
clipboard write crosses an async boundary.
"""

import asyncio
from typing import Callable, List, Optional, Set, Union

from ..models import AppConfig, ControllerState, CopySource, Direction, FormatSet
from ..services import ClipboardPort, format_number
from ..utils import get_logger
from .timer import FeedbackTimer, Scheduler

StateListener = Callable[[ControllerState], None]


class InteractionController:
    """
    State machine behind the format list.

    Empty (no formats, navigation and copy do nothing) <-> Populated(cursor).
    Only on_input_changed moves between the two.
    """

    def __init__(
        self,
        clipboard: ClipboardPort,
        config: Optional[AppConfig] = None,
        formatter: Callable[[str], FormatSet] = format_number,
        scheduler: Optional[Scheduler] = None
    ):
        self.config = config or AppConfig()
        self.clipboard = clipboard
        self.formatter = formatter
        self.logger = get_logger()

        self._raw_input = ""
        self._formats = FormatSet.empty()
        self._cursor: Optional[int] = None
        self._feedback: Optional[str] = None

        # Bumped on every input change; stale copies compare against it
        self._generation = 0

        self._timer = FeedbackTimer(self.config.feedback_duration_ms, scheduler=scheduler)
        self._listeners: List[StateListener] = []
        self._pending_copies: Set[asyncio.Task] = set()

    # ------------------------------------------------------------
    # State access
    # ------------------------------------------------------------

    @property
    def state(self) -> ControllerState:
        return ControllerState(
            raw_input=self._raw_input,
            formats=self._formats,
            cursor=self._cursor,
            feedback_message=self._feedback,
        )

    @property
    def raw_input(self) -> str:
        return self._raw_input

    @property
    def formats(self) -> FormatSet:
        return self._formats

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def feedback_message(self) -> Optional[str]:
        return self._feedback

    def add_listener(self, listener: StateListener):
        """Call listener with the new state after every transition."""
        self._listeners.append(listener)

    def _notify(self) -> ControllerState:
        state = self.state
        for listener in self._listeners:
            listener(state)
        return state

    # ------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------

    def on_input_changed(self, new_raw: str) -> ControllerState:
        """Replace the input and recompute formats and cursor together."""
        formats = self.formatter(new_raw)

        self._raw_input = new_raw
        self._formats = formats
        self._cursor = None if formats.is_empty else 0
        self._generation += 1

        self.logger.debug(
            f"Input changed: {new_raw!r} -> {len(formats)} format(s)"
        )
        return self._notify()

    def on_navigate(self, direction: Direction) -> ControllerState:
        """Move the cursor one row, clamped to the list bounds."""
        if self._formats.is_empty or self._cursor is None:
            return self.state

        last = len(self._formats) - 1
        if direction == Direction.NEXT:
            self._cursor = min(self._cursor + 1, last)
        else:
            self._cursor = max(self._cursor - 1, 0)

        self.logger.debug(f"Navigate {direction.value}: cursor={self._cursor}")
        return self._notify()

    def on_copy_requested(
        self,
        source: Union[CopySource, str, int]
    ) -> Optional[asyncio.Task]:
        """
        Copy the selected value (keyboard shortcut) or the value at an
        explicit row index (pointer), which also selects that row.

        Returns:
            The in-flight clipboard task, or None if there was nothing to copy
            (including when no event loop is running to perform the write)
        """
        if self._formats.is_empty:
            return None

        index = self._resolve_index(source)
        if index is None:
            return None

        target = self._formats.value_at(index)
        if target is None:
            self.logger.debug(f"Copy ignored: no format at index {index}")
            return None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.logger.debug("Copy ignored: no running event loop")
            return None

        if index != self._cursor:
            self._cursor = index
            self._notify()

        task = loop.create_task(self._write_clipboard(target, self._generation))
        self._pending_copies.add(task)
        task.add_done_callback(self._pending_copies.discard)
        return task

    def _resolve_index(self, source: Union[CopySource, str, int]) -> Optional[int]:
        """Row index a copy source points at, or None for unknown sources."""
        if isinstance(source, str):
            try:
                source = CopySource(source)
            except ValueError:
                self.logger.debug(f"Copy ignored: unknown source {source!r}")
                return None
            if source == CopySource.KEYBOARD_SHORTCUT:
                return self._cursor

        if isinstance(source, bool) or not isinstance(source, int):
            self.logger.debug(f"Copy ignored: unknown source {source!r}")
            return None

        return source

    # ------------------------------------------------------------
    # Clipboard continuation and feedback lifecycle
    # ------------------------------------------------------------

    async def _write_clipboard(self, text: str, generation: int):
        try:
            await self.clipboard.write(text)
        except Exception as e:
            # Rejected writes leave no feedback; nothing is retried
            self.logger.debug(f"Copy failed: {e}")
            return

        if self.config.suppress_stale_feedback and generation != self._generation:
            self.logger.debug("Copy confirmed after input changed, feedback suppressed")
            return

        self.logger.debug(f"Copied {text!r}")
        self._show_feedback()

    def _show_feedback(self):
        self._feedback = self.config.feedback_message
        self._timer.start(self._clear_feedback)
        self._notify()

    def _clear_feedback(self):
        self._feedback = None
        self._notify()

    def close(self):
        """Drop the pending feedback timer and any in-flight copies."""
        self._timer.cancel()
        for task in list(self._pending_copies):
            task.cancel()
