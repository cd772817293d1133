"""
Clipboard service.
Write-only access to the system clipboard through pyperclip.
"""

import asyncio
from abc import ABC, abstractmethod

import pyperclip

from ..errors import ClipboardError
from ..utils import get_logger


class ClipboardPort(ABC):
    """Contract for clipboard writes."""

    @abstractmethod
    async def write(self, text: str) -> None:
        """
        Place text on the clipboard.

        Raises:
            ClipboardError: If the write was rejected
        """
        ...


class SystemClipboard(ClipboardPort):
    """
    Cross-platform clipboard backed by pyperclip.
    The blocking copy runs in a worker thread so the event loop keeps going.
    """

    def __init__(self):
        self.logger = get_logger()

    async def write(self, text: str) -> None:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard unavailable: {e}") from e

        self.logger.debug(f"Clipboard write: {text!r}")
