from __future__ import annotations

import asyncio

import pytest

from numformat.errors import ClipboardError
from numformat.interaction import InteractionController
from numformat.models import AppConfig
from numformat.services import ClipboardPort
from numformat.utils import init_logger


class FakeHandle:
    def __init__(self, when: float, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock standing in for loop.call_later."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[FakeHandle] = []

    def __call__(self, delay: float, callback) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for handle in sorted(self.live, key=lambda h: h.when):
            if handle.when <= self.now + 1e-9:
                handle.fired = True
                handle.callback()


class FakeClipboard(ClipboardPort):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    async def write(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard denied")
        self.writes.append(text)


class GatedClipboard(ClipboardPort):
    """Each write blocks until the test releases it."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.gates: list[asyncio.Event] = []

    async def write(self, text: str) -> None:
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()
        self.writes.append(text)


@pytest.fixture(autouse=True)
def quiet_logger():
    init_logger(console=False)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def make_controller(scheduler):
    def factory(clipboard: ClipboardPort, **config) -> InteractionController:
        return InteractionController(clipboard, config=AppConfig(**config), scheduler=scheduler)

    return factory
