from __future__ import annotations

import asyncio

import pytest

from numformat.interaction import Key, KeyDispatcher, KeyEvent

VALID = "5852826396"


@pytest.fixture
def dispatcher(make_controller, clipboard) -> KeyDispatcher:
    controller = make_controller(clipboard)
    controller.on_input_changed(VALID)
    return KeyDispatcher(controller)


def test_arrows_navigate(dispatcher: KeyDispatcher) -> None:
    assert dispatcher.dispatch(KeyEvent(key=Key.ARROW_DOWN.value))
    assert dispatcher.dispatch(KeyEvent(key=Key.ARROW_DOWN.value))
    assert dispatcher.controller.cursor == 2

    assert dispatcher.dispatch(KeyEvent(key=Key.ARROW_UP.value))
    assert dispatcher.controller.cursor == 1


@pytest.mark.parametrize(
    "event",
    [KeyEvent(key="c", ctrl=True), KeyEvent(key="c", meta=True), KeyEvent(key="C", ctrl=True)],
)
def test_copy_chord_copies_selection(dispatcher: KeyDispatcher, clipboard, event: KeyEvent) -> None:
    async def scenario():
        dispatcher.dispatch(KeyEvent(key=Key.ARROW_DOWN.value))
        assert dispatcher.dispatch(event)
        await dispatcher.last_copy

    asyncio.run(scenario())

    assert clipboard.writes == ["(585) 282-6396"]


@pytest.mark.parametrize(
    "event",
    [
        KeyEvent(key="c"),
        KeyEvent(key="v", ctrl=True),
        KeyEvent(key=Key.ARROW_LEFT.value),
        KeyEvent(key=Key.ENTER.value),
        KeyEvent(key="5"),
    ],
)
def test_other_keys_are_left_to_the_caller(dispatcher: KeyDispatcher, clipboard, event: KeyEvent) -> None:
    assert not dispatcher.dispatch(event)
    assert dispatcher.controller.cursor == 0
    assert clipboard.writes == []


def test_click_selects_and_copies(dispatcher: KeyDispatcher, clipboard) -> None:
    async def scenario():
        await dispatcher.dispatch_click(3)

    asyncio.run(scenario())

    assert dispatcher.controller.cursor == 3
    assert clipboard.writes == ["585.282.6396"]


def test_printable_detection() -> None:
    assert KeyEvent(key="7").is_printable
    assert not KeyEvent(key="7", ctrl=True).is_printable
    assert not KeyEvent(key=Key.BACKSPACE.value).is_printable
