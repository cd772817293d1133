from __future__ import annotations

from numformat.interaction import Key, KeyEvent, PointerEvent
from numformat.terminal import InputDecoder, parse_input


def test_arrow_keys_in_both_encodings() -> None:
    assert parse_input(b"\x1b[A\x1b[B\x1bOA\x1bOB") == [
        KeyEvent(key=Key.ARROW_UP.value),
        KeyEvent(key=Key.ARROW_DOWN.value),
        KeyEvent(key=Key.ARROW_UP.value),
        KeyEvent(key=Key.ARROW_DOWN.value),
    ]


def test_modified_arrow_is_still_an_arrow() -> None:
    assert parse_input(b"\x1b[1;5B") == [KeyEvent(key=Key.ARROW_DOWN.value)]


def test_copy_chords() -> None:
    assert parse_input(b"\x03") == [KeyEvent(key="c", ctrl=True)]
    assert parse_input(b"\x1bc") == [KeyEvent(key="c", meta=True)]


def test_printable_text_and_editing_keys() -> None:
    assert parse_input(b"58\x7f\r") == [
        KeyEvent(key="5"),
        KeyEvent(key="8"),
        KeyEvent(key=Key.BACKSPACE.value),
        KeyEvent(key=Key.ENTER.value),
    ]


def test_lone_escape() -> None:
    assert parse_input(b"\x1b") == [KeyEvent(key=Key.ESCAPE.value)]


def test_control_letters() -> None:
    assert parse_input(b"\x04\x11\x15") == [
        KeyEvent(key="d", ctrl=True),
        KeyEvent(key="q", ctrl=True),
        KeyEvent(key="u", ctrl=True),
    ]


def test_left_click_press_only() -> None:
    events = parse_input(b"\x1b[<0;12;7M\x1b[<0;12;7m\x1b[<2;3;4M")

    assert events == [PointerEvent(column=12, row=7)]


def test_unknown_sequences_are_dropped() -> None:
    assert parse_input(b"\x1b[15~1") == [KeyEvent(key="1")]


def test_escape_split_across_reads_is_one_arrow() -> None:
    decoder = InputDecoder()

    assert decoder.feed(b"\x1b") == []
    assert decoder.pending
    assert decoder.feed(b"[B") == [KeyEvent(key=Key.ARROW_DOWN.value)]
    assert not decoder.pending


def test_unfinished_csi_waits_for_final_byte() -> None:
    decoder = InputDecoder()

    assert decoder.feed(b"\x1b[1;") == []
    assert decoder.feed(b"5A") == [KeyEvent(key=Key.ARROW_UP.value)]


def test_mouse_report_split_across_reads() -> None:
    decoder = InputDecoder()

    assert decoder.feed(b"\x1b[<0;12") == []
    assert decoder.feed(b";7M") == [PointerEvent(column=12, row=7)]


def test_held_escape_becomes_escape_on_flush() -> None:
    decoder = InputDecoder()
    decoder.feed(b"5\x1b")

    assert decoder.flush() == [KeyEvent(key=Key.ESCAPE.value)]
    assert not decoder.pending


def test_multibyte_character_split_across_reads() -> None:
    decoder = InputDecoder()
    first, second = "é".encode("utf-8")[:1], "é".encode("utf-8")[1:]

    assert decoder.feed(first) == []
    assert decoder.feed(second) == [KeyEvent(key="é")]
