from __future__ import annotations

import phonenumbers
import pytest

from numformat.models import FormatVariant
from numformat.services import PhoneFormatter, format_number
from numformat.utils import group_dotted, strip_non_digits

VALID = "5852826396"


def test_valid_number_yields_all_four_formats() -> None:
    formats = format_number(VALID)

    assert formats.keys() == ["international", "national", "e164", "internationalWithDots"]
    assert formats.get(FormatVariant.INTERNATIONAL) == "+1 585-282-6396"
    assert formats.get(FormatVariant.NATIONAL) == "(585) 282-6396"
    assert formats.get(FormatVariant.E164) == "+15852826396"
    assert formats.get(FormatVariant.INTERNATIONAL_WITH_DOTS) == "585.282.6396"


@pytest.mark.parametrize(
    "raw",
    ["(585) 282-6396", "585.282.6396", "+1 585 282 6396", "1-585-282-6396", "  5852826396  "],
)
def test_punctuation_and_country_prefix_do_not_matter(raw: str) -> None:
    assert format_number(raw).as_dict() == format_number(VALID).as_dict()


@pytest.mark.parametrize("raw", ["", "abc", "123", "555", "+", "5" * 300, "(585) 282-63"])
def test_invalid_input_is_empty_not_an_error(raw: str) -> None:
    formats = format_number(raw)

    assert formats.is_empty
    assert len(formats) == 0
    assert formats.as_dict() == {}


def test_formatting_is_deterministic() -> None:
    for raw in (VALID, "abc", "6502530000", ""):
        assert format_number(raw) == format_number(raw)


@pytest.mark.parametrize("raw", [VALID, "6502530000", "abc", "2015550123", "0000000000", "+19999999999"])
def test_non_empty_exactly_when_library_says_valid(raw: str) -> None:
    try:
        valid = phonenumbers.is_valid_number(phonenumbers.parse(raw, "US"))
    except phonenumbers.NumberParseException:
        valid = False

    assert (not format_number(raw).is_empty) == valid


def test_dotted_rendering_groups_national_digits() -> None:
    assert PhoneFormatter.format_dotted("(650) 253-0000") == "650.253.0000"
    assert group_dotted("5852826396") == "585.282.6396"


def test_dotted_rendering_falls_back_to_plain_digits() -> None:
    assert PhoneFormatter.format_dotted("(585) 282-6396 ext. 12") == "585282639612"
    assert group_dotted("12345") == "12345"


def test_strip_non_digits() -> None:
    assert strip_non_digits("(585) 282-6396") == "5852826396"
    assert strip_non_digits("") == ""
