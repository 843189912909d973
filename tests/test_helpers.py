import pytest

from jsonmend.helpers import (
    combine_surrogates,
    is_blank,
    is_hex_digit,
    is_high_surrogate,
    is_json_control_character,
    is_low_surrogate,
)


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("0", True),
        ("9", True),
        ("a", True),
        ("F", True),
        ("g", False),
        ("G", False),
        (" ", False),
        ("\\", False),
        ("٣", False),
    ],
)
def test_is_hex_digit(ch: str, expected: bool):
    assert is_hex_digit(ch) is expected


@pytest.mark.parametrize(
    "code_unit,high,low",
    [
        (0xD7FF, False, False),
        (0xD800, True, False),
        (0xDBFF, True, False),
        (0xDC00, False, True),
        (0xDFFF, False, True),
        (0xE000, False, False),
        (0x0041, False, False),
    ],
)
def test_surrogate_ranges(code_unit: int, high: bool, low: bool):
    assert is_high_surrogate(code_unit) is high
    assert is_low_surrogate(code_unit) is low


@pytest.mark.parametrize(
    "high,low,expected",
    [
        (0xD83D, 0xDE00, 0x1F600),
        (0xD800, 0xDC00, 0x10000),
        (0xDBFF, 0xDFFF, 0x10FFFF),
    ],
)
def test_combine_surrogates(high: int, low: int, expected: int):
    assert combine_surrogates(high, low) == expected


@pytest.mark.parametrize(
    "high,low",
    [
        (0x0041, 0xDE00),
        (0xD83D, 0x0041),
        (0xDE00, 0xD83D),
    ],
)
def test_combine_surrogates__rejects_non_surrogates(high: int, low: int):
    with pytest.raises(ValueError):
        combine_surrogates(high, low)


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("\x00", True),
        ("\n", True),
        ("\x1f", True),
        (" ", False),
        ("a", False),
        ("\x7f", False),
    ],
)
def test_is_json_control_character(ch: str, expected: bool):
    assert is_json_control_character(ch) is expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", True),
        ("   ", True),
        ("\n\t ", True),
        (" a ", False),
        ("\\", False),
    ],
)
def test_is_blank(text: str, expected: bool):
    assert is_blank(text) is expected
