HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF


def is_hex_digit(ch: str) -> bool:
    return ch in HEX_DIGITS


def is_high_surrogate(code_unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= code_unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(code_unit: int) -> bool:
    return LOW_SURROGATE_MIN <= code_unit <= LOW_SURROGATE_MAX


def combine_surrogates(high: int, low: int) -> int:
    if not is_high_surrogate(high):
        raise ValueError(f"{high:#06x} is not a high surrogate.")
    if not is_low_surrogate(low):
        raise ValueError(f"{low:#06x} is not a low surrogate.")
    return 0x10000 + ((high - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)


def is_json_control_character(ch: str) -> bool:
    return ord(ch) < 0x20


def is_blank(text: str) -> bool:
    return not text.strip()
