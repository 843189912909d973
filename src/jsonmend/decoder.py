from __future__ import annotations

from jsonmend import config
from jsonmend.error import StrictDecodeError
from jsonmend.helpers import (
    combine_surrogates,
    is_hex_digit,
    is_high_surrogate,
    is_json_control_character,
    is_low_surrogate,
)
from jsonmend.pda import PushDownAutomata
from jsonmend.types import DecoderState, RuleSet

# backslash + marker + digits
UNICODE_TOKEN_LENGTH = 6


class EscapeDecoder:
    r"""
    Permissive decoder for backslash escapes found in arbitrary text, such as
    strings copied from logs, source code or re-serialized JSON.

    Characters are pushed one at a time. The raw characters of an escape token
    stay on the automaton stack until the token is complete. An unknown or
    truncated token is released unchanged and the character that broke it is
    scanned again. Decoded output is never re-scanned, so ``\\n`` yields a
    backslash followed by ``n``.
    """

    base_escape_map = {
        '"': '"',
        "'": "'",
        "\\": "\\",
        "n": "\n",
        "r": "\r",
        "t": "\t",
        "b": "\b",
        "f": "\f",
    }
    extended_escape_map = {
        "v": "\v",
        "0": "\0",
    }
    hex_widths = {
        "u": 4,
        "x": 2,
    }

    def __init__(
        self,
        rule_set: RuleSet = RuleSet.PARSE_ESCAPE_SEQUENCES,
        pair_surrogates: bool | None = None,
    ) -> None:
        self.rule_set = rule_set
        self.escape_map = dict(self.base_escape_map)
        if rule_set is RuleSet.PARSE_ESCAPE_SEQUENCES:
            self.escape_map.update(self.extended_escape_map)
        self.pair_surrogates = (
            config.PAIR_SURROGATES if pair_surrogates is None else pair_surrogates
        )
        self._pda = PushDownAutomata[str, DecoderState](DecoderState.LITERAL)
        self._buffer = ""
        self._hex_width = 0
        self._high_surrogate: int | None = None

    def push(self, ch: str) -> str | None:
        state = self._pda.state

        if state is DecoderState.HEX_DIGITS:
            if not is_hex_digit(ch):
                return self._release_token(ch)
            self._pda.push(ch)
            if self._pda.depth < 2 + self._hex_width:
                return None
            digits = "".join(self._pda.drain()[2:])
            self._pda.set_state(DecoderState.LITERAL)
            return self._emit_code_unit(int(digits, 16))

        if state is DecoderState.ESCAPE:
            if ch in self.escape_map:
                self._pda.drain()
                self._pda.set_state(DecoderState.LITERAL)
                return self._emit(self.escape_map[ch])
            if ch in self.hex_widths:
                self._pda.push(ch)
                self._hex_width = self.hex_widths[ch]
                self._pda.set_state(DecoderState.HEX_DIGITS)
                return None
            return self._release_token(ch)

        if ch == "\\":
            self._pda.push(ch)
            self._pda.set_state(DecoderState.ESCAPE)
            return None
        return self._emit(ch)

    def flush(self) -> str:
        """Release whatever is still pending once the input has ended."""
        released = self._release_high_surrogate()
        pending = "".join(self._pda.drain())
        self._pda.set_state(DecoderState.LITERAL)
        self._buffer += pending
        return released + pending

    def decode(self, text: str) -> str:
        self.reset()
        for ch in text:
            self.push(ch)
        self.flush()
        return self._buffer

    def reset(self) -> None:
        self._pda.reset()
        self._buffer = ""
        self._hex_width = 0
        self._high_surrogate = None

    @property
    def buffer(self) -> str:
        return self._buffer

    def _release_token(self, ch: str) -> str:
        released = self._emit("".join(self._pda.drain()))
        self._pda.set_state(DecoderState.LITERAL)
        following = self.push(ch)
        return released + (following or "")

    def _emit_code_unit(self, code_unit: int) -> str | None:
        if not self.pair_surrogates:
            return self._emit(chr(code_unit))
        if self._high_surrogate is not None and is_low_surrogate(code_unit):
            combined = combine_surrogates(self._high_surrogate, code_unit)
            self._high_surrogate = None
            return self._emit(chr(combined))
        if is_high_surrogate(code_unit):
            # Held back until we know whether a low surrogate follows
            released = self._release_high_surrogate()
            self._high_surrogate = code_unit
            return released or None
        return self._emit(chr(code_unit))

    def _release_high_surrogate(self) -> str:
        if self._high_surrogate is None:
            return ""
        released = chr(self._high_surrogate)
        self._high_surrogate = None
        self._buffer += released
        return released

    def _emit(self, text: str) -> str:
        released = self._release_high_surrogate()
        self._buffer += text
        return released + text


class JsonStringDecoder:
    r"""
    Strict decoder for the body of a double-quoted JSON string literal.
    Handles \", \\, \/, \b, \f, \n, \r, \t and \uXXXX escapes, recombining
    surrogate pairs. Anything the JSON grammar rejects raises StrictDecodeError.
    """

    escape_map = {
        '"': '"',
        "\\": "\\",
        "/": "/",
        "b": "\b",
        "f": "\f",
        "n": "\n",
        "r": "\r",
        "t": "\t",
    }

    def __init__(self) -> None:
        self._pda = PushDownAutomata[str, DecoderState](DecoderState.LITERAL)
        self._buffer = ""
        self._position = 0
        self.high_surrogate: int | None = None

    def push(self, ch: str) -> str | None:
        position = self._position
        self._position += 1
        state = self._pda.state

        if state is DecoderState.HEX_DIGITS:
            if not is_hex_digit(ch):
                raise StrictDecodeError(
                    position, f"invalid hex digit '{ch}' in unicode escape"
                )
            self._pda.push(ch)
            if self._pda.depth < UNICODE_TOKEN_LENGTH:
                return None
            code_unit = int("".join(self._pda.drain()[2:]), 16)
            self._pda.set_state(DecoderState.LITERAL)
            return self._emit_code_unit(code_unit, position)

        if state is DecoderState.ESCAPE:
            if ch == "u":
                self._pda.push(ch)
                self._pda.set_state(DecoderState.HEX_DIGITS)
                return None
            if self.high_surrogate is not None:
                raise self._unpaired_high_surrogate(position)
            if ch not in self.escape_map:
                raise StrictDecodeError(position, f"invalid escape sequence '\\{ch}'")
            self._pda.drain()
            self._pda.set_state(DecoderState.LITERAL)
            return self._emit(self.escape_map[ch])

        if self.high_surrogate is not None and ch != "\\":
            raise self._unpaired_high_surrogate(position)
        if ch == "\\":
            self._pda.push(ch)
            self._pda.set_state(DecoderState.ESCAPE)
            return None
        if ch == '"':
            raise StrictDecodeError(position, "unescaped quote")
        if is_json_control_character(ch):
            raise StrictDecodeError(
                position, f"unescaped control character {ord(ch):#04x}"
            )
        return self._emit(ch)

    def flush(self) -> str:
        if self._pda.depth:
            raise StrictDecodeError(self._position, "unterminated escape sequence")
        if self.high_surrogate is not None:
            raise self._unpaired_high_surrogate(self._position)
        return ""

    def decode(self, text: str) -> str:
        self.reset()
        for ch in text:
            self.push(ch)
        self.flush()
        return self._buffer

    def reset(self) -> None:
        self._pda.reset()
        self._buffer = ""
        self._position = 0
        self.high_surrogate = None

    @property
    def buffer(self) -> str:
        return self._buffer

    def _emit_code_unit(self, code_unit: int, position: int) -> str | None:
        if self.high_surrogate is not None:
            if not is_low_surrogate(code_unit):
                raise StrictDecodeError(
                    position,
                    f"invalid low surrogate {code_unit:#06x} after high surrogate {self.high_surrogate:#06x}",
                )
            combined = combine_surrogates(self.high_surrogate, code_unit)
            self.high_surrogate = None
            return self._emit(chr(combined))
        if is_high_surrogate(code_unit):
            self.high_surrogate = code_unit
            return None
        if is_low_surrogate(code_unit):
            raise StrictDecodeError(position, f"unpaired low surrogate {code_unit:#06x}")
        return self._emit(chr(code_unit))

    def _unpaired_high_surrogate(self, position: int) -> StrictDecodeError:
        return StrictDecodeError(
            position, f"unpaired high surrogate {self.high_surrogate:#06x}"
        )

    def _emit(self, text: str) -> str:
        self._buffer += text
        return text


def decode(
    text: str,
    rule_set: RuleSet = RuleSet.PARSE_ESCAPE_SEQUENCES,
    *,
    pair_surrogates: bool | None = None,
) -> str:
    return EscapeDecoder(rule_set, pair_surrogates=pair_surrogates).decode(text)


def unescape(text: str, *, pair_surrogates: bool | None = None) -> str:
    return decode(text, RuleSet.UNESCAPE, pair_surrogates=pair_surrogates)


def parse_escape_sequences(text: str, *, pair_surrogates: bool | None = None) -> str:
    return decode(
        text, RuleSet.PARSE_ESCAPE_SEQUENCES, pair_surrogates=pair_surrogates
    )


def strict_decode(text: str) -> str:
    return JsonStringDecoder().decode(text)
