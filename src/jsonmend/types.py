from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from jsonmend.repair import RepairOutcome


class RuleSet(Enum):
    UNESCAPE = "unescape"
    PARSE_ESCAPE_SEQUENCES = "parse_escape_sequences"


class QuoteWrapper(Enum):
    NONE = "none"
    DOUBLE = '"'
    SINGLE = "'"


class DecoderState(Enum):
    LITERAL = "literal"
    ESCAPE = "escape"
    HEX_DIGITS = "hex_digits"


class Severity(Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Language(Enum):
    EN = "en"
    ZH = "zh"


class Operation(Enum):
    PARSE_ESCAPES = "parse-escapes"
    UNESCAPE = "unescape"
    ADVANCED_UNESCAPE = "advanced-unescape"
    REPAIR = "repair"
    MUST_REPAIR = "must-repair"


class IDecoder(Protocol):
    def push(self, ch: str) -> str | None: ...

    def flush(self) -> str: ...

    def reset(self) -> None: ...

    @property
    def buffer(self) -> str: ...


@runtime_checkable
class IDecodeStrategy(Protocol):
    name: str

    def decode(self, text: str) -> str:
        """Decode the body of a string. Strict strategies may raise."""
        ...


@runtime_checkable
class IRepairModule(Protocol):
    def repair(self, text: str) -> RepairOutcome:
        """Repair `text`, reporting failure as an outcome error."""
        ...

    def must_repair(self, text: str) -> RepairOutcome:
        """Repair `text` on a best-effort basis."""
        ...
