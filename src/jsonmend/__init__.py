from jsonmend.decoder import (
    EscapeDecoder,
    JsonStringDecoder,
    decode,
    parse_escape_sequences,
    unescape,
)
from jsonmend.error import EmptyInputError, StrictDecodeError
from jsonmend.operations import OperationResult, run_operation
from jsonmend.stream import decode_stream
from jsonmend.types import Operation, QuoteWrapper, RuleSet, Severity
from jsonmend.unwrapper import advanced_unescape

__all__ = [
    "EmptyInputError",
    "EscapeDecoder",
    "JsonStringDecoder",
    "Operation",
    "OperationResult",
    "QuoteWrapper",
    "RuleSet",
    "Severity",
    "StrictDecodeError",
    "advanced_unescape",
    "decode",
    "decode_stream",
    "parse_escape_sequences",
    "run_operation",
    "unescape",
]
