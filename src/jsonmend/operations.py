"""User-facing operations.

Each operation validates its input, runs the core transformation and reports
the outcome as a single localized message with a severity, mirroring what the
browser tool shows in its message banner.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from jsonmend.decoder import parse_escape_sequences, unescape
from jsonmend.helpers import is_blank
from jsonmend.messages import Localizer, Message
from jsonmend.repair import JsonRepairModule, RepairOutcome, pretty_print
from jsonmend.types import IRepairModule, Operation, Severity
from jsonmend.unwrapper import advanced_unescape

logger = logging.getLogger(__name__)


class OperationResult(BaseModel):
    operation: Operation
    output: str | None
    message: Message

    @property
    def ok(self) -> bool:
        return self.message.severity is not Severity.ERROR


def run_parse_escapes(text: str, localizer: Localizer) -> OperationResult:
    if is_blank(text):
        return _rejected(Operation.PARSE_ESCAPES, localizer, "empty-input")
    return OperationResult(
        operation=Operation.PARSE_ESCAPES,
        output=parse_escape_sequences(text),
        message=localizer.message("parse-escape-done", Severity.SUCCESS),
    )


def run_unescape(text: str, localizer: Localizer) -> OperationResult:
    if is_blank(text):
        return _rejected(Operation.UNESCAPE, localizer, "empty-input")
    return OperationResult(
        operation=Operation.UNESCAPE,
        output=unescape(text),
        message=localizer.message("unescape-done", Severity.SUCCESS),
    )


def run_advanced_unescape(text: str, localizer: Localizer) -> OperationResult:
    if is_blank(text):
        return _rejected(Operation.ADVANCED_UNESCAPE, localizer, "empty-input")
    return OperationResult(
        operation=Operation.ADVANCED_UNESCAPE,
        output=advanced_unescape(text),
        message=localizer.message("advanced-unescape-done", Severity.SUCCESS),
    )


def run_repair(
    text: str,
    localizer: Localizer,
    repair_module: IRepairModule,
    must: bool = False,
) -> OperationResult:
    operation = Operation.MUST_REPAIR if must else Operation.REPAIR
    trimmed = text.strip()
    if not trimmed:
        return _rejected(operation, localizer, "empty-json-input")

    try:
        outcome: RepairOutcome = (
            repair_module.must_repair(trimmed) if must else repair_module.repair(trimmed)
        )
    except Exception as e:
        logger.exception("Repair module raised during %s", operation.value)
        return OperationResult(
            operation=operation,
            output=None,
            message=localizer.message("unexpected-error", Severity.ERROR, error=str(e)),
        )

    if outcome.error is not None:
        return OperationResult(
            operation=operation,
            output="",
            message=localizer.message("repair-error", Severity.ERROR, error=outcome.error),
        )
    return OperationResult(
        operation=operation,
        output=pretty_print(outcome.result or ""),
        message=localizer.message("repair-done", Severity.SUCCESS),
    )


def run_operation(
    operation: Operation,
    text: str,
    localizer: Localizer | None = None,
    repair_module: IRepairModule | None = None,
) -> OperationResult:
    localizer = localizer or Localizer()
    if operation is Operation.PARSE_ESCAPES:
        return run_parse_escapes(text, localizer)
    if operation is Operation.UNESCAPE:
        return run_unescape(text, localizer)
    if operation is Operation.ADVANCED_UNESCAPE:
        return run_advanced_unescape(text, localizer)
    return run_repair(
        text,
        localizer,
        repair_module or JsonRepairModule(),
        must=operation is Operation.MUST_REPAIR,
    )


def _rejected(operation: Operation, localizer: Localizer, key: str) -> OperationResult:
    logger.info("Rejected empty input for %s", operation.value)
    return OperationResult(
        operation=operation,
        output=None,
        message=localizer.message(key, Severity.ERROR),
    )
