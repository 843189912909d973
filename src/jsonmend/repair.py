from __future__ import annotations

import json
import logging
from typing import Self

from json_repair import repair_json
from pydantic import BaseModel, model_validator

from jsonmend import config

logger = logging.getLogger(__name__)


class RepairOutcome(BaseModel):
    result: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one_field(self) -> Self:
        if (self.result is None) == (self.error is None):
            raise ValueError("RepairOutcome must carry exactly one of 'result' or 'error'.")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class JsonRepairModule:
    """Adapter exposing the `json_repair` package as an IRepairModule."""

    def __init__(self, ensure_ascii: bool = False) -> None:
        self.ensure_ascii = ensure_ascii

    def repair(self, text: str) -> RepairOutcome:
        try:
            repaired = repair_json(text, ensure_ascii=self.ensure_ascii)
        except (ValueError, RecursionError) as e:
            logger.warning("json_repair failed: %s", e)
            return RepairOutcome(error=str(e))
        if not repaired and text.strip():
            logger.warning("json_repair produced no output for %d chars of input", len(text))
            return RepairOutcome(error="Unable to repair input")
        return RepairOutcome(result=repaired)

    def must_repair(self, text: str) -> RepairOutcome:
        repaired = repair_json(text, ensure_ascii=self.ensure_ascii)
        return RepairOutcome(result=repaired)


def pretty_print(text: str, indent: int | None = None) -> str:
    """Re-indent `text` when it is valid JSON, otherwise return it unchanged."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return text
    return json.dumps(
        parsed,
        indent=config.PRETTY_INDENT if indent is None else indent,
        ensure_ascii=False,
    )
