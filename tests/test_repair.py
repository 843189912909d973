import json

import pytest
from pydantic import ValidationError

from jsonmend import config
from jsonmend.repair import JsonRepairModule, RepairOutcome, pretty_print
from jsonmend.types import IRepairModule


def test_repair_outcome__result():
    outcome = RepairOutcome(result="{}")
    assert outcome.ok is True
    assert outcome.error is None


def test_repair_outcome__error():
    outcome = RepairOutcome(error="boom")
    assert outcome.ok is False
    assert outcome.result is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"result": "{}", "error": "boom"},
    ],
)
def test_repair_outcome__requires_exactly_one_field(kwargs: dict):
    with pytest.raises(ValidationError):
        RepairOutcome(**kwargs)


def test_json_repair_module_is_repair_module():
    assert isinstance(JsonRepairModule(), IRepairModule)


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"a": 1,}', {"a": 1}),
        ("{'a': 'b'}", {"a": "b"}),
        ('{"a": [1, 2', {"a": [1, 2]}),
        ('{"name": "é"}', {"name": "é"}),
    ],
)
def test_json_repair_module__repair(text: str, expected: dict):
    outcome = JsonRepairModule().repair(text)
    assert outcome.ok
    assert json.loads(outcome.result) == expected


def test_json_repair_module__keeps_non_ascii():
    outcome = JsonRepairModule().must_repair('{"greeting": "你好"}')
    assert "你好" in outcome.result


@pytest.mark.parametrize(
    "text,expected",
    [
        ('{"a":1,"b":[1,2]}', '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'),
        ('{"a":"é"}', '{\n  "a": "é"\n}'),
        ("not json", "not json"),
        ("", ""),
    ],
)
def test_pretty_print(text: str, expected: str):
    assert pretty_print(text, indent=2) == expected


def test_pretty_print__indent_from_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "PRETTY_INDENT", 4)
    assert pretty_print('{"a":1}') == '{\n    "a": 1\n}'
