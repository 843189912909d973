from __future__ import annotations

from typing import Dict, TypeAlias

from pydantic import BaseModel, ConfigDict

from jsonmend import config
from jsonmend.error import UnsupportedLanguageError
from jsonmend.types import Language, Severity

Catalog: TypeAlias = Dict[str, str]

CATALOGS: Dict[Language, Catalog] = {
    Language.EN: {
        "title": "JSON Repair",
        "empty-input": "Please enter some content first.",
        "empty-json-input": "Please enter some JSON to repair.",
        "parse-escape-done": "Escape sequences parsed!",
        "unescape-done": "Escape characters processed!",
        "advanced-unescape-done": "Advanced unescape complete!",
        "repair-done": "JSON repaired successfully!",
        "repair-error": "Error: {error}",
        "unexpected-error": "Unexpected error: {error}",
        "parse-escapes-help": "Convert \\n, \\t, \\v, \\0 and other escape sequences to actual characters",
        "unescape-help": "Handle common escape characters like \\\", \\n, \\t, etc.",
        "advanced-unescape-help": "Advanced escape processing for JSON strings copied with surrounding quotes",
        "repair-help": "Repair malformed JSON, reporting errors",
        "must-repair-help": "Repair malformed JSON on a best-effort basis",
    },
    Language.ZH: {
        "title": "JSON 在线修复工具",
        "empty-input": "请先输入一些内容。",
        "empty-json-input": "请输入需要修复的 JSON。",
        "parse-escape-done": "转义序列解析完成!",
        "unescape-done": "转义字符处理完成!",
        "advanced-unescape-done": "高级转义处理完成!",
        "repair-done": "JSON 修复成功!",
        "repair-error": "错误: {error}",
        "unexpected-error": "意外错误: {error}",
        "parse-escapes-help": "将 \\n, \\t 等转义序列转换为实际字符",
        "unescape-help": "处理常见转义字符如 \\\", \\n, \\t 等",
        "advanced-unescape-help": "高级转义处理，适用于从引号包围的JSON字符串",
        "repair-help": "修复 JSON",
        "must-repair-help": "强制修复 JSON",
    },
}


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    severity: Severity = Severity.INFO


class Localizer:
    """Looks up user-facing text for one language. Passed explicitly, never global."""

    def __init__(self, language: Language | str | None = None) -> None:
        self.language = resolve_language(
            config.DEFAULT_LANGUAGE if language is None else language
        )

    def text(self, key: str, **params: str) -> str:
        template = CATALOGS[self.language].get(key)
        if template is None:
            # English is the complete catalog
            template = CATALOGS[Language.EN][key]
        return template.format(**params)

    def message(self, key: str, severity: Severity, **params: str) -> Message:
        return Message(text=self.text(key, **params), severity=severity)


def resolve_language(language: Language | str) -> Language:
    if isinstance(language, Language):
        return language
    try:
        return Language(language.strip().lower())
    except ValueError:
        raise UnsupportedLanguageError(
            language, [lang.value for lang in Language]
        ) from None
