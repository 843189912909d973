import pytest
from pydantic import ValidationError

from jsonmend import config
from jsonmend.error import UnsupportedLanguageError
from jsonmend.messages import CATALOGS, Localizer, Message, resolve_language
from jsonmend.types import Language, Severity


def test_catalogs_share_keys():
    assert set(CATALOGS[Language.ZH]) == set(CATALOGS[Language.EN])


@pytest.mark.parametrize(
    "language,expected",
    [
        (Language.EN, "Escape sequences parsed!"),
        (Language.ZH, "转义序列解析完成!"),
        ("zh", "转义序列解析完成!"),
        (" EN ", "Escape sequences parsed!"),
    ],
)
def test_localizer_text(language, expected: str):
    assert Localizer(language).text("parse-escape-done") == expected


def test_localizer_formats_params():
    localizer = Localizer(Language.ZH)
    assert localizer.text("repair-error", error="bad") == "错误: bad"


def test_localizer_falls_back_to_english(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setitem(CATALOGS, Language.ZH, {"title": "标题"})
    localizer = Localizer(Language.ZH)
    assert localizer.text("title") == "标题"
    assert localizer.text("repair-done") == "JSON repaired successfully!"


def test_localizer_unknown_key_raises():
    with pytest.raises(KeyError):
        Localizer(Language.EN).text("no-such-key")


def test_localizer_default_language_from_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "zh")
    assert Localizer().language is Language.ZH


def test_localizer_message():
    message = Localizer(Language.EN).message("empty-input", Severity.ERROR)
    assert message == Message(text="Please enter some content first.", severity=Severity.ERROR)


@pytest.mark.parametrize("language", ["fr", "", "english"])
def test_resolve_language_rejects_unknown(language: str):
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        resolve_language(language)
    assert "en, zh" in str(exc_info.value)


def test_message_is_frozen():
    message = Message(text="hi", severity=Severity.SUCCESS)
    with pytest.raises(ValidationError):
        message.text = "bye"


def test_message_severity_defaults_to_info():
    assert Message(text="hi").severity is Severity.INFO
