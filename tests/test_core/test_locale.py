"""
Tests for message lookup and locale resolution.
"""

import pytest

from tag_api.core.locale import LocaleService, load_catalogs, resolve_locale


@pytest.fixture
def locale_service() -> LocaleService:
    return LocaleService(
        catalogs={
            "en": {"greeting": "Hello {0}", "only_en": "English only"},
            "ru": {"greeting": "Привет {0}"},
        },
        default_locale="en",
    )


def test_get_message_formats_arguments(locale_service: LocaleService):
    assert locale_service.get_message("greeting", 7) == "Hello 7"
    assert locale_service.get_message("greeting", 7, locale="ru") == "Привет 7"


def test_get_message_falls_back_to_default_locale(locale_service: LocaleService):
    assert locale_service.get_message("only_en", locale="ru") == "English only"
    assert locale_service.get_message("greeting", 1, locale="de") == "Hello 1"


def test_get_message_unknown_key_returns_key(locale_service: LocaleService):
    assert locale_service.get_message("no_such_key", locale="ru") == "no_such_key"


def test_default_locale_must_have_catalog():
    with pytest.raises(ValueError):
        LocaleService(catalogs={"ru": {}}, default_locale="en")


def test_shipped_catalogs_have_same_keys():
    catalogs = load_catalogs(["en", "ru"])

    assert set(catalogs["en"]) == set(catalogs["ru"])
    assert "tag_was_created" in catalogs["en"]


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, "en"),
        ("", "en"),
        ("ru", "ru"),
        ("ru-RU,ru;q=0.9,en;q=0.8", "ru"),
        ("de-DE,ru;q=0.5", "ru"),
        ("en;q=0.3,ru;q=0.7", "ru"),
        ("fr, de", "en"),
        ("ru;q=0", "en"),
        ("*", "en"),
    ],
)
def test_resolve_locale(header: str | None, expected: str):
    assert resolve_locale(header, ["en", "ru"], "en") == expected
