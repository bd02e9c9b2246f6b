"""
Localized message lookup.

Messages are stored per locale in JSON catalogs under tag_api/locales,
named ``messages_<locale>.json``. Placeholders are positional: ``{0}``.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from tag_api.config import get_settings

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


def load_catalogs(locales: list[str], directory: Path = LOCALES_DIR) -> dict[str, dict[str, str]]:
    """
    Load message catalogs for the given locales.

    Raises:
        FileNotFoundError: If a catalog for a requested locale is missing
    """
    catalogs = {}
    for locale in locales:
        path = directory / f"messages_{locale}.json"
        with path.open(encoding="utf-8") as f:
            catalogs[locale] = json.load(f)
        logger.debug(f"Loaded {len(catalogs[locale])} messages for locale '{locale}'")
    return catalogs


def resolve_locale(accept_language: str | None, supported: list[str], default: str) -> str:
    """
    Pick the best supported locale from an Accept-Language header.

    Language ranges are ranked by their q weight; region subtags are
    ignored, so ``ru-RU`` matches ``ru``. Falls back to ``default``.
    """
    if not accept_language:
        return default

    candidates: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0].lower()
        if not tag:
            continue
        weight = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    weight = float(param[2:])
                except ValueError:
                    weight = 0.0
        if weight <= 0:
            continue
        candidates.append((-weight, position, tag))

    for _, _, tag in sorted(candidates):
        if tag == "*":
            return default
        language = tag.split("-")[0]
        if language in supported:
            return language
    return default


class LocaleService:
    """Resolves message keys to text in a given locale."""

    def __init__(self, catalogs: dict[str, dict[str, str]], default_locale: str):
        if default_locale not in catalogs:
            raise ValueError(f"No catalog for default locale '{default_locale}'")
        self.catalogs = catalogs
        self.default_locale = default_locale

    def get_message(self, key: str, *args: Any, locale: str | None = None) -> str:
        """
        Get the message for ``key`` formatted with ``args``.

        Falls back to the default locale, then to the key itself.
        """
        catalog = self.catalogs.get(locale or self.default_locale, {})
        template = catalog.get(key)
        if template is None:
            template = self.catalogs[self.default_locale].get(key)
        if template is None:
            logger.warning(f"Missing message for key '{key}' (locale={locale})")
            return key
        return template.format(*args) if args else template


@lru_cache
def get_locale_service() -> LocaleService:
    """Get the process-wide LocaleService built from settings."""
    settings = get_settings()
    return LocaleService(
        catalogs=load_catalogs(settings.SUPPORTED_LOCALES),
        default_locale=settings.DEFAULT_LOCALE,
    )
