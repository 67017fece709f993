"""
I18n Service for LocaleKit.

Request-facing layer on top of the locale registry (src/i18n/constants.py)
and the translator (src/i18n/translator.py).

Features:
- Locale negotiation from Accept-Language headers (via Babel)
- Locale descriptions for UI pickers (display string, font, direction, grouping)
- Translation with an explicit locale
- Startup bootstrap from Settings (translations dir, initial locale)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from babel import negotiate_locale as babel_negotiate_locale

from src.config.settings import Settings
from src.i18n.constants import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    get_font_family,
    get_language_family,
    get_locale_display_string,
    get_locale_group,
    get_locale_info,
    get_locale_region,
    get_text_direction,
)
from src.i18n.translator import Translator, get_translator
from src.i18n.types import LocaleCode

logger = logging.getLogger(__name__)

# Lower-cased code -> canonical code, for normalising negotiated results
_CANONICAL_CODES: dict[str, LocaleCode] = {info.code.lower(): info.code for info in SUPPORTED_LOCALES}

# Script and region tags that should map onto the Chinese locales we ship.
# Keys are lower-case, as Babel compares aliases case-insensitively.
_LOCALE_ALIASES: dict[str, str] = {
    "zh": "zh-CN",
    "zh-hans": "zh-CN",
    "zh-sg": "zh-CN",
    "zh-hant": "zh-TW",
    "zh-hk": "zh-TW",
    "zh-mo": "zh-TW",
}


def parse_accept_language(header: str | None) -> list[str]:
    """
    Parse an Accept-Language header into language tags, best first.

    Entries are ordered by q-weight; equal weights keep header order. Entries
    with q=0 or a malformed weight are dropped, as is the "*" wildcard.

    Example:
        >>> parse_accept_language("fr-CA;q=0.8, de, en;q=0.5")
        ['de', 'fr-CA', 'en']
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag))

    return [tag for _, _, tag in sorted(weighted)]


class I18nService:
    """
    Internationalization service for LocaleKit.

    Handles:
    - Locale negotiation from user preferences
    - Locale descriptions for UIs
    - Translation string retrieval with fallback
    """

    def __init__(self, translator: Translator | None = None) -> None:
        """Initialize the service around a translator (default: process-wide one)."""
        self._translator = translator if translator is not None else get_translator()

    @property
    def translator(self) -> Translator:
        return self._translator

    def negotiate_locale(self, preferred: Iterable[str]) -> LocaleCode:
        """
        Pick the best supported locale for a list of preferred tags.

        Matching is case-insensitive and falls back from region to language
        ("pt-PT" -> "pt") and through script aliases ("zh-HK" -> "zh-TW").

        Args:
            preferred: Locale tags, best first (e.g. ["fr-CA", "en"])

        Returns:
            Canonical supported code, or DEFAULT_LOCALE if nothing matches
        """
        preferred = [tag for tag in preferred if tag]
        match = babel_negotiate_locale(
            preferred, list(_CANONICAL_CODES.values()), sep="-", aliases=_LOCALE_ALIASES,
        )
        if match is not None:
            canonical = _CANONICAL_CODES.get(match.lower())
            if canonical is not None:
                return canonical

        logger.debug("No supported locale in %s, falling back to '%s'", preferred, DEFAULT_LOCALE)
        return DEFAULT_LOCALE

    def detect_locale_from_header(self, accept_language: str | None) -> LocaleCode:
        """
        Detect the user's locale from an Accept-Language header.

        Args:
            accept_language: Raw header value (e.g. "de-DE,de;q=0.9,en;q=0.8")

        Returns:
            Supported locale code, or DEFAULT_LOCALE if none is acceptable
        """
        return self.negotiate_locale(parse_accept_language(accept_language))

    def describe_locale(self, code: str, include_flag: bool = True) -> dict[str, Any] | None:
        """
        Describe a locale for UI pickers.

        Args:
            code: Locale code
            include_flag: Prefix the display string with the flag emoji

        Returns:
            Dict with registry info plus display, font and grouping data,
            or None if the code is not supported
        """
        info = get_locale_info(code)
        if info is None:
            return None

        region = get_locale_region(info.code)
        return {
            "code": info.code,
            "native_name": info.native_name,
            "english_name": info.english_name,
            "flag": info.flag,
            "display": get_locale_display_string(info.code, include_flag=include_flag),
            "font_family": get_font_family(info.code),
            "direction": get_text_direction(info.code),
            "family": get_language_family(info.code),
            "region": region.value if region is not None else None,
            "group": list(get_locale_group(info.code)),
        }

    def translate(self, locale: str, key: str, **kwargs: Any) -> str:
        """
        Get a translated string for an explicit locale.

        Args:
            locale: Locale code
            key: Dotted translation key
            **kwargs: Optional format variables

        Returns:
            Translated string, or DEFAULT_LOCALE fallback, or the key itself
        """
        return self._translator.t(key, locale, **kwargs)

    def configure(self, settings: Settings) -> None:
        """
        Apply startup settings: load the translations dir and set the locale.

        Raises:
            TranslationLoadError: If a translation file is malformed
        """
        if settings.translations_dir is not None:
            loaded = self._translator.load_translations_dir(settings.translations_dir)
            logger.info(
                "Loaded translation files for %d locales from %s",
                len(loaded),
                settings.translations_dir,
            )
        self._translator.set_locale(settings.initial_locale)


# Singleton instance
_i18n_service: I18nService | None = None


def get_i18n_service() -> I18nService:
    """
    Get the singleton I18nService instance.

    Returns:
        I18nService instance
    """
    global _i18n_service
    if _i18n_service is None:
        _i18n_service = I18nService()
    return _i18n_service


__all__ = [
    "I18nService",
    "get_i18n_service",
    "parse_accept_language",
]
