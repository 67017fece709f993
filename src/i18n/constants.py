"""
Locale Registry for LocaleKit.

Static, ordered table of supported locales plus the lookup, grouping and
formatting helpers built on top of it. Everything here is constructed once at
import time and never mutated afterwards, so it is safe to share between any
number of readers.

None of the helpers raise for an unknown locale code. Each one degrades to a
documented fallback instead: the raw code, the default locale's value, or a
singleton group.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import TypeGuard

from src.i18n.types import LocaleCode, LocaleInfo, TextDirection

# =============================================================================
# Registry
# =============================================================================

SUPPORTED_LOCALES: tuple[LocaleInfo, ...] = (
    LocaleInfo(code="en", native_name="English", english_name="English", flag="🇺🇸"),
    LocaleInfo(code="zh-CN", native_name="简体中文", english_name="Simplified Chinese", flag="🇨🇳"),
    LocaleInfo(code="zh-TW", native_name="繁體中文", english_name="Traditional Chinese", flag="🇹🇼"),
    LocaleInfo(code="ja", native_name="日本語", english_name="Japanese", flag="🇯🇵"),
    LocaleInfo(code="ko", native_name="한국어", english_name="Korean", flag="🇰🇷"),
    LocaleInfo(code="de", native_name="Deutsch", english_name="German", flag="🇩🇪"),
    LocaleInfo(code="fr", native_name="Français", english_name="French", flag="🇫🇷"),
    LocaleInfo(code="es", native_name="Español", english_name="Spanish", flag="🇪🇸"),
    LocaleInfo(code="ru", native_name="Русский", english_name="Russian", flag="🇷🇺"),
    LocaleInfo(code="pt", native_name="Português", english_name="Portuguese", flag="🇧🇷"),
)

DEFAULT_LOCALE: LocaleCode = "en"

_CODES: frozenset[str] = frozenset(info.code for info in SUPPORTED_LOCALES)


# =============================================================================
# Grouping tables
# =============================================================================


class Region(StrEnum):
    """Coarse world region a locale is primarily used in."""

    AMERICA = "AMERICA"
    ASIA = "ASIA"
    EUROPE = "EUROPE"


# Language family grouping (for future features)
LANGUAGE_FAMILIES: Mapping[str, tuple[LocaleCode, ...]] = MappingProxyType({
    "GERMANIC": ("en", "de"),
    "ROMANCE": ("fr", "es", "pt"),
    "SLAVIC": ("ru",),
    "ASIAN": ("zh-CN", "zh-TW", "ja", "ko"),
})

LOCALE_REGIONS: Mapping[LocaleCode, Region] = MappingProxyType({
    "en": Region.AMERICA,
    "zh-CN": Region.ASIA,
    "zh-TW": Region.ASIA,
    "ja": Region.ASIA,
    "ko": Region.ASIA,
    "de": Region.EUROPE,
    "fr": Region.EUROPE,
    "es": Region.AMERICA,
    "ru": Region.EUROPE,
    "pt": Region.AMERICA,
})

# Locale grouping for batch operations. Declaration order matters:
# get_locale_group() resolves a code to the first bucket that lists it.
LOCALE_GROUPS: Mapping[str, tuple[LocaleCode, ...]] = MappingProxyType({
    "ALL": tuple(info.code for info in SUPPORTED_LOCALES),
    "ASIAN": ("zh-CN", "zh-TW", "ja", "ko"),
    "EUROPEAN": ("de", "fr", "ru", "pt"),
    "ENGLISH_BASED": ("en",),
    "SPANISH_PORTUGUESE": ("es", "pt"),
})

# ALL selects every locale for batch jobs; it is never a categorisation result.
_BATCH_ONLY_GROUPS: frozenset[str] = frozenset({"ALL"})


# =============================================================================
# Common translation keys
# =============================================================================


class CommonKey(StrEnum):
    """Translation keys for UI elements shared across the application."""

    # Buttons
    SAVE = "common.save"
    CANCEL = "common.cancel"
    DELETE = "common.delete"
    EDIT = "common.edit"
    ADD = "common.add"
    REMOVE = "common.remove"

    # Status
    LOADING = "common.loading"
    ERROR = "common.error"
    SUCCESS = "common.success"
    WARNING = "common.warning"

    # UI
    SETTINGS = "common.settings"
    ADVANCED = "common.advanced"
    ENABLED = "common.enabled"
    DISABLED = "common.disabled"

    # Actions
    CONFIRM = "common.confirm"
    CLEAR = "common.clear"
    RESET = "common.reset"


COMMON_KEYS = CommonKey


# =============================================================================
# Fonts and text direction
# =============================================================================

_LATIN_FONT_STACK = "ui-sans-serif, system-ui, -apple-system, BlinkMacSystemFont"

_FONT_FAMILIES: Mapping[str, str] = MappingProxyType({
    "en": _LATIN_FONT_STACK,
    "zh-CN": 'system-ui, -apple-system, "Microsoft YaHei", "PingFang SC", sans-serif',
    "zh-TW": 'system-ui, -apple-system, "Microsoft JhengHei", "PingFang TC", sans-serif',
    "ja": 'system-ui, -apple-system, "Hiragino Sans", "Yu Gothic", sans-serif',
    "ko": 'system-ui, -apple-system, "Apple SD Gothic Neo", "Noto Sans KR", sans-serif',
    "de": _LATIN_FONT_STACK,
    "fr": _LATIN_FONT_STACK,
    "es": _LATIN_FONT_STACK,
    "ru": _LATIN_FONT_STACK,
    "pt": _LATIN_FONT_STACK,
})

# Add RTL locales here when supported
_RTL_LOCALES: frozenset[str] = frozenset()


# =============================================================================
# Lookups
# =============================================================================


def get_locale_info(code: str) -> LocaleInfo | None:
    """
    Get locale info by code.

    Args:
        code: Locale code (e.g. "ja", "zh-CN")

    Returns:
        The matching LocaleInfo, or None if the code is not supported
    """
    for info in SUPPORTED_LOCALES:
        if info.code == code:
            return info
    return None


def get_locale_display_string(code: str, include_flag: bool = True) -> str:
    """
    Get the display string for a locale, optionally prefixed with its flag.

    Args:
        code: Locale code
        include_flag: Prefix the flag emoji when the locale has one

    Returns:
        "{flag} {native_name} ({english_name})", or the code itself if unknown

    Example:
        >>> get_locale_display_string("ja")
        '🇯🇵 日本語 (Japanese)'
        >>> get_locale_display_string("ja", include_flag=False)
        '日本語 (Japanese)'
    """
    info = get_locale_info(code)
    if info is None:
        return code

    if include_flag and info.flag:
        return f"{info.flag} {info.native_name} ({info.english_name})"
    return f"{info.native_name} ({info.english_name})"


def _collation_key(text: str) -> tuple[str, str]:
    # Accent- and case-insensitive primary key, raw text breaks ties
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def get_locales_for_dropdown() -> list[LocaleInfo]:
    """Get a new list of locales sorted by English name, for UI dropdowns."""
    return sorted(SUPPORTED_LOCALES, key=lambda info: _collation_key(info.english_name))


def is_valid_locale_code(code: str) -> TypeGuard[LocaleCode]:
    """Check if a string is one of the supported locale codes."""
    return isinstance(code, str) and code in _CODES


def is_rtl(code: str) -> bool:
    """
    Check if a locale uses right-to-left text direction.

    Currently all supported locales are LTR; the RTL set is kept for future
    expansion.
    """
    return isinstance(code, str) and code in _RTL_LOCALES


def get_text_direction(code: str) -> TextDirection:
    """Get the CSS text direction ("ltr" or "rtl") for a locale."""
    return "rtl" if is_rtl(code) else "ltr"


def get_font_family(code: str) -> str:
    """
    Get a font-family suggestion that renders the locale's script properly.

    Unknown codes fall back to the default locale's font stack.
    """
    if isinstance(code, str) and code in _FONT_FAMILIES:
        return _FONT_FAMILIES[code]
    return _FONT_FAMILIES[DEFAULT_LOCALE]


def get_locale_group(code: str) -> tuple[str, ...]:
    """
    Get the batch-operation group a locale belongs to.

    Buckets are checked in declaration order, so a code listed in several
    buckets resolves to the first one ("pt" -> EUROPEAN).

    Args:
        code: Locale code

    Returns:
        The first bucket containing the code, or a singleton (code,) if none does
    """
    for name, locales in LOCALE_GROUPS.items():
        if name in _BATCH_ONLY_GROUPS:
            continue
        if code in locales:
            return locales
    return (code,)


def get_language_family(code: str) -> str | None:
    """Get the language family name (e.g. "ROMANCE") for a locale."""
    for family, locales in LANGUAGE_FAMILIES.items():
        if code in locales:
            return family
    return None


def get_locale_region(code: str) -> Region | None:
    """Get the region a locale is primarily used in."""
    if not is_valid_locale_code(code):
        return None
    return LOCALE_REGIONS.get(code)


__all__ = [
    "COMMON_KEYS",
    "CommonKey",
    "DEFAULT_LOCALE",
    "LANGUAGE_FAMILIES",
    "LOCALE_GROUPS",
    "LOCALE_REGIONS",
    "Region",
    "SUPPORTED_LOCALES",
    "get_font_family",
    "get_language_family",
    "get_locale_display_string",
    "get_locale_group",
    "get_locale_info",
    "get_locale_region",
    "get_locales_for_dropdown",
    "get_text_direction",
    "is_rtl",
    "is_valid_locale_code",
]
