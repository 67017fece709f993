"""
i18n - Internationalization module for LocaleKit.

Central entry point for all internationalization functionality:
- Locale registry: supported locales, display strings, fonts, groupings
- Translator: active locale, external translation loading, key lookup

All user-facing strings should be accessed through the translation system,
never hardcoded.
"""

from __future__ import annotations

# Constants and utilities
from src.i18n.constants import (
    COMMON_KEYS,
    DEFAULT_LOCALE,
    LANGUAGE_FAMILIES,
    LOCALE_GROUPS,
    LOCALE_REGIONS,
    SUPPORTED_LOCALES,
    CommonKey,
    Region,
    get_font_family,
    get_language_family,
    get_locale_display_string,
    get_locale_group,
    get_locale_info,
    get_locale_region,
    get_locales_for_dropdown,
    get_text_direction,
    is_rtl,
    is_valid_locale_code,
)

# Core i18n functions
from src.i18n.translator import (
    get_available_locales,
    get_locale,
    get_locale_display_name,
    get_translations,
    is_valid_locale,
    load_external_translations,
    load_translations_dir,
    load_translations_file,
    set_locale,
    t,
)

# Types
from src.i18n.types import LocaleCode, LocaleInfo, TextDirection, TranslationKey

__all__ = [
    # Types
    "LocaleCode",
    "LocaleInfo",
    "TextDirection",
    "TranslationKey",
    # Core i18n functions
    "get_available_locales",
    "get_locale",
    "get_locale_display_name",
    "get_translations",
    "is_valid_locale",
    "load_external_translations",
    "load_translations_dir",
    "load_translations_file",
    "set_locale",
    "t",
    # Constants and utilities
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
