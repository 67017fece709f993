"""
Translation engine for LocaleKit.

Holds the process-wide active locale and the externally loaded translation
overlays, and resolves dotted keys to localized strings.

Resolution order for t(key):
1. External overlay for the requested locale
2. Built-in strings for the requested locale
3. External overlay for DEFAULT_LOCALE
4. Built-in strings for DEFAULT_LOCALE
5. The key itself

Unknown locale codes are logged and ignored, never raised. The only loud
failure is malformed external data, which surfaces as TranslationLoadError
at load time.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from src.i18n import strings
from src.i18n.constants import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    get_locale_info,
    is_valid_locale_code,
)
from src.i18n.types import LocaleCode
from src.lib.exceptions import TranslationLoadError

logger = logging.getLogger(__name__)


def _flatten(messages: Mapping[str, Any], prefix: str = "") -> tuple[dict[str, str], list[str]]:
    """Flatten nested mappings into dotted keys; returns (strings, skipped keys)."""
    flat: dict[str, str] = {}
    skipped: list[str] = []
    for key, value in messages.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            nested, nested_skipped = _flatten(value, dotted)
            flat.update(nested)
            skipped.extend(nested_skipped)
        elif isinstance(value, str):
            flat[dotted] = value
        else:
            skipped.append(dotted)
    return flat, skipped


def _format_string(template: str, **kwargs: Any) -> str:
    if not kwargs:
        return template

    # Only primitives reach str.format; anything else is stringified first
    safe_kwargs: dict[str, str | int | float] = {}
    for k, v in kwargs.items():
        if isinstance(v, (str, int, float)):
            safe_kwargs[k] = v
        else:
            safe_kwargs[k] = str(v)

    try:
        return template.format(**safe_kwargs)
    except (KeyError, IndexError, ValueError, AttributeError, TypeError):
        return template


class Translator:
    """Active locale plus external translation overlays."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._locale: LocaleCode = DEFAULT_LOCALE
        self._external: dict[str, dict[str, str]] = {}

    def get_locale(self) -> LocaleCode:
        return self._locale

    def set_locale(self, code: str) -> bool:
        """
        Switch the active locale.

        Returns:
            True if switched, False if the code is unsupported (locale unchanged)
        """
        if not is_valid_locale_code(code):
            logger.warning("Ignoring unsupported locale '%s'", code)
            return False
        with self._lock:
            if code != self._locale:
                logger.info("Active locale changed: %s -> %s", self._locale, code)
            self._locale = code
        return True

    def load_external_translations(self, locale: str, messages: Any) -> int:
        """
        Merge externally supplied translations into the overlay for a locale.

        Nested mappings are flattened to dotted keys ({"common": {"save": ...}}
        becomes "common.save"). Non-string values are skipped.

        Args:
            locale: Locale code the messages belong to
            messages: Mapping of keys (nested or dotted) to strings

        Returns:
            Number of strings loaded (0 for unsupported locales)

        Raises:
            TranslationLoadError: If messages is not a mapping
        """
        if not isinstance(messages, Mapping):
            raise TranslationLoadError(
                f"Translations for '{locale}' must be a mapping, got {type(messages).__name__}"
            )
        if not is_valid_locale_code(locale):
            logger.warning("Skipping translations for unsupported locale '%s'", locale)
            return 0

        flat, skipped = _flatten(messages)
        for key in skipped:
            logger.warning("Skipping non-string translation %s:%s", locale, key)

        with self._lock:
            self._external.setdefault(locale, {}).update(flat)

        logger.info("Loaded %d external translations for '%s'", len(flat), locale)
        return len(flat)

    def load_translations_file(self, path: str | Path) -> int:
        """
        Load a JSON translation file named after its locale (e.g. "de.json").

        Raises:
            TranslationLoadError: If the file cannot be read or is not valid JSON
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise TranslationLoadError(f"Could not load translations from {path}: {e}") from e
        return self.load_external_translations(path.stem, data)

    def load_translations_dir(self, directory: str | Path) -> dict[str, int]:
        """
        Load every "<locale>.json" file in a directory.

        Files whose name is not a supported locale are skipped.

        Returns:
            Mapping of locale code -> number of strings loaded

        Raises:
            TranslationLoadError: If the directory does not exist or a file is malformed
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise TranslationLoadError(f"Translations directory not found: {directory}")

        loaded: dict[str, int] = {}
        for path in sorted(directory.glob("*.json")):
            if not is_valid_locale_code(path.stem):
                logger.warning("Skipping translation file for unsupported locale: %s", path.name)
                continue
            loaded[path.stem] = self.load_translations_file(path)
        return loaded

    def t(self, key: str, locale: str | None = None, **kwargs: Any) -> str:
        """
        Translate a dotted key.

        Args:
            key: Translation key (e.g. "common.save" or CommonKey.SAVE)
            locale: Locale to translate into (defaults to the active locale)
            **kwargs: Optional format variables

        Returns:
            Translated string, falling back to DEFAULT_LOCALE and then the key

        Example:
            >>> translator.t("common.save", "de")
            'Speichern'
        """
        key = str(key)
        if locale is None:
            locale = self._locale
        elif not is_valid_locale_code(locale):
            locale = DEFAULT_LOCALE

        candidates = [locale] if locale == DEFAULT_LOCALE else [locale, DEFAULT_LOCALE]
        for code in candidates:
            template = self._external.get(code, {}).get(key)
            if template is None:
                template = strings.lookup(code, key)
            if template is not None:
                return _format_string(template, **kwargs)

        return key

    def get_translations(self, locale: str) -> dict[str, str]:
        """Get the merged table (built-in overlaid by external) for one locale."""
        if not is_valid_locale_code(locale):
            return {}
        merged = {str(k): v for k, v in strings.TRANSLATIONS.get(locale, {}).items()}
        merged.update(self._external.get(locale, {}))
        return merged

    def reset(self) -> None:
        """Drop all external overlays and return to the default locale."""
        with self._lock:
            self._external.clear()
            self._locale = DEFAULT_LOCALE


# Process-wide default translator
_translator = Translator()


def get_translator() -> Translator:
    return _translator


def get_locale() -> LocaleCode:
    """Get the active locale."""
    return _translator.get_locale()


def set_locale(code: str) -> bool:
    """Set the active locale; unsupported codes are ignored."""
    return _translator.set_locale(code)


def is_valid_locale(code: str) -> bool:
    """Check a code against the supported locale set."""
    return is_valid_locale_code(code)


def load_external_translations(locale: str, messages: Any) -> int:
    return _translator.load_external_translations(locale, messages)


def load_translations_file(path: str | Path) -> int:
    return _translator.load_translations_file(path)


def load_translations_dir(directory: str | Path) -> dict[str, int]:
    return _translator.load_translations_dir(directory)


def t(key: str, locale: str | None = None, **kwargs: Any) -> str:
    """Translate a dotted key using the default translator."""
    return _translator.t(key, locale, **kwargs)


def get_translations(locale: str) -> dict[str, str]:
    return _translator.get_translations(locale)


def get_available_locales() -> list[LocaleCode]:
    """Get all supported locale codes in registry order."""
    return [info.code for info in SUPPORTED_LOCALES]


def get_locale_display_name(code: str) -> str:
    """
    Get the native display name for a locale code.

    Returns:
        Native name (e.g. "Deutsch"), or the code itself if unknown
    """
    info = get_locale_info(code)
    return info.native_name if info is not None else code


__all__ = [
    "Translator",
    "get_available_locales",
    "get_locale",
    "get_locale_display_name",
    "get_translations",
    "get_translator",
    "is_valid_locale",
    "load_external_translations",
    "load_translations_dir",
    "load_translations_file",
    "set_locale",
    "t",
]
