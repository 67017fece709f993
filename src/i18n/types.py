"""
Core i18n types for LocaleKit.

LocaleCode is the closed set of supported locale codes, LocaleInfo the
per-locale display record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Supported locale codes (BCP-47-like tags)
LocaleCode = Literal["en", "zh-CN", "zh-TW", "ja", "ko", "de", "fr", "es", "ru", "pt"]

# Dotted translation key, e.g. "common.save"
TranslationKey = str

TextDirection = Literal["ltr", "rtl"]


@dataclass(frozen=True)
class LocaleInfo:
    """Display metadata for one supported locale."""

    code: LocaleCode
    native_name: str
    english_name: str
    flag: str | None = None


__all__ = ["LocaleCode", "LocaleInfo", "TextDirection", "TranslationKey"]
