"""
Shared test fixtures for LocaleKit.

This module provides common fixtures used across all test modules:
- Translator state reset (active locale, external overlays)
- I18nService singleton reset
- A temporary translations directory with sample JSON files

Usage:
    All fixtures are automatically available to any test in the tests/ directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import src.lib.i18n as i18n_service_module
from src.i18n.translator import get_translator

# ---------------------------------------------------------------------------
# 1. Global state reset -- the translator is process-wide
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_i18n_state():
    """Start and finish every test with a pristine translator and service."""
    get_translator().reset()
    i18n_service_module._i18n_service = None
    yield
    get_translator().reset()
    i18n_service_module._i18n_service = None


# ---------------------------------------------------------------------------
# 2. translations_dir -- sample external translation files
# ---------------------------------------------------------------------------


@pytest.fixture()
def translations_dir(tmp_path: Path) -> Path:
    """
    Provide a directory with external translation files.

    Contains:
    - de.json: nested keys overriding and extending the built-in strings
    - ja.json: flat dotted keys
    - xx.json: unsupported locale (must be skipped)
    """
    (tmp_path / "de.json").write_text(
        json.dumps({
            "common": {"save": "Sichern"},
            "greeting": {"hello": "Hallo, {name}!"},
        }),
        encoding="utf-8",
    )
    (tmp_path / "ja.json").write_text(
        json.dumps({"greeting.hello": "こんにちは、{name}さん"}, ensure_ascii=False),
        encoding="utf-8",
    )
    (tmp_path / "xx.json").write_text(json.dumps({"common.save": "???"}), encoding="utf-8")
    return tmp_path
