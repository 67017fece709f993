"""
Custom exception hierarchy for LocaleKit.

Locale lookups never raise; these exceptions cover the two places where
failing loudly is the right call:
- Startup configuration that cannot be honoured
- Malformed external translation data at load time

All exceptions inherit from LocaleKitException, enabling a catch-all for
LocaleKit errors while keeping the ability to catch specific error types.
"""

from __future__ import annotations


class LocaleKitException(Exception):
    """Base exception for all LocaleKit errors."""


class ConfigurationError(LocaleKitException):
    """Invalid environment settings or startup failures."""


class TranslationLoadError(LocaleKitException):
    """External translation data could not be read or has the wrong shape."""
