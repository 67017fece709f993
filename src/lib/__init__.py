"""
Lib package for LocaleKit.

Contains shared utilities:
- i18n.py: Request-facing i18n service (negotiation, locale descriptions)
- errors.py: Centralized error response builder with i18n
- exceptions.py: Exception hierarchy
- logging.py: structlog configuration
"""

from src.lib.errors import (
    INTERNAL_ERROR,
    LOCALE_NOT_FOUND,
    NOT_FOUND,
    VALIDATION_ERROR,
    build_error_response,
    get_error_message,
)
from src.lib.exceptions import (
    ConfigurationError,
    LocaleKitException,
    TranslationLoadError,
)

__all__ = [
    # errors
    "INTERNAL_ERROR",
    "LOCALE_NOT_FOUND",
    "NOT_FOUND",
    "VALIDATION_ERROR",
    "build_error_response",
    "get_error_message",
    # exceptions
    "ConfigurationError",
    "LocaleKitException",
    "TranslationLoadError",
]
