"""
Centralized Error Response Builder for LocaleKit.

Provides consistent error codes, messages, and i18n-ready error responses
for the API layer.

Error codes are constants that map to translatable message strings.
The builder returns structured error dicts compatible with the API
response envelope.
"""

from __future__ import annotations

from typing import Any

from src.i18n.constants import DEFAULT_LOCALE

# =============================================================================
# Error Code Constants
# =============================================================================

LOCALE_NOT_FOUND = "LOCALE_NOT_FOUND"
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"

# =============================================================================
# i18n Message Registry
#
# Maps (error_code, locale) -> translated message string.
# Falls back to DEFAULT_LOCALE if a translation is missing for the
# requested locale.
# =============================================================================

_ERROR_MESSAGES: dict[str, dict[str, str]] = {
    LOCALE_NOT_FOUND: {
        "en": "The requested locale is not supported.",
        "de": "Die angeforderte Sprache wird nicht unterstützt.",
        "fr": "La langue demandée n'est pas prise en charge.",
        "es": "El idioma solicitado no es compatible.",
        "pt": "O idioma solicitado não é suportado.",
    },
    NOT_FOUND: {
        "en": "The requested resource was not found.",
        "de": "Die angeforderte Ressource wurde nicht gefunden.",
        "fr": "La ressource demandée est introuvable.",
        "es": "No se encontró el recurso solicitado.",
        "pt": "O recurso solicitado não foi encontrado.",
    },
    VALIDATION_ERROR: {
        "en": "Invalid input. Please check your request.",
        "de": "Ungültige Eingabe. Bitte überprüfen Sie Ihre Anfrage.",
        "fr": "Entrée invalide. Veuillez vérifier votre requête.",
        "es": "Entrada no válida. Revise su solicitud.",
        "pt": "Entrada inválida. Verifique sua solicitação.",
    },
    INTERNAL_ERROR: {
        "en": "An internal error occurred. Please try again.",
        "de": "Ein interner Fehler ist aufgetreten. Bitte erneut versuchen.",
        "fr": "Une erreur interne s'est produite. Veuillez réessayer.",
        "es": "Se produjo un error interno. Inténtelo de nuevo.",
        "pt": "Ocorreu um erro interno. Tente novamente.",
    },
}


def get_error_message(code: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Get a translated error message for a given error code.

    Falls back to English if the requested locale is not available.
    Falls back to a generic message if the error code is unknown.
    """
    messages = _ERROR_MESSAGES.get(code, {})
    return messages.get(locale, messages.get(DEFAULT_LOCALE, "An error occurred."))


def build_error_response(
    code: str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
    locale: str = DEFAULT_LOCALE,
) -> dict[str, Any]:
    """
    Build a structured error dict: {"code": str, "message": str, "details": dict}.

    If no message is provided, the translated message for the error code
    and locale is used automatically. "details" is only present when given.
    """
    resolved_message = message if message is not None else get_error_message(code, locale)
    error: dict[str, Any] = {
        "code": code,
        "message": resolved_message,
    }
    if details is not None:
        error["details"] = details
    return error


__all__ = [
    "LOCALE_NOT_FOUND",
    "NOT_FOUND",
    "VALIDATION_ERROR",
    "INTERNAL_ERROR",
    "get_error_message",
    "build_error_response",
]
