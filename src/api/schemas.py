"""
Pydantic Schemas for the LocaleKit REST API.

Defines the response envelope and the locale/translation payloads.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from src.i18n.types import LocaleCode, TextDirection

# =============================================================================
# Common Schemas
# =============================================================================


class APIError(BaseModel):
    """Standard API error payload."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ResponseMeta(BaseModel):
    """Metadata attached to every envelope."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ResponseEnvelope(BaseModel):
    """Uniform wrapper for every /api/v1 response."""

    success: bool
    data: Any = None
    error: APIError | None = None
    meta: ResponseMeta = Field(default_factory=ResponseMeta)


def success_response(data: Any) -> dict[str, Any]:
    """Wrap data in a success envelope."""
    return ResponseEnvelope(success=True, data=data).model_dump(mode="json")


def error_response(error: dict[str, Any]) -> dict[str, Any]:
    """Wrap an error dict (see src.lib.errors.build_error_response) in an envelope."""
    return ResponseEnvelope(success=False, error=APIError(**error)).model_dump(mode="json")


# =============================================================================
# Locale Schemas
# =============================================================================


class LocaleDescription(BaseModel):
    """A supported locale as shown in UI pickers."""

    code: LocaleCode
    native_name: str
    english_name: str
    flag: str | None
    display: str
    font_family: str
    direction: TextDirection
    family: str | None
    region: str | None
    group: list[str]


class TranslationTable(BaseModel):
    """Merged translation strings for one locale."""

    locale: LocaleCode
    messages: dict[str, str]


class NegotiatedLocale(BaseModel):
    """Result of Accept-Language negotiation."""

    locale: LocaleCode
    requested: list[str]


__all__ = [
    "APIError",
    "ResponseEnvelope",
    "ResponseMeta",
    "error_response",
    "success_response",
    "LocaleDescription",
    "TranslationTable",
    "NegotiatedLocale",
]
