"""
REST API Routes for LocaleKit.

All responses use the ResponseEnvelope pattern.

Endpoints (all under /api/v1 prefix):
- /health - Health check
- /i18n/locales - Supported locales in dropdown order (?include_flag=false drops flags)
- /i18n/locales/{code} - One locale description
- /i18n/translations/{code} - Merged translation table
- /i18n/negotiate - Locale negotiated from Accept-Language
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Header, Query
from fastapi.responses import JSONResponse

from src.api.schemas import (
    LocaleDescription,
    NegotiatedLocale,
    TranslationTable,
    error_response,
    success_response,
)
from src.i18n.constants import get_locales_for_dropdown, is_valid_locale_code
from src.lib.errors import LOCALE_NOT_FOUND, build_error_response
from src.lib.i18n import get_i18n_service, parse_accept_language

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")


def _locale_not_found(code: str, accept_language: str | None) -> JSONResponse:
    service = get_i18n_service()
    error = build_error_response(
        LOCALE_NOT_FOUND,
        details={"code": code},
        locale=service.detect_locale_from_header(accept_language),
    )
    return JSONResponse(status_code=404, content=error_response(error))


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint (unauthenticated)."""
    return success_response({"status": "ok"})


@router.get("/i18n/locales")
async def list_locales(include_flag: bool = Query(default=True)) -> dict[str, Any]:
    """List supported locales sorted by English name, for UI dropdowns."""
    service = get_i18n_service()
    locales = [
        LocaleDescription(**service.describe_locale(info.code, include_flag))  # type: ignore[arg-type]
        for info in get_locales_for_dropdown()
    ]
    return success_response([locale.model_dump() for locale in locales])


@router.get("/i18n/locales/{code}", response_model=None)
async def get_locale_description(
    code: str,
    include_flag: bool = Query(default=True),
    accept_language: str | None = Header(default=None),
) -> dict[str, Any] | JSONResponse:
    """Describe one supported locale."""
    description = get_i18n_service().describe_locale(code, include_flag)
    if description is None:
        return _locale_not_found(code, accept_language)
    return success_response(LocaleDescription(**description).model_dump())


@router.get("/i18n/translations/{code}", response_model=None)
async def get_translation_table(
    code: str,
    accept_language: str | None = Header(default=None),
) -> dict[str, Any] | JSONResponse:
    """Serve the merged (built-in + external) translation table for a locale."""
    if not is_valid_locale_code(code):
        return _locale_not_found(code, accept_language)

    messages = get_i18n_service().translator.get_translations(code)
    return success_response(TranslationTable(locale=code, messages=messages).model_dump())


@router.get("/i18n/negotiate")
async def negotiate(accept_language: str | None = Header(default=None)) -> dict[str, Any]:
    """Negotiate the best supported locale from the Accept-Language header."""
    requested = parse_accept_language(accept_language)
    locale = get_i18n_service().negotiate_locale(requested)
    return success_response(NegotiatedLocale(locale=locale, requested=requested).model_dump())


__all__ = ["router"]
