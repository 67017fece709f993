"""
REST API Layer for LocaleKit.

Provides:
- FastAPI application with CORS middleware
- Read-only locale and translation endpoints for UI clients
- API versioning under /api/v1 prefix
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes import router
from src.api.schemas import error_response
from src.config.settings import Settings
from src.lib.errors import INTERNAL_ERROR, NOT_FOUND, VALIDATION_ERROR, build_error_response
from src.lib.i18n import get_i18n_service

logger = logging.getLogger(__name__)

_ALLOWED_HEADERS: list[str] = [
    "Content-Type",
    "Accept",
    "Accept-Language",
    "X-Request-ID",
]


def _request_locale(request: Request) -> str:
    return get_i18n_service().detect_locale_from_header(request.headers.get("accept-language"))


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Includes:
    - i18n bootstrap (translations dir, initial locale) from settings
    - CORS middleware with origins from LOCALEKIT_CORS_ORIGINS
    - Envelope error handlers (404, 422, unhandled exceptions)
    - API v1 router with all endpoints
    - Root-level health check for Docker/load balancer probes
    - Production: /docs and /redoc disabled

    Args:
        settings: Settings to use (defaults to Settings.from_env())

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = Settings.from_env()

    get_i18n_service().configure(settings)

    app = FastAPI(
        title="LocaleKit",
        description="Locale registry and translation lookup",
        version="0.1.0",
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(
        request: Request, exc: StarletteHTTPException,
    ) -> JSONResponse:
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        error = build_error_response(
            NOT_FOUND,
            details={"path": request.url.path},
            locale=_request_locale(request),
        )
        return JSONResponse(status_code=404, content=error_response(error))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        error = build_error_response(
            VALIDATION_ERROR,
            details={"errors": jsonable_encoder(exc.errors())},
            locale=_request_locale(request),
        )
        return JSONResponse(status_code=422, content=error_response(error))

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=error_response(build_error_response(INTERNAL_ERROR)),
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=_ALLOWED_HEADERS,
    )

    if settings.cors_origins:
        logger.info("CORS enabled for origins: %s", settings.cors_origins)
    else:
        logger.info("CORS: no origins configured (restrictive default)")

    app.include_router(router)

    @app.get("/health")
    async def root_health_check() -> dict[str, str]:
        """Root health check for infrastructure probes."""
        return {"status": "ok"}

    return app


__all__ = ["create_app", "router"]
