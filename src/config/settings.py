"""
Runtime settings for LocaleKit.

All settings come from environment variables and are read once at startup:

- LOCALEKIT_ENVIRONMENT: "development" (default) or "production"
- LOCALEKIT_DEV_MODE: "1" enables human-readable logs
- LOG_LEVEL: stdlib log level name (default INFO)
- LOCALEKIT_LOCALE: initial active locale (unsupported -> DEFAULT_LOCALE)
- LOCALEKIT_TRANSLATIONS_DIR: optional directory of "<locale>.json" files
- LOCALEKIT_CORS_ORIGINS: comma-separated list of allowed origins
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from src.i18n.constants import DEFAULT_LOCALE, is_valid_locale_code
from src.i18n.types import LocaleCode
from src.lib.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    environment: str = "development"
    dev_mode: bool = False
    log_level: str = "INFO"
    initial_locale: LocaleCode = DEFAULT_LOCALE
    translations_dir: Path | None = None
    cors_origins: tuple[str, ...] = ()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the translations dir is not a directory, or
                a wildcard CORS origin is configured in production
        """
        env = os.environ if environ is None else environ

        environment = env.get("LOCALEKIT_ENVIRONMENT", "development")

        locale = env.get("LOCALEKIT_LOCALE", DEFAULT_LOCALE)
        if not is_valid_locale_code(locale):
            logger.warning(
                "LOCALEKIT_LOCALE=%r is not supported, falling back to '%s'",
                locale,
                DEFAULT_LOCALE,
            )
            locale = DEFAULT_LOCALE

        translations_dir: Path | None = None
        raw_dir = env.get("LOCALEKIT_TRANSLATIONS_DIR", "").strip()
        if raw_dir:
            translations_dir = Path(raw_dir)
            if not translations_dir.is_dir():
                raise ConfigurationError(
                    f"LOCALEKIT_TRANSLATIONS_DIR is not a directory: {translations_dir}"
                )

        cors_origins = tuple(
            origin.strip()
            for origin in env.get("LOCALEKIT_CORS_ORIGINS", "").split(",")
            if origin.strip()
        )
        if environment == "production" and "*" in cors_origins:
            raise ConfigurationError(
                "LOCALEKIT_CORS_ORIGINS contains wildcard '*' which is forbidden in production. "
                "Specify explicit origins instead."
            )

        return cls(
            environment=environment,
            dev_mode=env.get("LOCALEKIT_DEV_MODE") == "1",
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            initial_locale=locale,
            translations_dir=translations_dir,
            cors_origins=cors_origins,
        )
