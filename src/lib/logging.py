"""
Structured logging configuration for LocaleKit.

stdlib loggers (every module uses `logging.getLogger(__name__)`) and
structlog loggers share one processor chain and one stderr handler. Each
event is tagged with the active UI locale, so log lines written while a
request renders German strings say so.

Output is a coloured console in dev mode (LOCALEKIT_DEV_MODE=1) and one JSON
object per line otherwise. JSON keeps non-ASCII text (locale names, loaded
strings) readable instead of escaping it.

Usage:
    from src.lib.logging import setup_logging

    setup_logging(settings)  # once, at startup
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from src.config.settings import Settings
from src.i18n.translator import get_locale

# Chatty at INFO; only their warnings are worth keeping
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "uvicorn.access")


def add_active_locale(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Processor: tag the event with the translator's active locale."""
    event_dict.setdefault("locale", get_locale())
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_active_locale,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(dev_mode: bool) -> structlog.types.Processor:
    if dev_mode:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(ensure_ascii=False)


def _build_handler(settings: Settings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.dev_mode),
            ],
        )
    )
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    """
    Route structlog and stdlib logging through a single structured handler.

    Replaces any handlers already on the root logger. An unrecognised
    LOCALEKIT_LOG_LEVEL means INFO.
    """
    settings = settings or Settings.from_env()

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers[:] = [_build_handler(settings)]
    root.setLevel(logging.getLevelNamesMapping().get(settings.log_level, logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["add_active_locale", "setup_logging"]
