"""
Structured logging configuration for applications embedding the client.

The library itself only emits events through structlog; it never configures
logging on import. Applications call setup_logging() once at startup:
- JSON formatting for production, pretty console for development
- API keys, tokens and secrets redacted from every event
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from friendly_captcha.config import LoggingSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "api_key",
    "x-api-key",
    "token",
    "response",
    "captcha_response",
    "secret",
    "password",
    "authorization",
}

_SENSITIVE_FRAGMENTS = ("api_key", "token", "secret", "password")
_PROTECTED_KEYS = ("level", "event", "timestamp", "logger")


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _PROTECTED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            fragment in lowered for fragment in _SENSITIVE_FRAGMENTS
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def build_processors(log_format: str) -> list[Processor]:
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        return shared_processors + [structlog.processors.JSONRenderer()]
    return shared_processors + [
        structlog.dev.ConsoleRenderer(colors=True, pad_event=15, sort_keys=False)
    ]


def configure_structlog(settings: LoggingSettings) -> None:
    structlog.configure(
        processors=build_processors(settings.resolved_log_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(settings: LoggingSettings) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
    # Reduce noise from the transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Initialize logging for an application using the client.

    Should be called early in application startup.
    """
    if settings is None:
        settings = LoggingSettings()

    configure_stdlib_logging(settings)
    configure_structlog(settings)

    logger = structlog.get_logger(__name__)
    logger.info(
        "logging_initialized",
        env=settings.env,
        log_level=settings.log_level,
        log_format=settings.resolved_log_format,
    )
