"""
Logger factory for the Friendly Captcha client.

Re-exports setup_logging from shared.logging_config so applications have a
single import location.
"""

import structlog
from structlog.stdlib import BoundLogger

from friendly_captcha.shared.logging_config import (
    configure_structlog,
    redact_sensitive_fields,
    setup_logging,
)


def get_logger(name: str) -> BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("captcha_verified", event_id="evt_123")
    """
    return structlog.get_logger(name)


def log_with_context(logger: BoundLogger, **context) -> BoundLogger:
    """Bind context to a logger for all subsequent log calls."""
    return logger.bind(**context)


__all__ = [
    "get_logger",
    "log_with_context",
    "configure_structlog",
    "redact_sensitive_fields",
    "setup_logging",
]
