"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Post deleted                   post_id=550e8400-... comments_removed=3

Other environments (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Post deleted", "post_id": "550e8400-..."}

Usage:
======
    from socialhub.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("User registered", user_id=user_id, username=username)

    # Get named logger
    integrity_logger = get_logger("socialhub.integrity")
    integrity_logger.info("Post deleted", post_id=post_id)

    # Add context to all subsequent logs
    log_context(method="PUT", path="/post-like/...", user_id=user_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from socialhub.config.settings import settings


# Third-party loggers and the level they are held at
_NOISY_LOGGERS = {
    "botocore": logging.WARNING,
    "urllib3": logging.WARNING,
    # bcrypt>=4 dropped the version attribute passlib probes on first use
    "passlib": logging.ERROR,
}


def _renderers() -> list[Processor]:
    """Final processors: console in development, JSON lines elsewhere."""
    if settings.is_development:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def setup_logging() -> None:
    """
    Configure structlog on top of the stdlib root logger.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )
    for name, level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderers(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Named structlog logger, e.g. ``get_logger(__name__)`` in a service module."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs that every later log call in this context carries.

    The request middleware binds method and path, the auth dependency adds
    user_id.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop everything bound by log_context. Run at the start of each request."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("socialhub")
