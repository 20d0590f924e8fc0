"""Structured logging configuration using structlog.

Carousels log their lifecycle (normalization, committed transitions, ignored
requests) as structured events. Host applications call ``configure_logging``
once; library code only ever asks for a logger.

Usage:
    from tile_carousel.core.logging import get_logger, configure_logging

    # At application startup
    configure_logging(development=True)  # or False for production

    # In modules
    logger = get_logger(__name__)
    logger.info("carousel_normalized", tile_count=10, frame_count=4)
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor


def _resolve_level(log_level: str | None) -> int:
    name = (log_level or getenv("CAROUSEL_LOG_LEVEL", "INFO")).upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def _processor_chain(development: bool) -> list[Processor]:
    chain: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if development:
        chain.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return chain


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Route carousel events through stdlib logging on stdout.

    Args:
        development: Console rendering when True, one JSON object per line
            when False. None reads CAROUSEL_ENVIRONMENT; anything other than
            ``production`` counts as development.
        log_level: Level name such as ``DEBUG``. None reads
            CAROUSEL_LOG_LEVEL. Unknown names fall back to INFO.
    """
    if development is None:
        development = getenv("CAROUSEL_ENVIRONMENT", "development").lower() != "production"
    level = _resolve_level(log_level)

    structlog.configure(
        processors=_processor_chain(development),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.
        **initial_values: Context bound onto every event of this logger,
            e.g. ``carousel_id``.

    Returns:
        A bound structlog logger instance.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return cast(structlog.stdlib.BoundLogger, logger)


def bind_contextvars(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log calls.

    Example:
        bind_contextvars(page="gallery")
        carousel.next()  # transition events include page="gallery"
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    """Remove specific context variables.

    Args:
        *keys: Names of context variables to remove.
    """
    structlog.contextvars.unbind_contextvars(*keys)
