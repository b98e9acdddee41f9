"""Structured logging for the carousel engine and its HTTP host.

Every event is a snake_case name plus key/value fields, e.g.
``transition_completed`` with ``direction`` and ``active_index``. Console
output is used while developing and one JSON object per line in production.

Usage:
    from src.core.logging import get_logger, configure_logging

    configure_logging()  # once, at process start

    logger = get_logger(__name__)
    logger.info("transition_completed", active_index=3, direction="forward")
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

# HTTP stack loggers capped at WARNING
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def add_component(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Tag events from ``src.*`` modules with their short module name.

    ``src.core.transitions`` becomes ``component="transitions"`` so log
    queries can filter on engine, adapter or route without the full path.
    """
    name = event_dict.get("logger")
    if isinstance(name, str) and name.startswith("src."):
        event_dict.setdefault("component", name.rsplit(".", 1)[-1])
    return event_dict


def _is_development(development: bool | None) -> bool:
    if development is not None:
        return development
    return getenv("ENVIRONMENT", "development").lower() != "production"


def _level_for(log_level: str | None) -> int:
    name = (log_level or getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def _processors(development: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_component,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        development: Console output if True, JSON if False. None reads the
            ENVIRONMENT env var (anything but "production" is development).
        log_level: Level name such as "DEBUG". None reads LOG_LEVEL
            (default INFO). Unknown names fall back to INFO.
    """
    level = _level_for(log_level)

    structlog.configure(
        processors=_processors(_is_development(development)),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True overrides whatever uvicorn or pytest configured first
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)
    logging.getLogger().setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually ``get_logger(__name__)``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Attach fields to every event logged in the current context.

    The HTTP routes bind ``session_id`` (and the input ``channel``) so engine
    events logged while serving a request carry the browser session.

    Example:
        bind_contextvars(session_id="tab-1")
        logger.info("transition_completed")  # includes session_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)
