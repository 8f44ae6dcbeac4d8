"""
Logging for tidykit.

Every module logs through get_logger(), which binds a structlog logger to a
stdlib logger under the "tidykit" hierarchy. The library never touches the
root logger: "tidykit" only carries a NullHandler until the application calls
configure_logging() (or attaches its own handlers).

Events are passed to stdlib as structlog event dicts and rendered to JSON by
the handler's ProcessorFormatter.
"""
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import EventDict

from tidykit.config import get_settings

LIBRARY_LOGGER = "tidykit"
LOG_FILE_NAME = "tidykit.log"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add log level to the event dict.
    """
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger writing to the stdlib logger `name`.

    Independent of the global structlog configuration, so an application's
    own structlog setup does not change where tidykit events go.

    Usage:
        logger = get_logger(__name__)
        logger.info("message", key="value")
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        )


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
            ]
        )


def configure_logging(
    log_level: Optional[str] = None,
    handler: Optional[logging.Handler] = None
    ) -> logging.Handler:
    """
    Render tidykit's log events as JSON lines.

    Attaches one handler to the "tidykit" logger; calling again replaces the
    handler installed by the previous call. Arguments left as None are read
    from Settings (TIDYKIT_LOG_LEVEL, TIDYKIT_LOG_FILE_ENABLED, TIDYKIT_LOG_DIR).

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        handler: Destination handler. Defaults to a file handler in LOG_DIR
            when LOG_FILE_ENABLED is set, stderr otherwise.

    Returns:
        The installed handler
    """
    settings = get_settings()
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if handler is None:
        if settings.LOG_FILE_ENABLED:
            log_dir = Path(settings.LOG_DIR)
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        else:
            handler = logging.StreamHandler(sys.stderr)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for old in library_logger.handlers[:]:
        if getattr(old, "_tidykit_configured", False):
            library_logger.removeHandler(old)
            old.close()

    handler.setFormatter(_json_formatter())
    handler._tidykit_configured = True
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    return handler
