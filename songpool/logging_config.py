"""
Logging setup driven by application settings.

Modules keep logging through ``logging.getLogger(__name__)``; records are
rendered by structlog, as JSON or as console lines.
"""
import logging
from typing import Any, List, Optional

import structlog

from .config import AppSettings, get_settings

_SHARED_PROCESSORS: List[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib and structlog records for ``log_format``."""
    if log_format == 'json':
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=False)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderer],
    )


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Install a root handler according to log_level and log_format.

    Calling it again replaces the previously installed handler.
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(settings.log_format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, '_songpool', False):
            root.removeHandler(existing)
    handler._songpool = True
    root.addHandler(handler)
    root.setLevel(settings.log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
