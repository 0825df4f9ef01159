"""
Structured logging for objcache.

The library only emits events through structlog. Host applications that
have no logging setup of their own can call configure_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def add_library_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Tag events coming from objcache loggers."""
    if event_dict.get("logger", "").startswith("objcache"):
        event_dict["component"] = "objcache"
    return event_dict


def configure_logging(log_level: str = "info", json: bool = False) -> None:
    """Configure structlog on top of stdlib logging."""
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_library_context,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


__all__ = ("configure_logging", "get_logger")
