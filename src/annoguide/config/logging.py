"""structlog configuration for annoguide.

Log lines go to stderr, either through the console renderer or as JSON
lines (``--log-json``).  Credentials in logged HTTP headers are masked
before any renderer sees them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any

import structlog

# Noisy at DEBUG; our own http hooks already log requests and responses.
_QUIET_LOGGERS = ("httpx", "httpcore")

_SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization"})
REDACTED = "***"


def redact_auth_headers(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask credential headers in an event's ``headers`` mapping.

    The scheme (``Bearer``) is kept so a log still shows which auth was sent.
    """
    headers = event_dict.get("headers")
    if not isinstance(headers, Mapping):
        return event_dict
    masked: dict[str, Any] = {}
    for name, value in headers.items():
        if str(name).lower() in _SENSITIVE_HEADERS:
            scheme, _, credential = str(value).partition(" ")
            value = f"{scheme} {REDACTED}" if credential else REDACTED
        masked[name] = value
    event_dict["headers"] = masked
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    app_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_auth_headers,
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("annoguide").setLevel(app_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
