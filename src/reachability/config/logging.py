"""structlog configuration for reachability.

Two output modes:
- Human (default): console-rendered output to stderr
- JSON (``log_json``): structured JSON lines to stderr

Service calls run inside :func:`operation_context`, so every log line a
query emits (stdlib or structlog) carries the ``op`` being answered and
the start vertex it was asked about.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import structlog

PACKAGE_LOGGER = "reachability"

# Third-party loggers held at WARNING even when verbose.
_QUIET_LOGGERS = ("networkx", "pydantic_settings")


def _describe_start(start: Any) -> Any:
    """Render a start node as a loggable scalar.

    Integer identifiers pass through; pointer-graph vertices log their data;
    professionals log their name (or company when unnamed).
    """
    if start is None or isinstance(start, int | str):
        return start
    name = getattr(start, "name", None)
    if name:
        return name
    if hasattr(start, "data"):
        return start.data
    return getattr(start, "company", type(start).__name__)


@contextmanager
def operation_context(op: str, start: Any = None) -> Generator[None]:
    """Bind ``op`` (and ``start`` when given) into structlog's context vars."""
    fields: dict[str, Any] = {"op": op}
    if start is not None:
        fields["start"] = _describe_start(start)
    with structlog.contextvars.bound_contextvars(**fields):
        yield


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route stdlib logging through them.

    Args:
        verbose: Enable DEBUG-level output for the package logger. When
            False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
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

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
