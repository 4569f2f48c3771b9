"""Log routing for ministryctl.

Every record goes to stderr so piped stdout stays clean, either through
structlog's console renderer or as JSON lines (``--log-json``).  Each
invocation binds the reference date and roster path as context, so a
skipped-entry warning always says which day and which file it was about.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

LOGGER_NAME = "ministryctl"


def _pre_chain() -> list[Processor]:
    """Processors shared by structlog loggers and plain ``logging`` records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ministryctl logging to stderr.

    The ``ministryctl`` logger logs at DEBUG with *verbose*, WARNING
    otherwise; everything else stays at WARNING.
    """
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_run_context(*, today: str, roster: Path) -> None:
    """Attach the reference date and roster path to every later log line."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(today=today, roster=str(roster))
