"""structlog setup for the notectl CLI.

Log output goes to stderr, never stdout, so ``--json`` and ``--quiet``
output stays pipeable. Stdlib loggers (``logging.getLogger(__name__)``)
and structlog loggers share one formatter:

- console renderer by default, colored on a terminal
- JSON lines with ``--log-json``

Only the ``notectl`` logger tree follows ``--verbose``; third-party
libraries stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

_PACKAGE_LOGGER = "notectl"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    directory: Path | None = None,
) -> None:
    """(Re)configure logging for one CLI invocation.

    Safe to call repeatedly: the root handler is replaced, not stacked.
    When *directory* is given it is attached to every event as ``store``.
    """
    renderer: structlog.types.Processor
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
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if directory is not None:
        structlog.contextvars.bind_contextvars(store=str(directory))
