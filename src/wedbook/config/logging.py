"""Log routing for the wedbook CLI.

Parser modules log through ``logging.getLogger(__name__)`` and never
configure anything. The CLI calls :func:`configure_logging` once per
invocation, which renders those stdlib records with structlog: console
lines by default, JSON lines with ``--log-json``.

Only the ``wedbook`` logger's level is changed, and only the handler this
module installed is replaced, so a host application's own root handlers
survive.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

HANDLER_NAME = "wedbook"


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    isatty = getattr(stream, "isatty", None)
    return structlog.dev.ConsoleRenderer(colors=bool(isatty and isatty()))


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.StreamHandler[TextIO]:
    """Install the wedbook handler on the root logger and return it.

    Args:
        verbose: Let DEBUG records from ``wedbook.*`` through; otherwise
            WARNING and above.
        log_json: One JSON object per record instead of console lines.
        stream: Where records go. Defaults to the current ``sys.stderr``.

    Calling this again swaps the handler rather than adding a second one.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    target = stream or sys.stderr
    handler = logging.StreamHandler(target)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, target),
            ],
        )
    )

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(old)
    root.addHandler(handler)

    logging.getLogger("wedbook").setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
