"""structlog configuration for userctl.

Records from structlog and from stdlib ``logging.getLogger`` callers (the
file parser) share one handler on stderr, so they never mix with the
users written to stdout. Output is colored text by default, or one JSON
object per line with ``--log-json``.

Per-line parser diagnostics go to :data:`LINE_LOGGER`. They stay silent
under ``-v`` and need ``--trace-lines``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

APP_LOGGER = "userctl"
LINE_LOGGER = "userctl.infrastructure.parser.lines"
HANDLER_NAME = "userctl"

_PRE_CHAIN: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.UnicodeDecoder(),
)


def _build_handler(out: TextIO, *, log_json: bool) -> logging.Handler:
    render: Processor
    if log_json:
        render = structlog.processors.JSONRenderer()
    else:
        render = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # ExtraAdder lifts ``extra={...}`` from stdlib calls into event keys.
            foreign_pre_chain=[*_PRE_CHAIN, structlog.stdlib.ExtraAdder()],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, render],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    trace_lines: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route userctl logging to *stream* (default: the current stderr).

    Args:
        verbose: DEBUG for userctl loggers; WARNING otherwise.
        log_json: Render JSON lines instead of console text.
        trace_lines: Log why each dropped file line was rejected.
        stream: Destination for all records.

    Calling this again replaces the handler installed by the previous
    call; handlers owned by anything else are left in place.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(old)
    out = stream if stream is not None else sys.stderr
    root.addHandler(_build_handler(out, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger(LINE_LOGGER).setLevel(logging.DEBUG if trace_lines else logging.WARNING)
