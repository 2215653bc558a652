"""structlog configuration for oopnotes.

Logs always go to stderr so stdout stays clean for results and for the
output captured from lessons. ``--log-json`` switches the console
renderer for a JSON renderer (one object per line).
"""

from __future__ import annotations

import logging
import sys

import structlog

HANDLER_NAME = "oopnotes-stderr"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(
    pre_chain: list[structlog.types.Processor], *, log_json: bool
) -> logging.Handler:
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if log_json
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: ``oopnotes`` loggers emit DEBUG; otherwise WARNING and up.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    processors = _shared_processors()
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(_stderr_handler(processors, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("oopnotes").setLevel(logging.DEBUG if verbose else logging.WARNING)
