"""Log routing for the avowed CLI.

Library modules log through plain ``logging.getLogger(__name__)``; this
module installs one stderr handler whose formatter runs those records
through structlog, rendered either for a terminal or as JSON lines
(``--log-json``). Validation failures themselves are results, not log
events: the walker only logs them at debug level.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "avowed"
NOISY_LOGGERS = ("pluggy",)

_HANDLER_NAME = "avowed-stderr"


def _pre_chain() -> list[Processor]:
    """Processors applied to both structlog and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(log_json: bool, stream: TextIO) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def _build_handler(log_json: bool, stream: TextIO) -> logging.Handler:
    final: list[Processor] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if log_json:
        final.append(structlog.processors.format_exc_info)
    final.append(_renderer(log_json, stream))

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=_pre_chain(), processors=final)
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route avowed and third-party logs to stderr.

    Safe to call repeatedly: each call replaces the root handlers, so the
    CLI can reconfigure per invocation.

    Args:
        verbose: Let ``avowed.*`` debug records through. Otherwise the
            package logs at WARNING and above, like everything else.
        log_json: Emit one JSON object per line instead of console text.
    """
    stream = sys.stderr

    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers = [_build_handler(log_json, stream)]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
