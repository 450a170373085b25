"""structlog rendering for propguard's own log records.

propguard modules log through stdlib ``logging.getLogger(__name__)``.
:func:`configure_logging` attaches one structlog-formatted stderr handler
to the ``propguard`` logger: colored console lines by default, JSON lines
with ``log_json=True``.

The root logger and the global structlog configuration belong to the
embedding application and are left untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog

from propguard.config.settings import PropguardSettings

LOGGER_NAME = "propguard"

# Marks the handler propguard installed so a later call can replace it.
_HANDLER_ATTR = "_propguard_handler"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def build_handler(*, log_json: bool = False) -> logging.Handler:
    """A stderr handler rendering stdlib records through structlog."""
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    setattr(handler, _HANDLER_ATTR, True)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    propagate: bool = False,
) -> None:
    """Route ``propguard`` log records to a structlog-rendered handler.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        propagate: Also pass records on to the application's handlers.
    """
    pkg_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in pkg_logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        pkg_logger.removeHandler(existing)
        existing.close()

    pkg_logger.addHandler(build_handler(log_json=log_json))
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = propagate


def configure_from_settings(settings: PropguardSettings) -> None:
    """Apply :class:`PropguardSettings` to the logging setup."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
