"""structlog loggers that defer to the host app's ``logging`` setup."""

from __future__ import annotations
import logging

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Bind a structlog logger to the stdlib logger ``name``.

    Events below the stdlib logger's effective level are dropped, so an
    unconfigured host sees nothing on stdout.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )
