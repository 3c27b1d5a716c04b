"""Structlog setup for lineage search.

Only the outer layers log: payload loading, the explorer service and the
CLI. The graph store and the search functions stay silent. Events are
rendered as one JSON object per line and handed to the stdlib ``logging``
tree, whose handler writes to stderr, so ``--json`` output on stdout stays
parseable. ``configure_logging`` may be called again (the CLI does so once
the configured level is known); loggers are not cached, so the new level
applies to module-level loggers created earlier.
"""
from __future__ import annotations

from typing import Literal

import logging
import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: LogLevel = "WARNING") -> None:
    numeric = getattr(logging, level)
    # basicConfig is a no-op once a handler exists, so set the root level too
    logging.basicConfig(format="%(message)s", level=numeric)
    logging.getLogger().setLevel(numeric)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "lineage_search"):
    return structlog.get_logger(name)


# Quiet by default until the CLI applies LINEAGE_SEARCH_LOG_LEVEL
configure_logging()
