"""structlog setup — diagnostics go to stderr, results to stdout."""

import logging
import sys

import structlog


def configure_library_default() -> None:
    """Route through stdlib logging unless the host application configured structlog.

    Library callers then get logging's own defaults (WARNING and up, stderr),
    so skipped directories stay silent.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structlog for the CLI. DEBUG shows skipped directories."""
    level = getattr(logging, log_level.upper(), logging.WARNING)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
