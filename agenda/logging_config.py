"""Structured logging configuration using structlog."""

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


def _configure(log_level: int) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def setup_logging(verbose: bool = False) -> None:
    """Configure structured logging for the command line tool.

    Log lines go to stderr so they never mix with the report on stdout.
    """
    _configure(logging.DEBUG if verbose else logging.INFO)


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a named structured logger."""
    return structlog.get_logger(name)


# Library use without setup_logging() only reports warnings, on stderr.
if not structlog.is_configured():
    _configure(logging.WARNING)
