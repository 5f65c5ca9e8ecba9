"""Console logging setup for stdlib and structlog loggers."""

import logging
import os
import sys

import structlog

DEFAULT_LEVEL = "WARNING"


def resolve_level(verbose: bool = False) -> str:
    """Pick the log level from the ``-v`` flag or ``JWL_LOG_LEVEL``."""
    if verbose:
        return "DEBUG"
    return os.getenv("JWL_LOG_LEVEL", DEFAULT_LEVEL).upper()


def setup_console_logging(level: str) -> None:
    """Send stdlib and structlog output to stderr at ``level``."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
