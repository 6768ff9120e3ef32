"""
Logging setup.

Everything goes to stderr: in stdio mode stdout carries the JSON-RPC stream
and a stray line there corrupts the protocol.
"""

import logging
import sys

from .config import APP_ENV, LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_log_level() -> int:
    """Explicit LOG_LEVEL wins, otherwise INFO in production and DEBUG elsewhere."""
    if LOG_LEVEL:
        return getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    if APP_ENV == "production":
        return logging.INFO
    return logging.DEBUG


def configure_logging(level: int | None = None) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        handlers=[handler],
        force=True,
    )
