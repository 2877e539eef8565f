"""Centralized logging configuration."""

import logging

from config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Chatty at INFO/DEBUG: SQL echo, per-request HTTP lines, keyring backend probing
QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "httpx",
    "httpcore",
    "keyring",
)


def setup_logging() -> None:
    """Configure root logging from settings.LOG_LEVEL.

    Third-party loggers in QUIET_LOGGERS are held at WARNING so that a
    DEBUG run shows quote resolution and refresh decisions, not transport
    noise. The quote provider's own logger follows the root level.
    """
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        level=getattr(logging, settings.LOG_LEVEL),
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
