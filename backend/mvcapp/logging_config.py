"""Logging setup shared by the service layer and CLI scripts."""

import json
import logging

from .config import settings


def configure_logging(level: str = None) -> None:
    """Configure the root logger once.

    Does nothing when handlers are already attached (e.g. under pytest or
    when a host application owns logging).
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(channel: str) -> logging.Logger:
    """Return the `mvcapp.<channel>` logger."""
    return logging.getLogger(f"mvcapp.{channel}")


def log_event(logger: logging.Logger, event: str, **fields) -> None:
    """Emit `event {json}` at INFO, the format used across the backend."""
    logger.info("%s %s", event, json.dumps(fields, ensure_ascii=True, default=str))
