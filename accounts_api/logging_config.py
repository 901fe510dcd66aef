"""Logging setup for the API process."""

import logging
import sys

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"

# Libraries that are chatty at INFO and below
NOISY_LOGGERS = ("passlib", "multipart", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
