"""Logging configuration helpers."""

import logging

LOGGER_NAME = "caregiver_api"


def configure_logging(environment: str, level: str = "INFO") -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            f"%(asctime)s %(levelname)s: %(name)s: env={environment}: %(message)s"
        )
    )
    logger.addHandler(handler)
    logger.propagate = False
