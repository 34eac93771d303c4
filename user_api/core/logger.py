# user_api/core/logger.py
import logging
import sys

from user_api.config.settings import settings

LOGGER_NAME = "user_api"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the ``user_api`` logger.

    Module loggers (``logging.getLogger(__name__)``) are children of it and
    inherit the handler. Calling this twice does not add a second handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger

