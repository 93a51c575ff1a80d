"""Shared logger for the calculator service."""
import logging
import sys

LOGGER_NAME = "calculator_service"
HANDLER_NAME = "calculator_service.stderr"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stderr handler to the service logger and set its level.

    The handler is identified by HANDLER_NAME, so calling this again only
    updates the level and never duplicates it.

    :param str level: Logging level name (e.g. "DEBUG", "INFO")

    :return: The configured service logger
    :rtype: logging.Logger
    """
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level.upper())
    return logger
