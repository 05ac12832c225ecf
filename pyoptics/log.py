"""
Package logger.

The library stays silent unless the application opts in, either through its
own logging configuration or with `configure_logging`.
"""
import logging

LOGGER_NAME = "pyoptics"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach a plain stream handler to the package logger.
    Calling it again only adjusts the level. A FileHandler the application
    attached already is a StreamHandler subclass and does not count.
    """
    logger.setLevel(level)
    if not any(type(handler) is logging.StreamHandler  # pylint: disable=unidiomatic-typecheck
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
