"""
Logging helpers for pointgeometry

The library only creates loggers; handlers are attached by the application
(or the demo program) through `setup_logging`.
"""

import logging

PACKAGE_LOGGER = "pointgeometry"

_configured = False


def setup_logging(level=logging.INFO):
    """
    Attach a console handler to the package logger

    Calling it again only updates the level.

    Parameters:
    -----------
    level : int, optional
        Logging level for the package logger (default: logging.INFO)
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    _configured = True


def get_logger(name):
    return logging.getLogger(name)
