"""Logger configuration for applications embedding panchayat."""

import logging
import os
import sys

__all__ = ("setup_logger",)

def setup_logger(
        name: str = "panchayat",
        level: str|None = None,
        format_string: str|None = None,
        ) -> logging.Logger:
    """Configures and returns the `name` logger.

    The level defaults to the LOG_LEVEL environment variable, or INFO, which
    is also used for unknown level names.
    A stdout handler is only attached if the logger has no real handler yet
    (the package installs a NullHandler on import), so calling
    this more than once is harmless.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(name)

    if all(isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        logger.propagate = False

    return logger
