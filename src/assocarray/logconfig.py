import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "assocarray"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] - %(message)s"


def get_level() -> str:
    """Return the level named by ``ASSOCARRAY_LOGGING_LEVEL``, or ``WARNING``."""
    return os.getenv("ASSOCARRAY_LOGGING_LEVEL", "WARNING")


def get_format() -> str:
    return os.getenv("ASSOCARRAY_LOGGING_FORMAT", DEFAULT_FORMAT)


def install_null_handler() -> logging.Logger:
    """Attach a single ``NullHandler`` to the package logger so library log
    records are dropped quietly until the host configures logging. The level
    and any other handlers are left untouched."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def get_handler(
    level: Optional[str] = None, fmt: Optional[str] = None
) -> logging.Handler:
    """Return a stderr handler if ``ASSOCARRAY_USE_DEV_LOGGER`` is ``true`` and a
    ``NullHandler`` otherwise."""
    if os.getenv("ASSOCARRAY_USE_DEV_LOGGER", "").lower() == "true":
        handler: logging.Handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(fmt or get_format()))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: Optional[str] = None
) -> logging.Logger:
    """Configure the package logger from the environment.

    Intended for applications and test sessions; the library never calls this
    itself. Handlers attached by an earlier call are replaced, handlers added
    by anything else are kept."""
    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for h in [h for h in logger.handlers if getattr(h, "_assocarray", False)]:
        logger.removeHandler(h)
    handler = get_handler(level=level, fmt=fmt)
    handler._assocarray = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
