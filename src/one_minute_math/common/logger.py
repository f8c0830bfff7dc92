"""Package-wide logger."""
import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("one_minute_math")


def configure_logging(level: str = "WARNING") -> None:
    """
    Attach a single stderr handler to the package logger.

    Safe to call more than once: the handler is only added the first time.

    :param str level: Logging level name (e.g. "INFO", "DEBUG")
    """
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
