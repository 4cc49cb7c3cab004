import logging
import sys

from scramble.common import config

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name):
    """
    Returns a named logger writing to stderr.
    Calling it twice with the same name does not add a second handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(config.LOG_LEVEL)
    return logger
