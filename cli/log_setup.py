"""
log_setup.py - Logging Configuration for the command line
"""

import logging
import sys


def setup_logging(verbose: bool = False, stream=None) -> logging.Logger:
    """
    Initialize logging for stampit.

    Args:
        verbose: DEBUG level if True, WARNING otherwise
        stream: Output stream (defaults to stderr)

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # exifread warns about every odd file it sees
    logging.getLogger("exifread").setLevel(logging.ERROR)

    logger.handlers.clear()
    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
