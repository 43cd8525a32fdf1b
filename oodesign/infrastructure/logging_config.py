"""
Logging setup for the handbook tools.

Diagnostics go to stderr so rendered markdown and lint reports on stdout
stay clean.
"""

import logging
import sys


_logging_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the `oodesign` logger once; later calls only adjust the level."""
    global _logging_configured
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("oodesign")
    logger.setLevel(numeric_level)

    if _logging_configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    _logging_configured = True