import logging
import sys
from typing import Optional

from petclinic.core.config import get_settings


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``petclinic`` logger.

    A single stream handler is attached; calling this again only updates the level.
    """
    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    logger = logging.getLogger("petclinic")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(handler)

    logger.debug("Logging is set up.")
    return logger
