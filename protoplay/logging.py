import logging
import os


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger; ``PROTOPLAY_LOG_LEVEL`` picks its level (default WARNING)."""
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s")
    level = os.getenv("PROTOPLAY_LOG_LEVEL", "WARNING").upper()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level, logging.WARNING))
    return logger
