import os
import sys

from loguru import logger

def configure_logging(verbose: bool = False) -> None:
    """Route loguru to stderr; DEBUG with --verbose, else LOGURU_LEVEL or INFO."""
    level = "DEBUG" if verbose else os.environ.get("LOGURU_LEVEL", "INFO")
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")
    logger.enable("slidingsearch")
