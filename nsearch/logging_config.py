import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "NSEARCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def resolve_log_level(verbose: bool = False) -> str:
    """--verbose wins, then NSEARCH_LOG_LEVEL, then the default."""
    if verbose:
        return "DEBUG"
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    try:
        logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)
    except ValueError:
        logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL, format=_CONSOLE_FORMAT)
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
