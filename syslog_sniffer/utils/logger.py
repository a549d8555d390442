from loguru import logger
import sys
import os
from typing import Optional

from syslog_sniffer.config import determine_log_level

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _known_level(name: str) -> str:
    """Level name loguru knows, falling back to ERROR for unknown names."""
    try:
        return logger.level(name.upper()).name
    except ValueError:
        return "ERROR"


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> str:
    """
    Configure loguru sinks for a run.

    Logs go to stderr; stdout carries only the JSON reports.
    Returns the console level in use.
    """
    env_level = os.environ.get("LOGURU_LEVEL") or None
    if env_level is not None:
        env_level = _known_level(env_level)
    level = determine_log_level(debug, env_level is not None) or env_level

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="10 days",
            compression="zip",
            level="DEBUG",
            format=FILE_FORMAT
        )

    return level
