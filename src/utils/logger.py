"""
Logger utility for consistent logging across the restaurant core.

Features:
- One log format for every module
- Level taken from the LOG_LEVEL / DEBUG environment variables
- Console handler on stdout
- Rotating error log file under ./logs
- Safe to call repeatedly; existing root handlers are replaced, not duplicated
"""

import os
import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def _level_from_env() -> int:
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, log_level_name, logging.INFO)

def setup_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    Args:
        log_dir: Directory for the rotating error log (default: ./logs)

    Returns:
        logging.Logger: The application logger
    """
    debug_mode = os.getenv("DEBUG", "False").lower() == "true"
    log_level = _level_from_env()

    log_dir = Path(log_dir or "logs")
    log_dir.mkdir(exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    root_logger.addHandler(console_handler)

    error_file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "error.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    root_logger.addHandler(error_file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )
    logging.getLogger('aiosqlite').setLevel(logging.WARNING)

    logger = logging.getLogger('restaurant_core')
    logger.info(f"Logging initialized with level {logging.getLevelName(log_level)}")
    return logger

def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger, attaching a stdout handler only if nothing is configured yet.

    Args:
        name: Logger name, normally ``__name__``
        level: Explicit level; defaults to LOG_LEVEL from the environment

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(level if level is not None else _level_from_env())

    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
