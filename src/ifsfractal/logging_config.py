"""
Logging Configuration
Sets up the global logger for the application.

Setting the environment variable IFSFRACTAL_DEBUG to a non-empty value other
than "0" switches the default level to DEBUG and also writes the log to
config.LOG_FILE.
"""
import logging
import os
import sys
from typing import Optional

from ifsfractal.config import LOG_FILE

DEBUG_ENV_VAR = "IFSFRACTAL_DEBUG"


def debug_requested() -> bool:
    """True if IFSFRACTAL_DEBUG is set to something other than '' or '0'."""
    return os.environ.get(DEBUG_ENV_VAR, "") not in ("", "0")


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'ifsfractal' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). If omitted,
            DEBUG when IFSFRACTAL_DEBUG is set, else INFO.
        log_file: Optional path to save logs to a file. If omitted and
            IFSFRACTAL_DEBUG is set, config.LOG_FILE is used.
    """
    if debug_requested():
        level = logging.DEBUG if level is None else level
        log_file = LOG_FILE if log_file is None else log_file
    elif level is None:
        level = logging.INFO

    logger = logging.getLogger("ifsfractal")
    logger.setLevel(level)

    # Avoid duplicate logs when the app is restarted in the same interpreter
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
