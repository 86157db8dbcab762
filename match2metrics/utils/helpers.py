"""
Utility functions and logging configuration for match analytics.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

class ColorFormatter(logging.Formatter):
    """
    Custom formatter to add color to log output based on log level.
    """
    COLOR_CODES = {
        logging.DEBUG: "\033[36m",    # Cyan
        logging.INFO: "\033[32m",     # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",    # Red
        logging.CRITICAL: "\033[41m\033[97m", # White on Red BG
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelno, "")
        message = super().format(record)
        if color:
            message = f"{color}{message}{self.RESET}"
        return message

def setup_logging(log_level: str = "INFO",
                  log_file: Optional[Path] = None,
                  log_format: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the match2metrics package logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        log_format: Custom log format string

    Returns:
        Configured logger instance
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    level = getattr(logging, log_level.upper())

    logger = logging.getLogger("match2metrics")
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColorFormatter(log_format))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    return logger


def create_output_directories(base_path: Path) -> Dict[str, Path]:
    """
    Create the output directory structure for exports and plots.

    Args:
        base_path: Base output directory

    Returns:
        Dictionary mapping directory names to paths
    """
    directories = {
        "base": base_path,
        "exports": base_path / "exports",
        "plots": base_path / "plots",
    }

    for path in directories.values():
        path.mkdir(parents=True, exist_ok=True)

    return directories
