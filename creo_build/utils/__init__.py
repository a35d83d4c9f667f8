"""
Utility modules for the Creo build tool
"""

import logging
import math
import shutil
import sys
from pathlib import Path
from typing import Optional, Union


SIZE_UNITS = ["B", "KB", "MB"]
UNKNOWN_SIZE = "Unknown"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[34m',     # Blue
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[32m',  # Green
        'RESET': '\033[0m'
    }

    def format(self, record):
        if getattr(record, 'raw', False):
            return record.getMessage()

        if sys.stdout.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"

        return super().format(record)


class Logger:
    """Build tool logger"""

    SUCCESS = 25  # Between INFO and WARNING

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger

        Args:
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        logging.addLevelName(self.SUCCESS, "SUCCESS")

        self.logger = logging.getLogger("creo_build")
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self.logger.propagate = False

        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

        if verbose:
            fmt = "%(asctime)s [Creo] [%(levelname)s] %(message)s"
        else:
            fmt = "[Creo] [%(levelname)s] %(message)s"

        console_handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S"))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            self.logger.addHandler(file_handler)

    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)

    def info(self, msg: str):
        """Log info message"""
        self.logger.info(msg)

    def warning(self, msg: str):
        """Log warning message"""
        self.logger.warning(msg)

    def error(self, msg: str):
        """Log error message"""
        self.logger.error(msg)

    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)

    def raw(self, msg: str = ""):
        """Log raw message without formatting"""
        record = self.logger.makeRecord(
            self.logger.name, logging.INFO, "", 0, msg, (), None
        )
        record.raw = True
        self.logger.handle(record)


def format_size(num_bytes: int) -> str:
    """
    Format a byte count as a human readable string

    Args:
        num_bytes: Size in bytes

    Returns:
        String such as "0 B", "512 B", "1.5 KB" or "2 MB"
    """
    if num_bytes < 0:
        raise ValueError(f"Size cannot be negative: {num_bytes}")
    if num_bytes == 0:
        return "0 B"

    index = min(int(math.floor(math.log(num_bytes, 1024))), len(SIZE_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if index + 1 < len(SIZE_UNITS) and num_bytes >= 1024 ** (index + 1):
        index += 1

    # Round half up to two decimals
    value = math.floor(num_bytes * 100 / 1024 ** index + 0.5) / 100
    if value == int(value):
        value = int(value)
    return f"{value} {SIZE_UNITS[index]}"


def get_file_size(path: Union[str, Path]) -> str:
    """Formatted size of a file, or "Unknown" if it cannot be stat'ed"""
    try:
        return format_size(Path(path).stat().st_size)
    except OSError:
        return UNKNOWN_SIZE


def ensure_dir(path: Union[str, Path]) -> Path:
    """Create a directory (and parents) if it does not exist"""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def remove_dir(path: Union[str, Path]):
    """Recursively remove a directory; a missing directory is fine"""
    path = Path(path)
    if path.exists():
        shutil.rmtree(path)


def output_exists(path: Union[str, Path]) -> bool:
    return Path(path).exists()


__all__ = [
    "ColoredFormatter",
    "Logger",
    "format_size",
    "get_file_size",
    "ensure_dir",
    "remove_dir",
    "output_exists",
    "UNKNOWN_SIZE",
]
