"""
Logging configuration for geoscape.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..settings import Configuration

LOG_FILE_NAME = "geoscape.log"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """CSV-safe formatter for the log file."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.ljust(8)
        duration = f"{int(record.relativeCreated)} ms"
        module = record.name
        line_no = str(record.lineno)
        message = record.getMessage()

        # Quotes are doubled, as CSV expects
        message = message.replace('"', '""')

        return f'"{timestamp}";{level};"{duration}";"{module}";"{line_no}";"{message}"'


def log_file_path(config: "Configuration") -> Optional[Path]:
    """Log file location inside the user folder (None without a user folder)."""
    if config.user_folder is None:
        return None
    return config.user_folder / LOG_FILE_NAME


def setup_logging(config: "Configuration", use_colors: bool = True) -> None:
    """
    Setup application logging with console and file handlers.

    The console shows INFO and above, or DEBUG when the ``debug`` option is
    on. The log file in the user folder is truncated on every start and
    always captures DEBUG.

    Args:
        config: Initialized configuration
        use_colors: Color level names on the console
    """
    debug = config.get_bool("debug")
    console_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    geoscape_logger = logging.getLogger("geoscape")
    geoscape_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    fmt = "%(asctime)s : %(levelname)-8s : %(message)s"
    if use_colors:
        console_formatter: logging.Formatter = ColoredFormatter(fmt=fmt, datefmt="%H:%M:%S")
    else:
        console_formatter = logging.Formatter(fmt=fmt, datefmt="%H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    log_path = log_file_path(config)
    if log_path is not None:
        try:
            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
            root_logger.addHandler(file_handler)
        except OSError as e:
            # If file logging fails, just continue with console logging
            root_logger.warning(f"Could not setup file logging: {e}")
            log_path = None

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    logger.debug(f"Console logging: {logging.getLevelName(console_level)} (colors: {use_colors})")
    if log_path is not None:
        logger.debug(f"File logging: DEBUG at {log_path.absolute()}")
