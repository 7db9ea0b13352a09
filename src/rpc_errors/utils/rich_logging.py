"""Console logging with compact, colored formatting."""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

PACKAGE_LOGGER = "rpc_errors"


class ConsoleLogFormatter(logging.Formatter):
    """Formatter producing ``HH:MM:SS LEVEL [logger] message``."""

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        if self.use_colors:
            level_colors = {
                "DEBUG": "\033[36m",      # Cyan
                "INFO": "\033[32m",       # Green
                "WARNING": "\033[33m",    # Yellow
                "ERROR": "\033[31m",      # Red
                "CRITICAL": "\033[35m",   # Magenta
            }
            reset = "\033[0m"
            level_color = level_colors.get(record.levelname, "")
        else:
            level_color = ""
            reset = ""

        message = (
            f"{timestamp} {level_color}{record.levelname:8s}{reset} "
            f"[{record.name}] {record.getMessage()}"
        )
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(
    log_level: str = "WARNING",
    use_colors: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        use_colors: Force colors on/off; defaults to whether the stream is a TTY
        stream: Output stream (defaults to stderr)

    Returns:
        The configured package logger
    """
    stream = stream or sys.stderr
    if use_colors is None:
        use_colors = stream.isatty() if hasattr(stream, "isatty") else False

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Close existing handlers before clearing (prevents file descriptor leak)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ConsoleLogFormatter(use_colors=use_colors))
    logger.addHandler(handler)
    return logger
