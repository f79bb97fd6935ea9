"""
Logging configuration for clippy-ai.

User-facing output goes through click; this only wires up diagnostic logs.
"""

import logging
import sys
from typing import Optional


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Log at DEBUG instead of WARNING
        log_file: Optional file to log to in addition to stderr
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, handlers=handlers)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)

    # Reduce noise from HTTP libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
