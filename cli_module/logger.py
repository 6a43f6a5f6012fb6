"""
Centralized logging configuration for the cli plugin.
"""

import logging
from typing import Optional

from .config import DEFAULT_LOGGER_NAME, LOG_FORMAT, get_log_file, is_debug_enabled

# Global logger instance
_logger: Optional[logging.Logger] = None

def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Get the centralized logger instance."""
    global _logger

    if _logger is None:
        _logger = logging.getLogger(name)
        _logger.setLevel(logging.INFO)

        # Remove all existing handlers to avoid duplicate logs
        if _logger.hasHandlers():
            _logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT)
        handlers = []

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        log_file = get_log_file()
        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        level = logging.DEBUG if is_debug_enabled() else logging.INFO
        _logger.setLevel(level)
        for handler in handlers:
            handler.setLevel(level)
            _logger.addHandler(handler)

        if log_file:
            _logger.info(f"Logging to file: {log_file}")

    return _logger
