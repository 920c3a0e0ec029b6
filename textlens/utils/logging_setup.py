"""Logging configuration helpers."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: str = "WARNING", log_format: Optional[str] = None) -> None:
    """
    Configure the root logger.
    
    Safe to call more than once: later calls only change the level.
    Output goes to stderr so command output on stdout stays clean.
    
    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_format: Optional format string overriding the default
    """
    global _configured
    
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    
    if _configured:
        return
    
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format or LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.
    
    Args:
        name: Logger name, usually __name__
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)
