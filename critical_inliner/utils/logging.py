"""Logging utility for Critical Inliner."""

import logging
import os
from typing import Optional
from .config import LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL

def setup_logging(log_level: int = LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Root logging level
        log_file: Optional file to copy log records into
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

# Exported functions
__all__ = ['setup_logging']
