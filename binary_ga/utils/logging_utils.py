"""
Logging utilities

This module configures logging for the operator package and its callers.
"""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = 'binary_ga',
                 log_file: Optional[str] = None,
                 level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Set up a logger with console and optional file output

    Args:
        name: Logger name. The default covers every module of the package
        log_file: Optional log file path
        level: Logging level, as a number or a name such as 'DEBUG'

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level_name}")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicate messages
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
