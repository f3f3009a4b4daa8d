"""
Logging Configuration
Sets up the package logger for the command-line tool.
"""
import logging
import sys
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the 'stonelayout' logger.

    Console messages go to stderr in a short form, since stdout carries the
    layout summary. The optional log file gets timestamped records.

    Args:
        level: Logging level, as a number or a name ("DEBUG", "INFO", ...)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("stonelayout")
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(logger.level)}.")
