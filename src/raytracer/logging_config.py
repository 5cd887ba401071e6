"""
Logging Configuration
Sets up the logger for the 'raytracer' package: console output plus an
optional log file (the demo writes one next to its image).
"""
import logging
import sys
from typing import Optional

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT: str = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'raytracer' namespace logger.

    Calling it again replaces the previous handlers; their files are closed.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("raytracer")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized (level={logging.getLevelName(level)}, file={log_file}).")
    return logger
