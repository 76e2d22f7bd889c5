"""
Logging configuration for the synwell namespace.
"""
import logging
import sys


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the logger of the 'synwell' namespace.

    Parameters
    -------
    level: int, optional
        Logging level (e.g. logging.DEBUG, logging.INFO).
        By default set to logging.INFO.

    log_file: str, optional
        Path of a file that receives a copy of the log.
        By default set to None (console only).

    Returns
    -------
    logger: logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger("synwell")
    logger.setLevel(level)

    # Avoid duplicated records when called twice in the same session
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
