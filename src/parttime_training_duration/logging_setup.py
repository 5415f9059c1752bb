"""
Logging setup for the CLI and the Streamlit app.

The calculation modules only create module loggers; handlers are
configured here by the entry points.
"""

import logging
import os
import sys


def setup_logging(level: str = None):
    """Configure the root logger with a single stdout handler."""
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # Streamlit reruns the script on every input change
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
