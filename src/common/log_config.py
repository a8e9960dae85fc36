"""
Logging Configuration

Configures logging for the guide scripts.
Console output goes to stderr to keep stdout clean for run summaries.
Scrape runs can also keep a timestamped log file next to the scraped data.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"

# Chatty third-party loggers used by the scraper
NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure the "src" logger for a script run.

    Args:
        verbose: DEBUG level, third-party loggers included
        quiet: WARNING level on the console
        log_file: Optional path that also receives every record at DEBUG level
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("src")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
