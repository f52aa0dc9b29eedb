"""
Logging for the saloon registry.

Only the ``saloon_api`` logger tree is configured, so uvicorn and the
test runner keep control of the root logger.  Records still propagate
to the root logger.  Set ``LOG_FILE`` to also write them to a file.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "saloon_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the package logger and return it.

    Repeated calls (one per ``create_app``) only update the level.
    An unknown level name falls back to INFO.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
