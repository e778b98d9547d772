"""utils/logging.py

Logging setup for base_url.

The library itself only emits DEBUG records on the ``base_url`` logger and
installs a NullHandler; applications opt in with configure_logging().
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "base_url"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: str) -> int:
    """Map a level name to its logging constant, INFO when unknown."""
    name = (level or "INFO").upper().strip()
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(name, logging.INFO)


def configure_logging(
    *,
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    enable_file: bool = False,
) -> Optional[Path]:
    """
    Attach console (and optionally file) handlers to the package logger.

    Args:
        level: Console level name.
        log_file: Destination for the file handler.
        enable_file: Whether to log to ``log_file`` at DEBUG.

    Returns:
        The log file path when file logging is enabled, else None.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(resolve_log_level(level))
    console.setFormatter(formatter)
    logger.addHandler(console)

    file_path: Optional[Path] = None
    if enable_file:
        if log_file is None:
            raise ValueError("log_file is required when enable_file is set")
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return file_path


def get_logger(name: str) -> logging.Logger:
    """Return ``name`` under the package logger hierarchy."""
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
