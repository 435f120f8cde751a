"""
Logging Configuration
=====================
Attaches handlers to the `rasterpaint` logger.

Every module logs through `logging.getLogger(__name__)`; nothing below the
package logger owns a handler, so calling `setup_logging` again (a second
window, a test) replaces the output instead of duplicating it.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "rasterpaint"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """Accept logging.DEBUG as well as "debug"/"DEBUG"; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Route the package logger to stdout and, optionally, to a file.

    Args:
        level: Level for the logger and its handlers, as an int or level name.
        log_file: Path of a log file, truncated on startup. Parent
            directories are created.

    Returns:
        The configured package logger.
    """
    level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file:
        logger.info("Logging to stdout and %s.", log_file)
    else:
        logger.info("Logging to stdout.")
    return logger
