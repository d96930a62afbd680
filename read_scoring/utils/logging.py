"""Logging setup for the scoring engine and its HTTP host.

Library modules only ask for loggers under the ``read_scoring`` tree; the
service entry point calls `setup_logging` once with LOG_LEVEL / LOG_FILE.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "read_scoring"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Request logs from these drown out job progress at INFO
_QUIET_LOGGERS = ("urllib3", "werkzeug")


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name or number to a logging level; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: Union[str, int] = "INFO", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Attach console (and optionally file) output to the read_scoring logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name such as "debug" or a logging constant
        log_file: File that mirrors console output; parent dirs are created

    Returns:
        The read_scoring root logger
    """
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    return logging.getLogger(name)
