"""Package wide logger."""
import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("infix_interpreter")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the level of the package logger.

    :param level: Level name (e.g. "DEBUG") or numeric level
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
