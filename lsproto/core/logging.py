import logging
import os
from typing import Optional, Set

DEBUG_ENV_VAR = "LSPROTO_DEBUG"

_debug: bool = os.environ.get(DEBUG_ENV_VAR, "") not in {"", "0", "false"}
_created_logger_names: Set[str] = set()


def _level() -> int:
    return logging.DEBUG if _debug else logging.WARNING


def get_logger(name: str, override_level: Optional[int] = None) -> logging.Logger:
    logger = logging.getLogger(name)

    if override_level is not None:
        logger.setLevel(override_level)
    else:
        _created_logger_names.add(name)
        logger.setLevel(_level())
    return logger


def set_debug(debug: bool) -> None:
    global _debug
    _debug = debug
    for name in _created_logger_names:
        logging.getLogger(name).setLevel(_level())