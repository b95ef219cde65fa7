# evector/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета + смена уровня из конфигурации.
# ---------------------------------------------------------------

import logging
from typing import Union

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("evector")

logger = init_logger()

def set_log_level(level: Union[str, int]) -> int:
    """Сменить уровень общего логгера ("DEBUG", "info", 10 …)."""
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = value
    logger.setLevel(level)
    return level
