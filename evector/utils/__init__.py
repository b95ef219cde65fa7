# evector/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * set_log_level – смена уровня логгера
    * Config        – JSON‑конфигурация
    * format_vector, describe, print_info – текстовое представление векторов
"""

from .logger import logger, set_log_level
from .config import Config, DEFAULT_CONFIG
from .formatter import (
    format_magnitude,
    format_vector,
    describe,
    print_info,
    print_magnitudes,
    print_num_dimensions,
)

__all__ = [
    "logger",
    "set_log_level",
    "Config",
    "DEFAULT_CONFIG",
    "format_magnitude",
    "format_vector",
    "describe",
    "print_info",
    "print_magnitudes",
    "print_num_dimensions",
]
