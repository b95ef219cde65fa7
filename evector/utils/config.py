"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from evector.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "format": {"precision": 6, "separator": " ", "open": "[", "close": "]"},
}

class Config:
    """
    Singleton‑подобный объект конфигурации.

    Ключи:
        * log_level – уровень логгера "evector", применяется сразу при загрузке;
        * format    – настройки format_vector (precision, separator, open, close).
          Используются только там, где их передают явно через format_options;
          str(vector) всегда печатает в виде по‑умолчанию "[1 2 3]".
    """
    _instance = None

    def __new__(cls, path: str = "evector.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = _merged(DEFAULT_CONFIG, loaded)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()
        self.apply_logging()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def apply_logging(self):
        try:
            set_log_level(self["log_level"])
        except (TypeError, ValueError) as exc:
            logger.error(f"[Config] Bad log_level: {exc}, keeping current level")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()
        if key == "log_level":
            self.apply_logging()

    def get(self, key, default=None):
        return self.data.get(key, default)

    @property
    def format_options(self) -> dict:
        """
        Настройки форматтера с подставленными значениями по‑умолчанию.
        str(vector) их не читает – передавайте явно: format_vector(v, cfg.format_options).
        """
        options = self["format"]
        if options is None:
            options = {}
        if not isinstance(options, dict):
            logger.error(f"[Config] 'format' must be an object, got {options!r}; using defaults")
            options = {}
        return _merged(DEFAULT_CONFIG["format"], options)


def _merged(defaults: dict, overrides: dict) -> dict:
    # вложенные словари сливаются, остальное перезаписывается
    result = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merged(result[key], value)
        else:
            result[key] = value
    return result
