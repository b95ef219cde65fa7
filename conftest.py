# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: пара векторов и изолированный Config.
"""

import pytest

from evector.math import EuclideanVector
from evector.utils.config import Config
from evector.utils.logger import logger


@pytest.fixture
def vec_a() -> EuclideanVector:
    return EuclideanVector.from_sequence([1.0, 2.0, 3.0])


@pytest.fixture
def vec_b() -> EuclideanVector:
    return EuclideanVector.from_sequence([4.0, 5.0, 6.0])


@pytest.fixture
def config_path(tmp_path):
    """Путь к JSON‑файлу во временной папке; синглтон и уровень логгера восстанавливаются."""
    level = logger.level
    Config.reset()
    yield tmp_path / "evector.json"
    Config.reset()
    logger.setLevel(level)
