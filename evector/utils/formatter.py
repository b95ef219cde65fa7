"""
Текстовое представление векторов: "[1 2 3]" и отладочный дамп.
Числа печатаются как в потоке C++ по‑умолчанию (%g, 6 значащих цифр).
"""

from typing import Mapping, Optional
from evector.utils.logger import logger

DEFAULT_PRECISION = 6


def format_magnitude(m: float, precision: int = DEFAULT_PRECISION) -> str:
    return f"{float(m):.{precision}g}"


def format_vector(vector, options: Optional[Mapping] = None) -> str:
    """`[m0 m1 … mN]`; вектор размерности 0 (и «пустой» после move) – `[]`."""
    opts = options or {}
    precision = opts.get("precision", DEFAULT_PRECISION)
    sep = opts.get("separator", " ")
    body = sep.join(format_magnitude(m, precision) for m in vector)
    return f"{opts.get('open', '[')}{body}{opts.get('close', ']')}"


def describe(vector) -> str:
    """
    Многострочный дамп состояния: размерность, компоненты,
    закэшированная норма и адрес буфера. Для вектора без буфера – "Null".
    """
    if vector.buffer_address is None:
        return "Null"
    norm = vector.cached_norm
    lines = [
        f"Number of dimensions: {vector.dimension}",
        "Magnitudes: " + " ".join(format_magnitude(m) for m in vector),
        "Euclidean norm = "
        + ("undefined" if norm is None else format_magnitude(norm)),
        f"Array memory address = {hex(vector.buffer_address)}",
    ]
    return "\n".join(lines)


def print_info(vector) -> str:
    text = describe(vector)
    logger.info(text)
    return text


def print_magnitudes(vector) -> str:
    text = " ".join(format_magnitude(m) for m in vector)
    logger.info(text)
    return text


def print_num_dimensions(vector) -> str:
    text = str(vector.dimension)
    logger.info(text)
    return text
