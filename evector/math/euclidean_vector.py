# evector/math/euclidean_vector.py
"""
N‑мерный евклидов вектор (float64).

Хранилище – собственный одномерный ndarray фиксированной длины.
Норма вычисляется лениво и кэшируется до первого изменения компонент:
любая запись (set, [] =, get_mutable, +=, -=, *=, /=, assign) сбрасывает кэш.

Семантика значений:
    * копия (copy / from_vector / assign) – всегда глубокая, кэш не копируется;
    * перемещение (move / move_assign) – передаёт буфер без копирования,
      источник остаётся с размерностью 0 и без буфера.

Деление на ноль и единичный вектор нулевого вектора ошибкой не считаются –
результат содержит inf/nan по правилам IEEE.
"""

import operator
from collections import deque
from numbers import Real
from typing import Deque, Iterable, List, Optional

import numpy as np

from evector.utils.formatter import format_vector
from evector.utils.logger import logger

_DTYPE = np.float64

# общий «нулевой» буфер для векторов, у которых забрали хранилище
_EMPTY = np.empty(0, dtype=_DTYPE)
_EMPTY.setflags(write=False)


class DimensionMismatchError(ValueError):
    """Покомпонентная операция над векторами разной размерности."""

    def __init__(self, operation: str, left: int, right: int):
        super().__init__(
            f"{operation}: dimension mismatch ({left} != {right})"
        )
        self.operation = operation
        self.left = left
        self.right = right


def _check_dimension(dimension) -> int:
    n = operator.index(dimension)
    if n < 0:
        raise ValueError(f"dimension must be non-negative, got {n}")
    return n


def _magnitude(value) -> float:
    if not isinstance(value, Real):
        raise TypeError(
            f"magnitude must be a real number, got {type(value).__name__}"
        )
    return float(value)


def _reciprocal(scalar) -> float:
    if scalar == 0:
        # 1/±0 -> ±inf по правилам IEEE, без ZeroDivisionError
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0) / np.float64(scalar))
    return float(1 / scalar)


class MagnitudeRef:
    """
    Изменяемая «ссылка» на одну компоненту вектора.
    Каждая запись через ссылку снова сбрасывает кэш нормы владельца.
    """

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: "EuclideanVector", index: int):
        self._owner = owner
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> float:
        return self._owner.get(self._index)

    @value.setter
    def value(self, magnitude: float) -> None:
        self._owner.set(self._index, magnitude)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"MagnitudeRef(index={self._index}, value={self.value!r})"


class EuclideanVector:
    """Вектор фиксированной размерности с кэшируемой евклидовой нормой."""

    __slots__ = ("_v", "_norm")

    # изменяемый объект – не хэшируется
    __hash__ = None
    # numpy‑скаляры не должны превращать вектор в ndarray (2.0 * v)
    __array_ufunc__ = None

    def __init__(self, dimension: int = 1, magnitude: float = 0.0):
        n = _check_dimension(dimension)
        self._v: Optional[np.ndarray] = np.full(n, _magnitude(magnitude), dtype=_DTYPE)
        self._norm: Optional[float] = None

    # -----------------------------------------------------------------
    # альтернативные конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def _wrap(cls, array: Optional[np.ndarray]) -> "EuclideanVector":
        obj = cls.__new__(cls)
        obj._v = array
        obj._norm = None
        return obj

    @classmethod
    def with_dimension(cls, dimension: int) -> "EuclideanVector":
        return cls(dimension)

    @classmethod
    def with_dimension_and_fill(cls, dimension: int,
                                magnitude: float) -> "EuclideanVector":
        return cls(dimension, magnitude)

    @classmethod
    def from_sequence(cls, magnitudes: Iterable[float]) -> "EuclideanVector":
        """Любая конечная упорядоченная последовательность: list, tuple, deque, генератор, ndarray."""
        return cls._wrap(np.fromiter((_magnitude(m) for m in magnitudes), dtype=_DTYPE))

    @classmethod
    def from_vector(cls, other: "EuclideanVector") -> "EuclideanVector":
        """Глубокая копия `other` (норма не копируется)."""
        return cls._wrap(other._data.copy())

    @classmethod
    def move(cls, other: "EuclideanVector") -> "EuclideanVector":
        """Забрать буфер `other` без копирования; `other` становится пустым."""
        obj = cls._wrap(other._v)
        other._v = None
        other._norm = None
        logger.debug(f"[EuclideanVector] moved {obj.dimension} magnitudes")
        return obj

    def copy(self) -> "EuclideanVector":
        return EuclideanVector.from_vector(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "EuclideanVector":
        return self.copy()

    # -----------------------------------------------------------------
    # присваивание
    # -----------------------------------------------------------------
    def assign(self, other: "EuclideanVector") -> "EuclideanVector":
        if other is not self:
            self._v = other._data.copy()
            self._norm = None
        return self

    def move_assign(self, other: "EuclideanVector") -> "EuclideanVector":
        if other is not self:
            self._v = other._v
            self._norm = None
            other._v = None
            other._norm = None
            logger.debug(f"[EuclideanVector] move-assigned {self.dimension} magnitudes")
        return self

    # -----------------------------------------------------------------
    # размерность и доступ к компонентам
    # -----------------------------------------------------------------
    @property
    def _data(self) -> np.ndarray:
        return _EMPTY if self._v is None else self._v

    @property
    def dimension(self) -> int:
        return 0 if self._v is None else int(self._v.shape[0])

    def get_num_dimensions(self) -> int:
        return self.dimension

    def __len__(self) -> int:
        return self.dimension

    def _check_index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < self.dimension:
            raise IndexError(
                f"magnitude index {i} out of range for dimension {self.dimension}"
            )
        return i

    def get(self, index: int) -> float:
        return float(self._v[self._check_index(index)])

    __getitem__ = get

    def set(self, index: int, magnitude: float) -> None:
        i = self._check_index(index)
        self._v[i] = _magnitude(magnitude)
        self._norm = None

    __setitem__ = set

    def get_mutable(self, index: int) -> MagnitudeRef:
        """Ссылка на компоненту; сам вызов уже сбрасывает кэш нормы."""
        i = self._check_index(index)
        self._norm = None
        return MagnitudeRef(self, i)

    def __iter__(self):
        return iter(self._data.tolist())

    # -----------------------------------------------------------------
    # норма
    # -----------------------------------------------------------------
    @property
    def cached_norm(self) -> Optional[float]:
        return self._norm

    @property
    def buffer_address(self) -> Optional[int]:
        """Адрес буфера (None у вектора, из которого сделали move)."""
        if self._v is None:
            return None
        return int(self._v.__array_interface__["data"][0])

    def euclidean_norm(self) -> float:
        if self._norm is None:
            with np.errstate(over="ignore", invalid="ignore"):
                self._norm = float(np.linalg.norm(self._data))
        return self._norm

    def unit_vector(self) -> "EuclideanVector":
        norm = self.euclidean_norm()
        with np.errstate(divide="ignore", invalid="ignore"):
            return EuclideanVector._wrap(self._data / norm)

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        return (self.dimension == other.dimension
                and bool(np.array_equal(self._data, other._data)))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def _require_same_dimension(self, other: "EuclideanVector", operation: str):
        if self.dimension != other.dimension:
            raise DimensionMismatchError(operation, self.dimension, other.dimension)

    def __add__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimension(other, "add")
        with np.errstate(all="ignore"):
            return EuclideanVector._wrap(self._data + other._data)

    def __sub__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimension(other, "subtract")
        with np.errstate(all="ignore"):
            return EuclideanVector._wrap(self._data - other._data)

    def dot(self, other: "EuclideanVector") -> float:
        """Скалярное произведение."""
        self._require_same_dimension(other, "dot")
        with np.errstate(all="ignore"):
            return float(np.dot(self._data, other._data))

    def __mul__(self, other):
        if isinstance(other, EuclideanVector):
            return self.dot(other)
        if isinstance(other, Real):
            with np.errstate(all="ignore"):
                return EuclideanVector._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * _reciprocal(scalar)

    # -----------------------------------------------------------------
    # составные операторы (меняют левый операнд, сбрасывают кэш)
    # -----------------------------------------------------------------
    def __iadd__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimension(other, "add")
        if self._v is not None:
            with np.errstate(all="ignore"):
                np.add(self._v, other._data, out=self._v)
        self._norm = None
        return self

    def __isub__(self, other: "EuclideanVector") -> "EuclideanVector":
        if not isinstance(other, EuclideanVector):
            return NotImplemented
        self._require_same_dimension(other, "subtract")
        if self._v is not None:
            with np.errstate(all="ignore"):
                np.subtract(self._v, other._data, out=self._v)
        self._norm = None
        return self

    def __imul__(self, scalar) -> "EuclideanVector":
        if isinstance(scalar, EuclideanVector):
            raise TypeError("in-place multiplication takes a scalar, not a vector")
        if not isinstance(scalar, Real):
            return NotImplemented
        if self._v is not None:
            with np.errstate(all="ignore"):
                np.multiply(self._v, float(scalar), out=self._v)
        self._norm = None
        return self

    def __itruediv__(self, scalar) -> "EuclideanVector":
        if not isinstance(scalar, Real):
            return NotImplemented
        self *= _reciprocal(scalar)
        return self

    # -----------------------------------------------------------------
    # преобразования
    # -----------------------------------------------------------------
    def to_list(self) -> List[float]:
        return self._data.tolist()

    def to_deque(self) -> Deque[float]:
        return deque(self._data.tolist())

    def as_np(self) -> np.ndarray:
        """Копия буфера (float64)."""
        return self._data.copy()

    # -----------------------------------------------------------------
    # представление
    # -----------------------------------------------------------------
    def __str__(self) -> str:
        return format_vector(self)

    def __repr__(self) -> str:
        return f"EuclideanVector({self.to_list()!r})"
