"""
Container Limits — ограничения размеров контейнеров

Единственное место, где задаются верхние границы:
- длины DynamicVector (MAX_VECTOR_SIZE)
- размерности DynamicMatrix (MAX_MATRIX_SIZE)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= length <= MAX_VECTOR_SIZE для любого валидного вектора
2. 1 <= N <= MAX_MATRIX_SIZE для любой валидной матрицы
3. MAX_MATRIX_SIZE <= MAX_VECTOR_SIZE (строки матрицы — тоже векторы)
"""

import logging
import operator
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from src.core.containers.errors import IndexOutOfRange, InvalidSize

logger = logging.getLogger(__name__)

# =============================================================================
# ПРЕДЕЛЬНЫЕ РАЗМЕРЫ
# =============================================================================

# Максимальная длина вектора (элементов)
MAX_VECTOR_SIZE: Final[int] = 100_000_000

# Максимальная размерность квадратной матрицы (N для N x N)
MAX_MATRIX_SIZE: Final[int] = 10_000


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class ContainerLimits(BaseModel):
    """
    Набор ограничений размеров.

    Immutable модель (frozen=True): лимиты процесса не меняются после создания.
    """

    max_vector_size: int = Field(..., gt=0, description="Максимальная длина вектора")
    max_matrix_size: int = Field(..., gt=0, description="Максимальная размерность матрицы")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_matrix_fits_vector(self) -> "ContainerLimits":
        """Строка матрицы длины N должна быть допустимым вектором."""
        if self.max_matrix_size > self.max_vector_size:
            raise ValueError(
                f"max_matrix_size {self.max_matrix_size} exceeds "
                f"max_vector_size {self.max_vector_size}"
            )
        return self


DEFAULT_LIMITS: Final[ContainerLimits] = ContainerLimits(
    max_vector_size=MAX_VECTOR_SIZE,
    max_matrix_size=MAX_MATRIX_SIZE,
)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _as_int(value: Any, name: str) -> int:
    # bool является подклассом int, но True/False как размер не допускается
    if isinstance(value, bool):
        raise InvalidSize(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidSize(f"{name} must be an integer, got {value!r}") from None


def validate_size(value: Any, name: str, max_value: int) -> int:
    """
    Валидация размера: целое число в [1, max_value].

    Args:
        value: Проверяемый размер
        name: Имя параметра (для сообщения об ошибке)
        max_value: Верхняя граница (включительно)

    Returns:
        Размер как int

    Raises:
        InvalidSize: Если value не целое, < 1 или > max_value
    """
    size = _as_int(value, name)

    if size < 1 or size > max_value:
        logger.debug("Rejected %s=%d (allowed 1..%d)", name, size, max_value)
        raise InvalidSize(f"{name} must be in [1, {max_value}], got {size}")

    return size


def validate_vector_size(size: Any, limits: ContainerLimits = DEFAULT_LIMITS) -> int:
    """
    Валидация длины вектора.

    Raises:
        InvalidSize: Если size вне [1, limits.max_vector_size]
    """
    return validate_size(size, "vector size", limits.max_vector_size)


def validate_matrix_size(size: Any, limits: ContainerLimits = DEFAULT_LIMITS) -> int:
    """
    Валидация размерности матрицы.

    Raises:
        InvalidSize: Если size вне [1, limits.max_matrix_size]
    """
    return validate_size(size, "matrix size", limits.max_matrix_size)


def validate_index(index: Any, length: int) -> int:
    """
    Валидация индекса для проверяемого доступа.

    Отрицательные индексы НЕ интерпретируются как отсчёт с конца.

    Args:
        index: Проверяемый индекс
        length: Текущая длина контейнера

    Returns:
        Индекс как int

    Raises:
        IndexOutOfRange: Если index не целое или вне [0, length)
    """
    if isinstance(index, bool):
        raise IndexOutOfRange(f"Index must be an integer, got {index!r}")
    try:
        idx = operator.index(index)
    except TypeError:
        raise IndexOutOfRange(f"Index must be an integer, got {index!r}") from None

    if idx < 0 or idx >= length:
        raise IndexOutOfRange(f"Index {idx} out of range [0, {length})")

    return idx
