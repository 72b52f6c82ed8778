"""
Core containers для динамической линейной алгебры

Вектор фиксированной длины и квадратная матрица из векторов-строк
с проверяемым/непроверяемым доступом и арифметикой.
"""

# Errors
from src.core.containers.errors import (
    ContainerError,
    IndexOutOfRange,
    InvalidSize,
    NullSource,
    SizeMismatch,
    StreamReadError,
)

# Limits
from src.core.containers.limits import (
    DEFAULT_LIMITS,
    MAX_MATRIX_SIZE,
    MAX_VECTOR_SIZE,
    ContainerLimits,
    validate_index,
    validate_matrix_size,
    validate_vector_size,
)

# Vector
from src.core.containers.vector import DynamicVector, swap

# Matrix
from src.core.containers.matrix import DynamicMatrix

__all__ = [
    # Errors
    "ContainerError",
    "IndexOutOfRange",
    "InvalidSize",
    "NullSource",
    "SizeMismatch",
    "StreamReadError",
    # Limits — Constants
    "MAX_MATRIX_SIZE",
    "MAX_VECTOR_SIZE",
    "DEFAULT_LIMITS",
    # Limits — Config
    "ContainerLimits",
    # Limits — Validation
    "validate_index",
    "validate_matrix_size",
    "validate_vector_size",
    # Containers
    "DynamicVector",
    "DynamicMatrix",
    "swap",
]
