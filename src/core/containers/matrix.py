"""
DynamicMatrix — квадратная матрица N x N из векторов-строк

Матрица ВЛАДЕЕТ полем _rows: DynamicVector[DynamicVector[T]].
Хранилище, copy/move/swap и равенство строк переиспользуются из DynamicVector;
матричная арифметика определяется здесь заново.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= N <= MAX_MATRIX_SIZE для любой сконструированной матрицы
2. Каждая строка имеет длину ровно N (квадратная матрица)
3. Строки не разделяют хранилище друг с другом и с другими матрицами
4. Перемещённая (moved-from) матрица: size() == 0

ФОРМУЛЫ:
    (m * s)[i][j] = m[i][j] * s
    (m * v)[i]    = dot(m[i], v)
    (a * b)[i][j] = Σ_k a[i][k] * b[k][j]   (k по возрастанию, старт с нуля)
"""

import logging
from functools import partial
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TextIO, TypeVar

from src.core.containers.errors import NullSource, SizeMismatch
from src.core.containers.limits import (
    DEFAULT_LIMITS,
    ContainerLimits,
    validate_index,
    validate_matrix_size,
)
from src.core.containers.vector import DynamicVector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DynamicMatrix(Generic[T]):
    """
    Квадратная матрица фиксированной размерности.

    Доступ:
    - m[i]             — строка (DynamicVector) без проверки, m[i][j] — элемент
    - m.at(i, j)       — с проверкой обоих индексов
    - m.set_at(i, j, x)
    """

    __slots__ = ("_rows", "_element_type")

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        size: int = 1,
        element_type: Callable[..., T] = int,
        limits: ContainerLimits = DEFAULT_LIMITS,
    ) -> None:
        """
        Args:
            size: Размерность N, 1..limits.max_matrix_size
            element_type: Тип (фабрика) элемента
            limits: Ограничения размеров (по умолчанию DEFAULT_LIMITS)

        Raises:
            InvalidSize: Если size вне допустимого диапазона
        """
        n = validate_matrix_size(size, limits)
        self._element_type = element_type
        self._rows: DynamicVector[DynamicVector[T]] = DynamicVector(
            n, element_type=partial(DynamicVector, n, element_type, limits), limits=limits
        )

    @classmethod
    def _adopt_rows(
        cls, rows: list[DynamicVector[T]], element_type: Callable[..., T]
    ) -> "DynamicMatrix[T]":
        """Матрица, забирающая готовые строки во владение (без копирования)."""
        matrix = cls.__new__(cls)
        matrix._element_type = element_type
        matrix._rows = DynamicVector._adopt(
            rows, partial(DynamicVector, len(rows), element_type)
        )
        return matrix

    @classmethod
    def from_rows(
        cls,
        rows: Optional[Iterable[Iterable[T]]],
        element_type: Optional[Callable[..., T]] = None,
        limits: ContainerLimits = DEFAULT_LIMITS,
    ) -> "DynamicMatrix[T]":
        """
        Матрица из последовательности строк (каждая строка копируется).

        Args:
            rows: N последовательностей длины N
            element_type: Тип элемента (по умолчанию — тип m[0][0])
            limits: Ограничения размеров

        Raises:
            NullSource: Если rows is None
            InvalidSize: Если N вне допустимого диапазона
            SizeMismatch: Если хотя бы одна строка не длины N
        """
        if rows is None:
            raise NullSource("DynamicMatrix.from_rows requires rows, got None")

        materialized = [list(row) for row in rows]
        n = validate_matrix_size(len(materialized), limits)

        for i, row in enumerate(materialized):
            if len(row) != n:
                raise SizeMismatch(
                    f"Row {i} has {len(row)} elements, expected {n} (square matrix)"
                )

        etype = element_type or type(materialized[0][0])
        return cls._adopt_rows(
            [DynamicVector.from_source(row, n, etype, limits) for row in materialized], etype
        )

    # =========================================================================
    # ВЛАДЕНИЕ: COPY / MOVE / ASSIGN / SWAP
    # =========================================================================

    def copy(self) -> "DynamicMatrix[T]":
        """Глубокая копия всех строк."""
        matrix = self.__class__.__new__(self.__class__)
        matrix._element_type = self._element_type
        matrix._rows = self._rows.copy()
        return matrix

    def __copy__(self) -> "DynamicMatrix[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DynamicMatrix[T]":
        return self.copy()

    def move(self) -> "DynamicMatrix[T]":
        """Передача строк новой матрице за O(1); self становится пустой."""
        matrix = self.__class__.__new__(self.__class__)
        matrix._element_type = self._element_type
        matrix._rows = self._rows.move()
        return matrix

    def assign(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """Копирующее присваивание (copy-and-swap)."""
        if other is self:
            return self

        temp = other.copy()
        self.swap(temp)
        return self

    def move_assign(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """Перемещающее присваивание: self забирает строки other, other пуста."""
        if other is self:
            return self

        self._rows.move_assign(other._rows)
        self._element_type = other._element_type
        return self

    def swap(self, other: "DynamicMatrix[T]") -> None:
        """Обмен строками за O(1)."""
        if not isinstance(other, DynamicMatrix):
            raise TypeError(f"Cannot swap DynamicMatrix with {type(other).__name__}")

        self._rows.swap(other._rows)
        self._element_type, other._element_type = other._element_type, self._element_type

    # =========================================================================
    # РАЗМЕР И ДОСТУП
    # =========================================================================

    @property
    def element_type(self) -> Callable[..., T]:
        return self._element_type

    def size(self) -> int:
        return self._rows.size()

    def __len__(self) -> int:
        return self._rows.size()

    def __iter__(self) -> Iterator[DynamicVector[T]]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> DynamicVector[T]:
        # Строка без проверки границ
        return self._rows[index]

    def at(self, i: int, j: int) -> T:
        """
        Проверяемое чтение элемента [i][j].

        Raises:
            IndexOutOfRange: Если i или j вне [0, N)
        """
        n = self._rows.size()
        return self._rows[validate_index(i, n)][validate_index(j, n)]

    def set_at(self, i: int, j: int, value: T) -> None:
        """
        Проверяемая запись элемента [i][j].

        Raises:
            IndexOutOfRange: Если i или j вне [0, N)
        """
        n = self._rows.size()
        self._rows[validate_index(i, n)][validate_index(j, n)] = value

    def tolist(self) -> list[list[T]]:
        return [row.tolist() for row in self._rows]

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: "DynamicMatrix[T]") -> bool:
        """Равные размерности и поэлементно равные строки."""
        if not isinstance(other, DynamicMatrix):
            return False
        return self._rows.equals(other._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self.equals(other)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _require_same_size(self, other: Any, operation: str) -> None:
        if not isinstance(other, DynamicMatrix):
            raise TypeError(
                f"Matrix {operation} requires a DynamicMatrix, got {type(other).__name__}"
            )
        if self.size() != other.size():
            raise SizeMismatch(
                f"Cannot {operation} matrices of sizes {self.size()} and {other.size()}"
            )

    def multiply_scalar(self, scalar: Any) -> "DynamicMatrix[T]":
        """Каждая строка умножается на скаляр."""
        return self._adopt_rows(
            [row.multiply(scalar) for row in self._rows], self._element_type
        )

    def multiply_vector(self, vector: DynamicVector[T]) -> DynamicVector[T]:
        """
        Матрично-векторное произведение: result[i] = dot(row_i, vector).

        Raises:
            SizeMismatch: Если len(vector) != N
        """
        if not isinstance(vector, DynamicVector):
            raise TypeError(
                f"Matrix-vector product requires a DynamicVector, got {type(vector).__name__}"
            )
        if vector.size() != self.size():
            raise SizeMismatch(
                f"Cannot multiply matrix of size {self.size()} by vector of size {vector.size()}"
            )

        return DynamicVector._adopt(
            [row.dot(vector) for row in self._rows], self._element_type
        )

    def multiply_matrix(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """
        Матричное произведение N x N, O(N^3).

        result[i][j] = Σ_k self[i][k] * other[k][j], k по возрастанию,
        результат предварительно заполнен нулём element_type().

        Raises:
            SizeMismatch: Если размерности различаются
        """
        self._require_same_size(other, "multiply")

        n = self.size()
        logger.debug("Multiplying %dx%d matrices", n, n)

        result_rows = [
            DynamicVector._adopt(
                [self._element_type() for _ in range(n)], self._element_type
            )
            for _ in range(n)
        ]

        for i in range(n):
            left = self._rows[i]
            target = result_rows[i]
            for k in range(n):
                a = left[k]
                right = other._rows[k]
                for j in range(n):
                    target[j] = target[j] + a * right[j]

        return self._adopt_rows(result_rows, self._element_type)

    def multiply(self, other: Any) -> Any:
        """
        Умножение на матрицу, вектор или скаляр (по типу операнда).

        Raises:
            SizeMismatch: Если размер матрицы/вектора не совпадает с N
        """
        if isinstance(other, DynamicMatrix):
            return self.multiply_matrix(other)
        if isinstance(other, DynamicVector):
            return self.multiply_vector(other)
        return self.multiply_scalar(other)

    def add(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """
        Построчная сумма.

        Raises:
            SizeMismatch: Если размерности различаются
        """
        self._require_same_size(other, "add")
        return self._adopt_rows(
            [a.add(b) for a, b in zip(self._rows, other._rows)], self._element_type
        )

    def subtract(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """
        Построчная разность.

        Raises:
            SizeMismatch: Если размерности различаются
        """
        self._require_same_size(other, "subtract")
        return self._adopt_rows(
            [a.subtract(b) for a, b in zip(self._rows, other._rows)], self._element_type
        )

    def __add__(self, other: Any) -> "DynamicMatrix[T]":
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "DynamicMatrix[T]":
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Any:
        return self.multiply(other)

    def __rmul__(self, scalar: Any) -> "DynamicMatrix[T]":
        if isinstance(scalar, DynamicVector):
            return NotImplemented
        return self.multiply_scalar(scalar)

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, (DynamicMatrix, DynamicVector)):
            return NotImplemented
        return self.multiply(other)

    # =========================================================================
    # ТЕКСТОВЫЙ ВВОД/ВЫВОД
    # =========================================================================

    def read(self, stream: TextIO) -> "DynamicMatrix[T]":
        """
        Чтение N x N токенов построчно (row-major).

        Строки читаются в копию; при ошибке матрица не меняется.

        Raises:
            StreamReadError: Поток закончился раньше или токен не разбирается
        """
        staged = self._rows.copy()
        for row in staged:
            row.read(stream)

        self._rows.swap(staged)
        return self

    def write(self, stream: TextIO) -> None:
        """Одна строка матрицы на строку текста."""
        for row in self._rows:
            row.write(stream)

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self._rows)

    def __repr__(self) -> str:
        return f"DynamicMatrix({self.tolist()!r})"
