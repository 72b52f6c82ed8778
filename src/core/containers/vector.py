"""
DynamicVector — одномерный вектор фиксированной длины

Вектор владеет своим хранилищем (list) эксклюзивно:
- copy() создаёт независимое хранилище (вложенные векторы тоже копируются)
- move() передаёт хранилище новому владельцу за O(1), источник становится пустым
- swap() обменивает хранилища за O(1) без копирования элементов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= len(v) <= MAX_VECTOR_SIZE для любого сконструированного вектора
2. Хранилище не разделяется между экземплярами
3. Перемещённый (moved-from) вектор: хранилище None, длина 0
4. Арифметика возвращает новый вектор и не меняет операнды

Доступ:
- v[i]           — без проверки (поведение при неверном индексе не определено)
- v.at(i)        — с проверкой, IndexOutOfRange
- v.set_at(i, x) — с проверкой, IndexOutOfRange
"""

import copy
import itertools
from numbers import Number
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TextIO, TypeVar

from src.core.containers.errors import NullSource, SizeMismatch
from src.core.containers.limits import (
    DEFAULT_LIMITS,
    ContainerLimits,
    validate_index,
    validate_vector_size,
)
from src.core.containers.text_io import format_elements, read_elements, write_line

T = TypeVar("T")


def _clone(item: Any) -> Any:
    # Числа неизменяемы; для DynamicVector __copy__ делает полную копию
    return copy.copy(item)


class DynamicVector(Generic[T]):
    """
    Вектор фиксированной длины на list-хранилище.

    element_type используется дважды:
    - element_type() — значение по умолчанию (0 для int/float, Fraction(0), ...)
    - element_type(token) — разбор токена при чтении из текстового потока
    """

    __slots__ = ("_length", "_storage", "_element_type")

    # Изменяемый контейнер
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        size: int = 1,
        element_type: Callable[..., T] = int,
        limits: ContainerLimits = DEFAULT_LIMITS,
    ) -> None:
        """
        Args:
            size: Длина вектора, 1..limits.max_vector_size
            element_type: Тип (фабрика) элемента
            limits: Ограничения размеров (по умолчанию DEFAULT_LIMITS)

        Raises:
            InvalidSize: Если size вне допустимого диапазона
        """
        self._length = validate_vector_size(size, limits)
        self._element_type = element_type
        self._storage: Optional[list[T]] = self._default_storage(self._length, element_type)

    @staticmethod
    def _default_storage(length: int, element_type: Callable[..., T]) -> list[T]:
        first = element_type()
        if isinstance(first, Number):
            return [first] * length
        # Изменяемые элементы (например, строки матрицы) создаются по отдельности
        return [first] + [element_type() for _ in range(length - 1)]

    @classmethod
    def _adopt(
        cls, storage: Optional[list[T]], element_type: Callable[..., T]
    ) -> "DynamicVector[T]":
        """Вектор, забирающий готовый список во владение (без копирования и проверок)."""
        vector = cls.__new__(cls)
        vector._storage = storage if storage else None
        vector._length = len(storage) if storage else 0
        vector._element_type = element_type
        return vector

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_source(
        cls,
        source: Optional[Iterable[T]],
        size: int,
        element_type: Optional[Callable[..., T]] = None,
        limits: ContainerLimits = DEFAULT_LIMITS,
    ) -> "DynamicVector[T]":
        """
        Конструирование из внешних данных: копируются первые size элементов.

        Args:
            source: Итерируемый источник (list, tuple, генератор, ...)
            size: Число копируемых элементов
            element_type: Тип элемента (по умолчанию — тип первого элемента)
            limits: Ограничения размеров

        Raises:
            NullSource: Если source is None
            InvalidSize: Если size вне допустимого диапазона
            SizeMismatch: Если источник короче size
        """
        if source is None:
            raise NullSource("DynamicVector.from_source requires a source, got None")

        length = validate_vector_size(size, limits)
        values = [_clone(value) for value in itertools.islice(source, length)]

        if len(values) < length:
            raise SizeMismatch(
                f"Source provides {len(values)} elements, expected {length}"
            )

        return cls._adopt(values, element_type or type(values[0]))

    @classmethod
    def from_values(
        cls,
        values: Optional[Iterable[T]],
        element_type: Optional[Callable[..., T]] = None,
        limits: ContainerLimits = DEFAULT_LIMITS,
    ) -> "DynamicVector[T]":
        """Вектор из всех элементов источника (длина = число элементов)."""
        if values is None:
            raise NullSource("DynamicVector.from_values requires a source, got None")

        materialized = list(values)
        return cls.from_source(materialized, len(materialized), element_type, limits)

    # =========================================================================
    # ВЛАДЕНИЕ: COPY / MOVE / ASSIGN / SWAP
    # =========================================================================

    def copy(self) -> "DynamicVector[T]":
        """Глубокая копия: новое хранилище, независимое время жизни."""
        return self._adopt([_clone(item) for item in self._elements()], self._element_type)

    def __copy__(self) -> "DynamicVector[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DynamicVector[T]":
        return self.copy()

    def move(self) -> "DynamicVector[T]":
        """
        Передача хранилища новому вектору за O(1).

        После вызова self пуст: size() == 0, хранилище None.
        Восстанавливается через assign() / move_assign().
        """
        moved = self._adopt(self._storage, self._element_type)
        self._storage = None
        self._length = 0
        return moved

    def assign(self, other: "DynamicVector[T]") -> "DynamicVector[T]":
        """
        Копирующее присваивание (copy-and-swap).

        Длина self становится равной длине other. Присваивание самому себе — no-op.
        """
        if other is self:
            return self

        temp = other.copy()
        self.swap(temp)
        return self

    def move_assign(self, other: "DynamicVector[T]") -> "DynamicVector[T]":
        """Перемещающее присваивание: self забирает хранилище other, other пуст."""
        if other is self:
            return self

        self._storage = other._storage
        self._length = other._length
        self._element_type = other._element_type
        other._storage = None
        other._length = 0
        return self

    def swap(self, other: "DynamicVector[T]") -> None:
        """Обмен хранилищами за O(1), элементы не копируются."""
        if not isinstance(other, DynamicVector):
            raise TypeError(f"Cannot swap DynamicVector with {type(other).__name__}")

        self._storage, other._storage = other._storage, self._storage
        self._length, other._length = other._length, self._length
        self._element_type, other._element_type = other._element_type, self._element_type

    # =========================================================================
    # РАЗМЕР И ДОСТУП
    # =========================================================================

    @property
    def element_type(self) -> Callable[..., T]:
        return self._element_type

    def size(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def _elements(self) -> list[T]:
        return self._storage if self._storage is not None else []

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements())

    def __getitem__(self, index: int) -> T:
        # Без проверки границ
        return self._storage[index]  # type: ignore[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._storage[index] = value  # type: ignore[index]

    def at(self, index: int) -> T:
        """
        Проверяемое чтение элемента.

        Raises:
            IndexOutOfRange: Если index вне [0, size())
        """
        return self._storage[validate_index(index, self._length)]  # type: ignore[index]

    def set_at(self, index: int, value: T) -> None:
        """
        Проверяемая запись элемента.

        Raises:
            IndexOutOfRange: Если index вне [0, size())
        """
        self._storage[validate_index(index, self._length)] = value  # type: ignore[index]

    def tolist(self) -> list[T]:
        return list(self._elements())

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: "DynamicVector[T]") -> bool:
        """
        Поэлементное равенство.

        Векторы разной длины никогда не равны (без exception).
        """
        if not isinstance(other, DynamicVector):
            return False

        if self._length != other._length:
            return False

        for left, right in zip(self._elements(), other._elements()):
            if left != right:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        return self.equals(other)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _require_same_size(self, other: Any, operation: str) -> None:
        if not isinstance(other, DynamicVector):
            raise TypeError(
                f"Vector {operation} requires a DynamicVector, got {type(other).__name__}"
            )
        if self._length != other._length:
            raise SizeMismatch(
                f"Cannot {operation} vectors of sizes {self._length} and {other._length}"
            )

    @staticmethod
    def _is_container(value: Any) -> bool:
        # matrix импортирует vector, поэтому импорт локальный
        from src.core.containers.matrix import DynamicMatrix

        return isinstance(value, (DynamicVector, DynamicMatrix))

    def _require_scalar(self, scalar: Any, operation: str) -> None:
        if self._is_container(scalar):
            raise TypeError(
                f"Vector scalar {operation} requires a scalar, got {type(scalar).__name__}"
            )

    def _map(self, func: Callable[[T], T]) -> "DynamicVector[T]":
        return self._adopt([func(item) for item in self._elements()], self._element_type)

    def _zip_map(
        self, other: "DynamicVector[T]", func: Callable[[T, T], T]
    ) -> "DynamicVector[T]":
        return self._adopt(
            [func(a, b) for a, b in zip(self._elements(), other._elements())],
            self._element_type,
        )

    def add(self, other: Any) -> "DynamicVector[T]":
        """
        Сложение с вектором (поэлементно) или со скаляром (к каждому элементу).

        Raises:
            SizeMismatch: Если other — вектор другой длины
            TypeError: Если other — матрица
        """
        if isinstance(other, DynamicVector):
            self._require_same_size(other, "add")
            return self._zip_map(other, lambda a, b: a + b)
        self._require_scalar(other, "add")
        return self._map(lambda a: a + other)

    def subtract(self, other: Any) -> "DynamicVector[T]":
        """
        Вычитание вектора (поэлементно) или скаляра (из каждого элемента).

        Raises:
            SizeMismatch: Если other — вектор другой длины
            TypeError: Если other — матрица
        """
        if isinstance(other, DynamicVector):
            self._require_same_size(other, "subtract")
            return self._zip_map(other, lambda a, b: a - b)
        self._require_scalar(other, "subtract")
        return self._map(lambda a: a - other)

    def multiply(self, scalar: Any) -> "DynamicVector[T]":
        """
        Умножение каждого элемента на скаляр.

        Raises:
            TypeError: Если scalar — вектор или матрица (для них есть dot / multiply_vector)
        """
        self._require_scalar(scalar, "multiply")
        return self._map(lambda a: a * scalar)

    def dot(self, other: "DynamicVector[T]") -> T:
        """
        Скалярное произведение: сумма попарных произведений.

        Накопление слева направо в порядке индексов, начиная с element_type().
        Переполнение определяется арифметикой T и отдельно не проверяется.

        Raises:
            SizeMismatch: Если длины различаются
        """
        self._require_same_size(other, "dot")

        result = self._element_type()
        for a, b in zip(self._elements(), other._elements()):
            result = result + a * b
        return result

    def __add__(self, other: Any) -> "DynamicVector[T]":
        return self.add(other)

    def __radd__(self, scalar: Any) -> "DynamicVector[T]":
        if self._is_container(scalar):
            return NotImplemented
        return self._map(lambda a: scalar + a)

    def __sub__(self, other: Any) -> "DynamicVector[T]":
        return self.subtract(other)

    def __rsub__(self, scalar: Any) -> "DynamicVector[T]":
        if self._is_container(scalar):
            return NotImplemented
        return self._map(lambda a: scalar - a)

    def __mul__(self, other: Any) -> Any:
        # vector * vector: скалярное произведение; vector * scalar: масштабирование
        if isinstance(other, DynamicVector):
            return self.dot(other)
        if self._is_container(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, scalar: Any) -> "DynamicVector[T]":
        if self._is_container(scalar):
            return NotImplemented
        return self._map(lambda a: scalar * a)

    def __matmul__(self, other: Any) -> T:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        return self.dot(other)

    # =========================================================================
    # ТЕКСТОВЫЙ ВВОД/ВЫВОД
    # =========================================================================

    def read(self, stream: TextIO) -> "DynamicVector[T]":
        """
        Чтение ровно size() токенов в порядке индексов.

        При ошибке вектор не меняется.

        Raises:
            StreamReadError: Поток закончился раньше или токен не разбирается
        """
        values = read_elements(stream, self._length, self._element_type)
        if values:
            self._storage = values
        return self

    def write(self, stream: TextIO) -> None:
        """Элементы через пробел и перевод строки."""
        write_line(stream, self._elements())

    def __str__(self) -> str:
        return format_elements(self._elements())

    def __repr__(self) -> str:
        return f"DynamicVector({self._elements()!r})"


def swap(lhs: DynamicVector[T], rhs: DynamicVector[T]) -> None:
    """Обмен содержимым двух векторов за O(1)."""
    if not isinstance(lhs, DynamicVector):
        raise TypeError(f"Cannot swap {type(lhs).__name__} with DynamicVector")
    lhs.swap(rhs)
