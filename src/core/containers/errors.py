"""
Container Errors — таксономия ошибок DynamicVector / DynamicMatrix

Каждый вид ошибки — отдельный класс. Разные виды НЕ сворачиваются в один
общий exception: вызывающий код различает их по типу.

Все классы наследуют ContainerError и ближайший builtin (ValueError /
IndexError), поэтому generic-обработчики тоже работают.
"""


class ContainerError(Exception):
    """Базовый класс всех ошибок контейнеров."""

    pass


class InvalidSize(ContainerError, ValueError):
    """
    Недопустимая длина вектора или размерность матрицы.

    Возникает при конструировании, если размер:
    - не целое число
    - меньше 1
    - больше сконфигурированного максимума (MAX_VECTOR_SIZE / MAX_MATRIX_SIZE)
    """

    pass


class NullSource(ContainerError, ValueError):
    """Конструирование из внешнего источника получило None вместо данных."""

    pass


class IndexOutOfRange(ContainerError, IndexError):
    """
    Проверяемый доступ (at / set_at) с индексом вне [0, length).

    Непроверяемый доступ через [] эту ошибку НЕ генерирует.
    """

    pass


class SizeMismatch(ContainerError, ValueError):
    """
    Операнды бинарной операции имеют несовместимый размер.

    Вектор + вектор, матрица + матрица, матрица * вектор, матрица * матрица.
    Операции со скаляром эту ошибку не генерируют.
    """

    pass


class StreamReadError(ContainerError, ValueError):
    """
    Чтение из текстового потока не удалось.

    Поток закончился раньше, чем было прочитано нужное число токенов,
    либо токен не разбирается как тип элемента. Контейнер остаётся без изменений.
    """

    pass
