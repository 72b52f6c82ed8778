"""
Text I/O — минимальный текстовый формат контейнеров

Формат:
- Элементы — токены, разделённые пробельными символами (пробел, табуляция, перевод строки)
- Длина/размерность НЕ записывается: читающая сторона уже знает N
- Запись: элементы через один пробел, перевод строки в конце
- Матрица: одна строка матрицы на строку текста, row-major

Чтение идёт посимвольно: из потока забирается ровно столько, сколько нужно
для требуемого числа токенов (плюс один разделитель после последнего).
Поэтому несколько векторов можно читать подряд из одного потока.
"""

import logging
from typing import Any, Callable, Iterable, Optional, TextIO, TypeVar

from src.core.containers.errors import StreamReadError

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ЧТЕНИЕ
# =============================================================================


def read_token(stream: TextIO) -> Optional[str]:
    """
    Чтение одного токена из потока.

    Пропускает ведущие пробельные символы, затем накапливает символы до
    первого пробельного символа или конца потока.

    Args:
        stream: Текстовый поток

    Returns:
        Токен или None, если поток закончился до начала токена
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    if not ch:
        return None

    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)

    return "".join(chars)


def read_elements(stream: TextIO, count: int, parse: Callable[[str], T]) -> list[T]:
    """
    Чтение ровно count элементов в порядке индексов.

    Args:
        stream: Текстовый поток
        count: Требуемое число токенов
        parse: Разбор токена в элемент (обычно тип элемента: int, float, ...)

    Returns:
        Новый список из count элементов

    Raises:
        StreamReadError: Если поток закончился раньше или токен не разбирается
    """
    values: list[T] = []

    for position in range(count):
        token = read_token(stream)
        if token is None:
            logger.warning("Stream ended after %d of %d tokens", position, count)
            raise StreamReadError(
                f"Stream ended after {position} of {count} expected tokens"
            )

        try:
            values.append(parse(token))
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.warning("Cannot parse token %r at position %d", token, position)
            raise StreamReadError(
                f"Cannot parse token {token!r} at position {position}: {e}"
            ) from e

    logger.debug("Read %d tokens from stream", count)
    return values


# =============================================================================
# ЗАПИСЬ
# =============================================================================


def format_elements(values: Iterable[Any]) -> str:
    """Элементы через один пробел, без перевода строки."""
    return " ".join(str(value) for value in values)


def write_line(stream: TextIO, values: Iterable[Any]) -> None:
    """
    Запись элементов одной строкой текста.

    Args:
        stream: Текстовый поток
        values: Элементы в порядке индексов
    """
    stream.write(format_elements(values))
    stream.write("\n")
