"""
Тесты текстового ввода/вывода контейнеров

Проверяет:
1. Чтение ровно N (N x N) токенов, разделённых пробелами/переводами строк
2. Формат записи: элементы через пробел, строка матрицы — строка текста
3. Ошибки потока: преждевременный конец, неразбираемый токен
4. Неизменность контейнера при ошибке чтения
"""

import io
from decimal import Decimal

import pytest

from src.core.containers import DynamicMatrix, DynamicVector, StreamReadError
from src.core.containers.text_io import format_elements, read_elements, read_token


# =============================================================================
# ТЕСТЫ: Токенизация
# =============================================================================


class TestReadToken:
    """Тесты read_token"""

    def test_tokens_split_by_any_whitespace(self) -> None:
        stream = io.StringIO("  1\t22\n\n 333 ")
        assert read_token(stream) == "1"
        assert read_token(stream) == "22"
        assert read_token(stream) == "333"
        assert read_token(stream) is None

    def test_empty_stream(self) -> None:
        assert read_token(io.StringIO("")) is None

    def test_consumes_only_needed_input(self) -> None:
        stream = io.StringIO("1 2 3 4")
        assert read_elements(stream, 2, int) == [1, 2]
        assert stream.read() == "3 4"


class TestReadElements:
    """Тесты read_elements"""

    def test_parses_with_element_type(self) -> None:
        assert read_elements(io.StringIO("1.5 2"), 2, float) == [1.5, 2.0]

    def test_stream_too_short(self) -> None:
        with pytest.raises(StreamReadError, match="after 2 of 3"):
            read_elements(io.StringIO("1 2"), 3, int)

    def test_unparsable_token(self) -> None:
        with pytest.raises(StreamReadError, match="Cannot parse token 'x'"):
            read_elements(io.StringIO("1 x 3"), 3, int)

    def test_decimal_parse_error_wrapped(self) -> None:
        with pytest.raises(StreamReadError):
            read_elements(io.StringIO("abc"), 1, Decimal)


# =============================================================================
# ТЕСТЫ: Вектор
# =============================================================================


class TestVectorIO:
    """Тесты DynamicVector.read / write"""

    def test_read(self) -> None:
        v: DynamicVector[int] = DynamicVector(3)
        v.read(io.StringIO("4 5\n6"))
        assert v.tolist() == [4, 5, 6]

    def test_read_consecutive_vectors(self) -> None:
        stream = io.StringIO("1 2 3 4\n5 6")
        v1: DynamicVector[int] = DynamicVector(2)
        v2: DynamicVector[int] = DynamicVector(4)

        v1.read(stream)
        v2.read(stream)

        assert v1.tolist() == [1, 2]
        assert v2.tolist() == [3, 4, 5, 6]

    def test_read_failure_leaves_vector_unchanged(self) -> None:
        v = DynamicVector.from_values([7, 8, 9])
        with pytest.raises(StreamReadError):
            v.read(io.StringIO("1 2"))
        assert v.tolist() == [7, 8, 9]

    def test_write(self) -> None:
        out = io.StringIO()
        DynamicVector.from_values([1, 2, 3]).write(out)
        assert out.getvalue() == "1 2 3\n"

    def test_str(self) -> None:
        assert str(DynamicVector.from_values([1, 2, 3])) == "1 2 3"
        assert format_elements([1.5, 2]) == "1.5 2"

    def test_write_then_read(self) -> None:
        out = io.StringIO()
        source = DynamicVector.from_values([3, -1, 4])
        source.write(out)

        target: DynamicVector[int] = DynamicVector(3)
        target.read(io.StringIO(out.getvalue()))

        assert target == source


# =============================================================================
# ТЕСТЫ: Матрица
# =============================================================================


class TestMatrixIO:
    """Тесты DynamicMatrix.read / write"""

    def test_read_row_major(self) -> None:
        m: DynamicMatrix[int] = DynamicMatrix(2)
        m.read(io.StringIO("1 2 3\n4"))
        assert m.tolist() == [[1, 2], [3, 4]]

    def test_write_one_row_per_line(self) -> None:
        out = io.StringIO()
        DynamicMatrix.from_rows([[1, 2], [3, 4]]).write(out)
        assert out.getvalue() == "1 2\n3 4\n"

    def test_str(self) -> None:
        assert str(DynamicMatrix.from_rows([[1, 2], [3, 4]])) == "1 2\n3 4"

    def test_read_failure_leaves_matrix_unchanged(self) -> None:
        m = DynamicMatrix.from_rows([[1, 2], [3, 4]])
        with pytest.raises(StreamReadError):
            m.read(io.StringIO("9 9 9"))
        assert m.tolist() == [[1, 2], [3, 4]]

    def test_read_float_matrix(self) -> None:
        m = DynamicMatrix(2, element_type=float)
        m.read(io.StringIO("0.5 1\n2 2.5\n"))
        assert m.tolist() == [[0.5, 1.0], [2.0, 2.5]]
