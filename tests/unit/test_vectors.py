"""
Тесты для векторных операций над HalfInteger

Проверяет:
1. Поэлементное сложение
2. Пустые и одноэлементные векторы
3. LengthMismatch с дословным сообщением
4. Отсутствие мутации входов
5. sum_half_integers
"""

import logging

import pytest

from src.core.domain import (
    LENGTH_MISMATCH_MESSAGE,
    HalfInteger,
    LengthMismatch,
    add_half_integer_vectors,
    sum_half_integers,
)


def vec(*values) -> list[HalfInteger]:
    return [HalfInteger.from_number(v) for v in values]


def printed(vector: list[HalfInteger]) -> list[str]:
    return [v.print() for v in vector]


class TestAddHalfIntegerVectors:
    """Тесты add_half_integer_vectors"""

    def test_element_wise(self) -> None:
        result = add_half_integer_vectors(vec(1, 1.5), vec(0.5, 2))
        assert len(result) == 2
        assert printed(result) == ["3/2", "7/2"]

    def test_empty_vectors(self) -> None:
        result = add_half_integer_vectors([], [])
        assert result == []

    def test_single_element(self) -> None:
        result = add_half_integer_vectors(vec(2.5), vec(1))
        assert printed(result) == ["7/2"]

    def test_negative_elements(self) -> None:
        result = add_half_integer_vectors(vec(-1, -0.5, 3), vec(0.5, 0.5, -3))
        assert printed(result) == ["-1/2", "0/1", "0/1"]

    def test_accepts_tuples(self) -> None:
        result = add_half_integer_vectors(tuple(vec(1)), tuple(vec(1)))
        assert printed(result) == ["2/1"]

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(LengthMismatch, match="Vectors must have the same length"):
            add_half_integer_vectors(vec(1), vec(1, 2))

    def test_length_mismatch_carries_lengths(self) -> None:
        with pytest.raises(LengthMismatch) as exc_info:
            add_half_integer_vectors(vec(1, 2, 3), vec(1))
        assert exc_info.value.left_length == 3
        assert exc_info.value.right_length == 1
        assert str(exc_info.value) == LENGTH_MISMATCH_MESSAGE

    def test_length_mismatch_empty_vs_non_empty(self) -> None:
        with pytest.raises(LengthMismatch):
            add_half_integer_vectors([], vec(1))

    def test_length_mismatch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.vectors"):
            with pytest.raises(LengthMismatch):
                add_half_integer_vectors(vec(1), vec(1, 2))
        assert "left=1 right=2" in caplog.text

    def test_inputs_not_mutated(self) -> None:
        left, right = vec(1, 1.5), vec(0.5, 2)
        result = add_half_integer_vectors(left, right)
        assert printed(left) == ["1/1", "3/2"]
        assert printed(right) == ["1/2", "2/1"]
        assert result is not left and result is not right

    def test_matches_scalar_add(self) -> None:
        left, right = vec(-2.5, 0, 4.5, 1.25), vec(1, -0.5, 4.5, 0.75)
        result = add_half_integer_vectors(left, right)
        assert result == [a.add(b) for a, b in zip(left, right)]


class TestSumHalfIntegers:
    """Тесты sum_half_integers"""

    def test_empty_is_zero(self) -> None:
        assert sum_half_integers([]).print() == "0/1"

    def test_sum(self) -> None:
        assert sum_half_integers(vec(0.5, 0.5, 1.5, -1)).print() == "3/2"

    def test_accepts_generator(self) -> None:
        values = (HalfInteger.from_number(v) for v in (2.5, 2.5))
        assert sum_half_integers(values).print() == "5/1"
