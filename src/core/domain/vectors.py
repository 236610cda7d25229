"""
Векторные операции над HalfInteger

Вектор — упорядоченная последовательность HalfInteger фиксированной длины.
Операции не мутируют входы и возвращают новый list.
"""

from functools import reduce
from typing import Iterable, Sequence

from src.core.domain.errors import LengthMismatch
from src.core.domain.half_integer import ZERO, HalfInteger
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)


def add_half_integer_vectors(
    left: Sequence[HalfInteger],
    right: Sequence[HalfInteger],
) -> list[HalfInteger]:
    """
    Поэлементное сложение двух векторов HalfInteger.

    result[i] = left[i].add(right[i]); элементы независимы.

    Args:
        left: Первый вектор
        right: Второй вектор (той же длины)

    Returns:
        Новый список той же длины; для двух пустых векторов — []

    Raises:
        LengthMismatch: Если длины различаются
            (сообщение "Vectors must have the same length")

    Examples:
        >>> a = [HalfInteger.from_number(1), HalfInteger.from_number(1.5)]
        >>> b = [HalfInteger.from_number(0.5), HalfInteger.from_number(2)]
        >>> [h.print() for h in add_half_integer_vectors(a, b)]
        ['3/2', '7/2']
    """
    if len(left) != len(right):
        logger.debug(
            "Vector length mismatch: left=%d right=%d", len(left), len(right)
        )
        raise LengthMismatch(len(left), len(right))

    return [a.add(b) for a, b in zip(left, right)]


def sum_half_integers(values: Iterable[HalfInteger]) -> HalfInteger:
    """Сумма последовательности HalfInteger; для пустой — ноль ("0/1")."""
    return reduce(HalfInteger.add, values, ZERO)
