"""
Исключения доменного слоя HalfInteger.

Все ошибки наследуют ValueError: это нарушения доменных ограничений входа,
а не сбои окружения.
"""

from typing import Final

# Текст сообщения сохраняется дословно: на него опираются существующие вызовы
LENGTH_MISMATCH_MESSAGE: Final[str] = "Vectors must have the same length"


class HalfIntegerError(ValueError):
    """Базовая ошибка операций над HalfInteger."""

    pass


class InvalidValue(HalfIntegerError):
    """
    Значение не может быть представлено как HalfInteger.

    Возникает для NaN, ±Inf, не-числовых входов (включая bool)
    и для неканонических fraction string.
    """

    def __init__(self, value: object, reason: str = "value must be a finite real number"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}, got {value!r}")


class LengthMismatch(HalfIntegerError):
    """
    Векторы разной длины при поэлементной операции.

    Сообщение всегда равно LENGTH_MISMATCH_MESSAGE; длины доступны
    как атрибуты left_length / right_length.
    """

    def __init__(self, left_length: int, right_length: int):
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(LENGTH_MISMATCH_MESSAGE)
