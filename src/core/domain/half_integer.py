"""
HalfInteger — Value type на решётке полуцелых чисел

Множество: ℤ ∪ (ℤ + 1/2) = {n/2 : n ∈ ℤ}

Immutable Pydantic модель. Внутреннее представление — удвоенная величина
(doubled: int), поэтому инвариант решётки обеспечен структурно: print и add
являются точными целочисленными операциями, float-дрейф невозможен.

Каноническая форма (fraction string):
    "<numerator>/<denominator>", denominator ∈ {1, 2}
    0 → "0/1", 1.5 → "3/2", -0.5 → "-1/2", -2 → "-2/1"

Округление при конструировании:
    doubled = round_half_away_from_zero(input * 2)
    1.2 → 1, 1.4 → 3/2, 1.7 → 3/2, 1.9 → 2, 1.25 → 3/2, -1.25 → -3/2
"""

import re
from fractions import Fraction
from typing import Final

from pydantic import BaseModel, Field

from src.core.domain.errors import InvalidValue
from src.core.math.numerical_safeguards import (
    LATTICE_SCALE,
    ExactNumber,
    is_finite_real,
    is_real_number,
    round_to_lattice,
)

# =============================================================================
# КАНОНИЧЕСКАЯ ФОРМА
# =============================================================================

# Знаменатель для целых значений (doubled чётно)
DENOMINATOR_INTEGER: Final[int] = 1

# Знаменатель для значений вида n + 1/2 (doubled нечётно)
DENOMINATOR_HALF: Final[int] = 2

# Каноническая fraction string: без ведущих нулей, без "+", без "-0";
# для знаменателя 2 числитель нечётный. (?!\n) запрещает "$" совпадать перед
# завершающим "\n": jsonschema проверяет pattern через re.search
FRACTION_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:0/1|-?[1-9][0-9]*/1|-?(?:[1-9][0-9]*)?[13579]/2)(?!\n)$"
)


# =============================================================================
# HALF INTEGER MODEL
# =============================================================================


class HalfInteger(BaseModel):
    """
    Полуцелое число с точной арифметикой.

    Создаётся через HalfInteger.from_number (округление), HalfInteger.from_fraction
    (разбор канонической строки) или как результат add.
    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    """

    doubled: int = Field(
        ..., strict=True, description="Удвоенная величина (2·x), всегда целое"
    )

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_number(cls, value: ExactNumber) -> "HalfInteger":
        """
        Создание HalfInteger округлением к ближайшему кратному 0.5.

        Ничьи в удвоенном домене (например, 1.25 · 2 = 2.5) округляются от нуля.
        -0.5 остаётся -0.5; -0.0 даёт ноль.

        Args:
            value: int, float, Fraction, Decimal или иное numbers.Real

        Returns:
            HalfInteger на ближайшей точке решётки

        Raises:
            InvalidValue: Если value — NaN, ±Inf, bool или не число

        Examples:
            >>> HalfInteger.from_number(1.2).print()
            '1/1'
            >>> HalfInteger.from_number(1.4).print()
            '3/2'
        """
        if not is_real_number(value):
            raise InvalidValue(value, "HalfInteger requires a real number")

        if not is_finite_real(value):
            raise InvalidValue(value, "HalfInteger requires a finite value (not NaN/Inf)")

        return cls(doubled=round_to_lattice(value, LATTICE_SCALE))

    @classmethod
    def from_fraction(cls, text: str) -> "HalfInteger":
        """
        Разбор канонической fraction string (обратная операция к print).

        Raises:
            InvalidValue: Если строка не в канонической форме
                ("2/2", "-0/1", "+1/1", "01/1", "1/3" и т.п.)
        """
        if not isinstance(text, str) or not FRACTION_PATTERN.fullmatch(text):
            raise InvalidValue(text, "not a canonical half-integer fraction")

        numerator_text, denominator_text = text.split("/")
        numerator = int(numerator_text)

        if int(denominator_text) == DENOMINATOR_INTEGER:
            return cls(doubled=numerator * LATTICE_SCALE)
        return cls(doubled=numerator)

    # -------------------------------------------------------------------------
    # Производные свойства
    # -------------------------------------------------------------------------

    @property
    def is_integer(self) -> bool:
        """True если значение целое (знаменатель 1)."""
        return self.doubled % LATTICE_SCALE == 0

    @property
    def numerator(self) -> int:
        """Числитель канонической дроби."""
        if self.is_integer:
            return self.doubled // LATTICE_SCALE
        return self.doubled

    @property
    def denominator(self) -> int:
        """Знаменатель канонической дроби (1 или 2)."""
        if self.is_integer:
            return DENOMINATOR_INTEGER
        return DENOMINATOR_HALF

    def as_fraction(self) -> Fraction:
        """Точное значение как fractions.Fraction."""
        return Fraction(self.doubled, LATTICE_SCALE)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def print(self) -> str:
        """
        Каноническая fraction string "<numerator>/<denominator>".

        Ноль проверяется до ветвления целое/полуцелое и всегда даёт "0/1".

        Examples:
            >>> HalfInteger.from_number(0).print()
            '0/1'
            >>> HalfInteger.from_number(-0.5).print()
            '-1/2'
            >>> HalfInteger.from_number(2.5).print()
            '5/2'
        """
        if self.doubled == 0:
            return f"0/{DENOMINATOR_INTEGER}"

        return f"{self.numerator}/{self.denominator}"

    def add(self, other: "HalfInteger") -> "HalfInteger":
        """
        Сумма двух HalfInteger.

        Результат проходит через тот же конструктор from_number, что и любой
        другой вход. Сумма двух точек решётки лежит на решётке, поэтому
        округление здесь не меняет значения.

        Raises:
            TypeError: Если other не HalfInteger
        """
        if not isinstance(other, HalfInteger):
            raise TypeError(
                f"HalfInteger.add expects HalfInteger, got {type(other).__name__}"
            )

        return HalfInteger.from_number(self.as_fraction() + other.as_fraction())

    def __add__(self, other: object) -> "HalfInteger":
        if not isinstance(other, HalfInteger):
            return NotImplemented
        return self.add(other)

    def __float__(self) -> float:
        return self.doubled / LATTICE_SCALE

    def __str__(self) -> str:
        return self.print()


# Нейтральный элемент сложения
ZERO: Final[HalfInteger] = HalfInteger(doubled=0)
