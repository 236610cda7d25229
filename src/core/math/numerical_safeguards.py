"""
Numerical Safeguards — Exact Lattice Primitives

Модуль обеспечивает точное (без float-дрейфа) квантование чисел на решётку
{n / LATTICE_SCALE : n ∈ ℤ}:
- Проверка конечности входа (NaN/Inf не допускаются)
- Точная конверсия int/float/Fraction/Decimal в Fraction
- Округление round half away from zero
- Квантование на решётку с возвратом целого числа шагов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не доходят до округления (is_finite_real → False)
2. Округление выполняется в точной рациональной арифметике, float только на входе
3. Результат квантования — всегда int (количество шагов решётки)
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ РЕШЁТКИ
# =============================================================================

# Количество шагов решётки на единицу (2 → шаг 0.5)
LATTICE_SCALE: Final[int] = 2

# Половина шага для правила round half away from zero
_HALF: Final[Fraction] = Fraction(1, 2)

ExactNumber = Union[int, float, Fraction, Decimal]


# =============================================================================
# ПРОВЕРКИ КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_real_number(value: object) -> bool:
    """
    Проверка, что значение — вещественное число.

    bool исключается явно: True/False не являются величинами.
    Decimal не зарегистрирован как numbers.Real, поэтому проверяется отдельно.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (Real, Decimal))


def is_finite_real(value: object) -> bool:
    """
    Проверка, что значение — конечное вещественное число.

    Args:
        value: Проверяемое значение

    Returns:
        False для NaN, ±Inf и не-числовых значений

    Examples:
        >>> is_finite_real(1.5)
        True
        >>> is_finite_real(float('nan'))
        False
        >>> is_finite_real(Decimal('Infinity'))
        False
        >>> is_finite_real("1.5")
        False
    """
    if not is_real_number(value):
        return False

    # int и Fraction всегда конечны; math.isfinite на огромном Fraction
    # упал бы с OverflowError при конверсии в float
    if isinstance(value, (int, Fraction)):
        return True

    if isinstance(value, Decimal):
        return value.is_finite()

    return is_valid_float(float(value))


# =============================================================================
# ТОЧНОЕ ОКРУГЛЕНИЕ
# =============================================================================


def to_exact(value: ExactNumber) -> Fraction:
    """
    Точная конверсия числа в Fraction.

    float конвертируется по своему двоичному значению (Fraction(0.1) != 1/10),
    т.е. без дополнительной погрешности.

    Raises:
        ValueError: Если значение не конечно
    """
    if not is_finite_real(value):
        raise ValueError(f"value must be a finite real number, got {value!r}")

    if isinstance(value, (int, float, Fraction, Decimal)):
        return Fraction(value)

    # Прочие numbers.Real (например, numpy.float64) конвертируются через float
    return Fraction(float(value))


def round_half_away_from_zero(value: ExactNumber) -> int:
    """
    Округление до ближайшего целого, ничьи (x.5) — от нуля.

    Использует стандартное математическое округление (round half up по модулю),
    а не banker's rounding встроенного round().

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(2.4)
        2
        >>> round_half_away_from_zero(-0.4)
        0
    """
    exact = to_exact(value)

    if exact >= 0:
        return math.floor(exact + _HALF)
    return math.ceil(exact - _HALF)


def round_to_lattice(value: ExactNumber, scale: int = LATTICE_SCALE) -> int:
    """
    Квантование значения на решётку {n / scale}.

    Args:
        value: Значение для квантования
        scale: Количество шагов на единицу (default: LATTICE_SCALE)

    Returns:
        Целое число шагов n, такое что n / scale — ближайшая точка решётки

    Raises:
        ValueError: Если scale <= 0 или значение не конечно

    Examples:
        >>> round_to_lattice(1.4)
        3
        >>> round_to_lattice(1.7)
        3
        >>> round_to_lattice(-0.5)
        -1
        >>> round_to_lattice(1.25)  # ничья в удвоенном домене: 2.5 → 3
        3
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")

    # |value| < 10**(adjusted + 1), поэтому при adjusted < -(digits(scale) + 1)
    # |value * scale| < 0.1 и результат — 0. Fraction(Decimal("1e-999999999"))
    # строил бы знаменатель из миллиарда цифр
    if (
        isinstance(value, Decimal)
        and value.is_finite()
        and value.adjusted() < -(len(str(scale)) + 1)
    ):
        return 0

    return round_half_away_from_zero(to_exact(value) * scale)
