"""
Arithmetic — ядра арифметики над nominator

Чистые функции над int: на вход nominator'ы и точности операндов, на выход
nominator результата в точности левого операнда. Проверка ширины хранения и
обработка специальных значений — на уровне типов (core.domain).

ФОРМУЛЫ:
    same precision:   a * b  → round(nA * nB / 10^P)
    cross precision:  a * b  → разложение на целую/дробную части при общем
                               знаменателе C = 10^max(PA, PB)
    division:         a / b  → trunc(nA * 10^(PB+1) / nB), затем лишний
                               разряд отбрасывается с округлением
    cast:             10^Pold → 10^Pnew с округлением граничного разряда

Все округления — half-away-from-zero. Тип результата всегда определяется
левым операндом.
"""

from scaled_decimal.core.math.numerical_safeguards import (
    drop_last_digit,
    power10,
    round_half_away_from_zero,
    trunc_div,
)

# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(lhs: int, lhs_precision: int, rhs: int, rhs_precision: int) -> int:
    """
    Сумма в точности левого операнда.

    При равных точностях — точное сложение nominator'ов. Иначе правый
    операнд сначала приводится к точности левого (rescale с округлением).
    """
    return lhs + rescale(rhs, rhs_precision, lhs_precision)


def subtract(lhs: int, lhs_precision: int, rhs: int, rhs_precision: int) -> int:
    """Разность в точности левого операнда (см. add)."""
    return lhs - rescale(rhs, rhs_precision, lhs_precision)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_same(lhs: int, rhs: int, denominator: int) -> int:
    """
    Произведение операндов одной точности.

    nA * nB имеет знаменатель denominator^2; делим на denominator, сравнивая
    abs(product) % denominator с половиной denominator.

    Examples:
        >>> multiply_same(201, 2350, 100)  # 2.01 * 23.50 = 47.235
        4724
    """
    return round_half_away_from_zero(lhs * rhs, denominator)


def multiply_cross(lhs: int, lhs_precision: int, rhs: int, rhs_precision: int) -> int:
    """
    Произведение операндов разной точности в точности левого операнда.

    Алгоритм:
    1. Модули обоих операндов раскладываются на целую и дробную части;
       дробные части приводятся к общему знаменателю C = 10^max(PA, PB)
    2. integer = intA * intB
    3. cross = intA * fracB + fracA * intB (знаменатель C); перенос в integer
    4. остаток cross * C + fracA * fracB (знаменатель C^2) усекается до
       PA + 1 разрядов, лишний разряд округляется
    5. Сборка integer * 10^PA + fraction; знак — произведение знаков
       nominator'ов, применяется один раз в конце

    Args:
        lhs: nominator левого операнда
        lhs_precision: Точность левого операнда (и результата)
        rhs: nominator правого операнда
        rhs_precision: Точность правого операнда

    Returns:
        nominator результата

    Examples:
        >>> multiply_cross(51, 0, 10567, 3)  # 51 * 10.567 = 538.917
        539
        >>> multiply_cross(2000, 2, 2010, 3)  # 20.00 * 2.010
        4020
    """
    sign = -1 if (lhs < 0) != (rhs < 0) else 1

    common_precision = max(lhs_precision, rhs_precision)
    common = power10(common_precision)

    lhs_integer, lhs_fraction = divmod(abs(lhs), power10(lhs_precision))
    rhs_integer, rhs_fraction = divmod(abs(rhs), power10(rhs_precision))
    lhs_fraction *= power10(common_precision - lhs_precision)
    rhs_fraction *= power10(common_precision - rhs_precision)

    integer = lhs_integer * rhs_integer

    # Знаменатель: C
    cross = lhs_integer * rhs_fraction + lhs_fraction * rhs_integer
    integer += cross // common

    # Знаменатель: C^2
    fraction = (cross % common) * common + lhs_fraction * rhs_fraction

    # Знаменатель: 10^(PA+1), один запасной разряд под округление
    guard_shift = 2 * common_precision - (lhs_precision + 1)
    if guard_shift >= 0:
        fraction //= power10(guard_shift)
    else:
        fraction *= power10(-guard_shift)
    fraction = drop_last_digit(fraction)

    return sign * (integer * power10(lhs_precision) + fraction)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(lhs: int, rhs: int, rhs_precision: int) -> int:
    """
    Частное в точности левого операнда.

    Делимое масштабируется на 10^(PB+1): результат содержит один лишний
    разряд, который отбрасывается с округлением half-away-from-zero в
    направлении знака частного. Одно правило для равных и разных точностей.

    Args:
        lhs: nominator делимого
        rhs: nominator делителя (ненулевой)
        rhs_precision: Точность делителя

    Returns:
        nominator результата

    Raises:
        ZeroDivisionError: Если rhs == 0

    Examples:
        >>> divide(-111, -11, 2)  # -1.11 / -0.11 = 10.0909...
        1009
        >>> divide(994, 10000, 3)  # 9.94 / 10.000
        99
    """
    scaled = lhs * power10(rhs_precision + 1)
    return drop_last_digit(trunc_div(scaled, rhs))


# =============================================================================
# CAST
# =============================================================================


def rescale(nominator: int, from_precision: int, to_precision: int) -> int:
    """
    Перевод nominator из одной точности в другую.

    Повышение точности точное. При понижении значение усекается до
    to_precision + 1 разрядов, и граничный разряд округляется
    half-away-from-zero с учётом знака.

    Examples:
        >>> rescale(102525, 3, 2)
        10253
        >>> rescale(-102525, 3, 1)
        -1025
        >>> rescale(10253, 2, 4)
        1025300
    """
    if to_precision == from_precision:
        return nominator
    if to_precision > from_precision:
        return nominator * power10(to_precision - from_precision)
    truncated = trunc_div(nominator, power10(from_precision - to_precision - 1))
    return drop_last_digit(truncated)
