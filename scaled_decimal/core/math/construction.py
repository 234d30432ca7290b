"""
Construction — преобразование входных данных в nominator

Единственный допустимый способ получить nominator (value * 10^precision) из:
- десятичной строки ("10.2346", "-0.5", "1.5e3")
- float (через кратчайшее десятичное представление repr)
- int (точное умножение на denominator)
- пары (integer_part, fraction_part)

Во всех случаях лишние разряды отбрасываются с округлением
half-away-from-zero по точному десятичному значению.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректная строка → DecimalParseError (никогда не молчаливый ноль)
2. Направление округления задаёт знак литерала, а не знак целой части
3. fraction_part == 0 не требует подсчёта разрядов (нет log10(0))
"""

import math
import re
from typing import Final

from scaled_decimal.core.math.numerical_safeguards import (
    MAX_DECIMAL_SHIFT,
    DecimalOverflowError,
    digit_count,
    power10,
    round_half_away_from_zero,
    shift_decimal,
)

# =============================================================================
# ФОРМАТ СТРОКИ
# =============================================================================

# [+-] digits [. digits] [e[+-]digits], пробелы по краям допустимы
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?P<sign>[+-]?)(?P<integer>\d*)(?:\.(?P<fraction>\d*))?"
    r"(?:[eE](?P<exponent>[+-]?\d+))?\s*$"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalParseError(ValueError):
    """Строка не является десятичным числом."""

    pass


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def nominator_from_string(text: str, precision: int) -> int:
    """
    Разбор десятичной строки в nominator.

    Если дробных разрядов больше precision, лишние отбрасываются, а
    сохранённые округляются half-away-from-zero по точному значению
    отброшенного хвоста.

    Args:
        text: Десятичная строка
        precision: Количество сохраняемых дробных разрядов

    Returns:
        nominator = round(value * 10^precision)

    Raises:
        DecimalParseError: Если строка некорректна
        DecimalOverflowError: Если экспонента выводит значение за любые пределы

    Examples:
        >>> nominator_from_string("10.115", 2)
        1012
        >>> nominator_from_string("10.114", 2)
        1011
        >>> nominator_from_string("-0.005", 2)
        -1
        >>> nominator_from_string("10", 2)
        1000
    """
    match = DECIMAL_PATTERN.match(text)
    if match is None:
        raise DecimalParseError(f"Malformed decimal string: {text!r}")

    integer_digits = match["integer"]
    fraction_digits = match["fraction"] or ""
    if not integer_digits and not fraction_digits:
        raise DecimalParseError(f"Malformed decimal string: {text!r}")

    mantissa = int(integer_digits + fraction_digits)
    exponent = int(match["exponent"] or 0)

    # Сдвиг считается по всем разрядам mantissa, включая целые
    shift = exponent - len(fraction_digits) + precision
    if mantissa != 0 and shift > MAX_DECIMAL_SHIFT:
        raise DecimalOverflowError(f"Decimal exponent out of range: {text!r}")

    # shift_decimal отдаёт 0 без построения огромных int, если сдвиг
    # уходит дальше всех разрядов mantissa
    magnitude = shift_decimal(mantissa, shift)
    return -magnitude if match["sign"] == "-" else magnitude


def nominator_from_float(value: float, precision: int) -> int:
    """
    Конверсия float в nominator.

    float переводится в кратчайшую десятичную строку, которая однозначно
    восстанавливает то же двоичное значение (repr), и дальше округляется как
    строка. Поэтому 10.115 даёт 10.12, хотя двоичное значение чуть меньше.

    Args:
        value: Конечный float
        precision: Количество сохраняемых дробных разрядов

    Returns:
        nominator

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite float to decimal: {value}")
    return nominator_from_string(repr(float(value)), precision)


def nominator_from_int(value: int, precision: int) -> int:
    """Конверсия int в nominator: точное умножение на 10^precision."""
    return value * power10(precision)


def nominator_from_parts(integer_part: int, fraction_part: int, precision: int) -> int:
    """
    Конверсия пары (integer_part, fraction_part) в nominator.

    fraction_part — уже записанные дробные разряды. Если их не больше
    precision, они занимают младшие позиции: (10, 5) при precision=2 → 10.05.
    Если больше — округляются до precision разрядов half-away-from-zero:
    (10, 2346) при precision=3 → 10.235.

    Знак берётся из integer_part: (-10, 11) → -10.11, а не -10 + 0.11.

    Args:
        integer_part: Целая часть (со знаком)
        fraction_part: Дробные разряды (неотрицательные)
        precision: Количество сохраняемых дробных разрядов

    Returns:
        nominator

    Raises:
        ValueError: Если fraction_part < 0
    """
    if fraction_part < 0:
        raise ValueError(f"fraction_part must be non-negative, got {fraction_part}")

    fraction_length = digit_count(fraction_part)
    if fraction_length > precision:
        fraction_part = round_half_away_from_zero(
            fraction_part, power10(fraction_length - precision)
        )

    nominator = integer_part * power10(precision)
    if integer_part >= 0:
        return nominator + fraction_part
    return nominator - fraction_part
