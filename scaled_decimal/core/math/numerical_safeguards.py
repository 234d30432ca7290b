"""
Numerical Safeguards — целочисленные примитивы округления

Модуль содержит все операции над "сырыми" целыми, на которых строится
арифметика с фиксированной точкой:
- Степени десяти и подсчёт десятичных разрядов
- Деление с усечением к нулю (как у машинных целых, а не floor у Python)
- Округление half-away-from-zero по отброшенному разряду
- Сдвиг десятичной точки с округлением
- Clamp и проверка диапазона ширины хранения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции работают только с int — никаких float в промежуточных значениях
2. Округление всегда half-away-from-zero: -0.005 → -0.01, а не -0.00
3. Переполнение никогда не проходит молча (DecimalOverflowError)
4. Все операции детерминированы и воспроизводимы
"""

from functools import lru_cache
from typing import Final

# =============================================================================
# ОГРАНИЧЕНИЯ
# =============================================================================

# Максимальный сдвиг десятичной точки при разборе входных данных.
# int128 вмещает 39 десятичных разрядов; всё, что больше, гарантированно
# переполняет любую ширину хранения.
MAX_DECIMAL_SHIFT: Final[int] = 64


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalOverflowError(OverflowError):
    """
    Результат не помещается в ширину хранения целевого типа.

    Промежуточные вычисления точные (int без ограничений), проверяется только
    итоговый nominator каждой операции.
    """

    pass


# =============================================================================
# СТЕПЕНИ И РАЗРЯДЫ
# =============================================================================


@lru_cache(maxsize=256)
def power10(exponent: int) -> int:
    """
    10 в целой неотрицательной степени.

    Raises:
        ValueError: Если exponent < 0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


def digit_count(value: int) -> int:
    """
    Количество десятичных разрядов в abs(value).

    Эквивалент floor(log10(value)) + 1, но точный для любых int.
    Для нуля возвращает 0 (log10(0) не определён).

    Examples:
        >>> digit_count(0)
        0
        >>> digit_count(7)
        1
        >>> digit_count(-2346)
        4
    """
    if value == 0:
        return 0
    return len(str(abs(value)))


def sign_of(value: int) -> int:
    """Знак целого: +1 для value >= 0, -1 иначе."""
    return 1 if value >= 0 else -1


# =============================================================================
# ДЕЛЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор // в Python округляет к минус бесконечности (-7 // 2 == -4),
    здесь же -7 / 2 → -3.

    Raises:
        ZeroDivisionError: Если denominator == 0
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def drop_last_digit(value: int) -> int:
    """
    Отбросить младший десятичный разряд с округлением half-away-from-zero.

    Разряд >= 5 увеличивает модуль результата на 1, направление задаёт
    знак value.

    Examples:
        >>> drop_last_digit(10235)
        1024
        >>> drop_last_digit(10234)
        1023
        >>> drop_last_digit(-10235)
        -1024
    """
    quotient, last_digit = divmod(abs(value), 10)
    if last_digit >= 5:
        quotient += 1
    return sign_of(value) * quotient


def round_half_away_from_zero(numerator: int, denominator: int) -> int:
    """
    Точное деление numerator / denominator с округлением half-away-from-zero.

    Остаток сравнивается с половиной делителя: abs(remainder) * 2 >= denominator
    означает округление от нуля. Для denominator == 1 округления нет.

    Args:
        numerator: Делимое (любого знака)
        denominator: Делитель (положительный)

    Returns:
        Округлённое частное

    Raises:
        ValueError: Если denominator <= 0

    Examples:
        >>> round_half_away_from_zero(47235, 100)
        472
        >>> round_half_away_from_zero(-47235, 100)
        -472
        >>> round_half_away_from_zero(-5, 10)
        -1
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    quotient, remainder = divmod(abs(numerator), denominator)
    if remainder * 2 >= denominator:
        quotient += 1
    return sign_of(numerator) * quotient


def shift_decimal(value: int, places: int) -> int:
    """
    Умножение value на 10^places; при places < 0 — деление с округлением.

    Args:
        value: Исходное целое
        places: Сдвиг десятичной точки вправо (может быть отрицательным)

    Returns:
        value * 10^places, округлённое half-away-from-zero

    Raises:
        DecimalOverflowError: Если сдвиг превышает MAX_DECIMAL_SHIFT
    """
    if value == 0:
        return 0
    if places >= 0:
        if places > MAX_DECIMAL_SHIFT:
            raise DecimalOverflowError(
                f"Decimal shift of {places} places exceeds {MAX_DECIMAL_SHIFT}"
            )
        return value * power10(places)

    # Сдвиг дальше, чем разрядов в value (+1 на разряд округления) → 0
    if -places > digit_count(value) + 1:
        return 0
    return round_half_away_from_zero(value, power10(-places))


# =============================================================================
# CLAMP И ДИАПАЗОНЫ
# =============================================================================


def clamp(value: int, min_value: int | None = None, max_value: int | None = None) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def is_in_range(value: int, min_value: int, max_value: int) -> bool:
    """Проверка min_value <= value <= max_value."""
    return min_value <= value <= max_value


def validate_in_range(value: int, name: str, min_value: int, max_value: int) -> int:
    """
    Валидация, что nominator помещается в ширину хранения.

    Args:
        value: Проверяемое значение
        name: Имя типа/параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение
        max_value: Максимальное допустимое значение

    Returns:
        value без изменений

    Raises:
        DecimalOverflowError: Если value вне [min_value, max_value]
    """
    if not is_in_range(value, min_value, max_value):
        raise DecimalOverflowError(
            f"{name}: nominator {value} outside [{min_value}, {max_value}]"
        )
    return value
