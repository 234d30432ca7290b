"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Степени десяти и подсчёт разрядов
2. Деление с усечением к нулю
3. Округление half-away-from-zero
4. Сдвиг десятичной точки
5. Clamp и валидацию диапазона
"""

import pytest

from scaled_decimal.core.math.numerical_safeguards import (
    MAX_DECIMAL_SHIFT,
    DecimalOverflowError,
    clamp,
    digit_count,
    drop_last_digit,
    is_in_range,
    power10,
    round_half_away_from_zero,
    shift_decimal,
    sign_of,
    trunc_div,
    validate_in_range,
)

# =============================================================================
# СТЕПЕНИ И РАЗРЯДЫ
# =============================================================================


class TestPowerAndDigits:
    """Тесты для power10 / digit_count / sign_of"""

    def test_power10_values(self) -> None:
        assert power10(0) == 1
        assert power10(2) == 100
        assert power10(18) == 10**18

    def test_power10_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            power10(-1)

    def test_digit_count_zero(self) -> None:
        """Ноль не имеет разрядов (нет log10(0))"""
        assert digit_count(0) == 0

    def test_digit_count_ignores_sign(self) -> None:
        assert digit_count(7) == 1
        assert digit_count(-2346) == 4
        assert digit_count(10**30) == 31

    def test_sign_of(self) -> None:
        assert sign_of(0) == 1
        assert sign_of(5) == 1
        assert sign_of(-5) == -1


# =============================================================================
# ДЕЛЕНИЕ И ОКРУГЛЕНИЕ
# =============================================================================


class TestTruncDiv:
    """Тесты для trunc_div"""

    def test_truncates_toward_zero(self) -> None:
        """В отличие от //, отрицательное частное усекается к нулю"""
        assert trunc_div(7, 2) == 3
        assert trunc_div(-7, 2) == -3
        assert trunc_div(7, -2) == -3
        assert trunc_div(-7, -2) == 3

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)


class TestDropLastDigit:
    """Тесты для drop_last_digit"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (10235, 1024),
            (10234, 1023),
            (-10235, -1024),
            (-10234, -1023),
            (5, 1),
            (-5, -1),
            (4, 0),
            (0, 0),
        ],
    )
    def test_half_away_from_zero(self, value: int, expected: int) -> None:
        assert drop_last_digit(value) == expected


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_exact_division(self) -> None:
        assert round_half_away_from_zero(4700, 100) == 47

    def test_half_rounds_away(self) -> None:
        assert round_half_away_from_zero(47235, 100) == 472
        assert round_half_away_from_zero(472350, 100) == 4724
        assert round_half_away_from_zero(-472350, 100) == -4724

    def test_below_half_rounds_toward_zero(self) -> None:
        assert round_half_away_from_zero(47249, 100) == 472
        assert round_half_away_from_zero(-47249, 100) == -472

    def test_denominator_one(self) -> None:
        assert round_half_away_from_zero(-13, 1) == -13

    def test_non_positive_denominator_raises(self) -> None:
        with pytest.raises(ValueError):
            round_half_away_from_zero(1, 0)
        with pytest.raises(ValueError):
            round_half_away_from_zero(1, -10)


# =============================================================================
# СДВИГ
# =============================================================================


class TestShiftDecimal:
    """Тесты для shift_decimal"""

    def test_shift_left_is_exact(self) -> None:
        assert shift_decimal(123, 3) == 123000
        assert shift_decimal(-123, 1) == -1230

    def test_shift_right_rounds(self) -> None:
        assert shift_decimal(102346, -1) == 10235
        assert shift_decimal(-102345, -1) == -10235
        assert shift_decimal(50, -2) == 1

    def test_shift_past_all_digits_is_zero(self) -> None:
        assert shift_decimal(99, -5) == 0

    def test_zero_never_overflows(self) -> None:
        assert shift_decimal(0, MAX_DECIMAL_SHIFT + 100) == 0

    def test_huge_shift_raises(self) -> None:
        with pytest.raises(DecimalOverflowError):
            shift_decimal(1, MAX_DECIMAL_SHIFT + 1)


# =============================================================================
# CLAMP И ДИАПАЗОНЫ
# =============================================================================


class TestClampAndRange:
    """Тесты для clamp / is_in_range / validate_in_range"""

    def test_clamp(self) -> None:
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_clamp_open_bounds(self) -> None:
        assert clamp(-100, max_value=10) == -100
        assert clamp(100, min_value=0) == 100

    def test_is_in_range_inclusive(self) -> None:
        assert is_in_range(0, 0, 10)
        assert is_in_range(10, 0, 10)
        assert not is_in_range(11, 0, 10)

    def test_validate_in_range_returns_value(self) -> None:
        assert validate_in_range(127, "int8", -128, 127) == 127

    def test_validate_in_range_raises_overflow(self) -> None:
        with pytest.raises(DecimalOverflowError, match="int8"):
            validate_in_range(128, "int8", -128, 127)

    def test_overflow_is_overflow_error(self) -> None:
        """DecimalOverflowError ловится как стандартный OverflowError"""
        with pytest.raises(OverflowError):
            validate_in_range(-129, "int8", -128, 127)
