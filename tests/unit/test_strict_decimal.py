"""
Тесты для StrictDecimal

Проверяет:
1. Специальные значения: конструирование, рендеринг, предикаты
2. Деление на ноль → NaN / ±Infinity (с DEBUG-логом)
3. Распространение специальных значений в арифметике
4. Сужённый конечный диапазон (два значения с каждой стороны зарезервированы)
5. Пресеты
"""

import logging
import math

import pytest

from scaled_decimal import (
    Decimal32x2,
    Decimal32x3,
    Decimal64x2,
    Decimal64x4,
    DecimalOverflowError,
    Integer,
    SpecialValue,
    StorageWidth,
    StrictDecimal,
    decimal_type,
    strict_decimal_type,
)


@pytest.fixture
def s2() -> type[StrictDecimal]:
    return strict_decimal_type("int64", 2)


# =============================================================================
# СПЕЦИАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestSpecialValues:
    """Тесты специальных значений"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("nan", SpecialValue.NAN),
            ("NaN", SpecialValue.NAN),
            ("inf", SpecialValue.POS_INF),
            ("+inf", SpecialValue.POS_INF),
            ("Infinity", SpecialValue.POS_INF),
            ("-inf", SpecialValue.NEG_INF),
            (" -Infinity ", SpecialValue.NEG_INF),
        ],
    )
    def test_parse_literals(self, s2, text: str, expected: SpecialValue) -> None:
        assert s2(text).special_value() is expected

    def test_from_float(self, s2) -> None:
        assert s2(math.nan).is_nan()
        assert s2(math.inf).special_value() is SpecialValue.POS_INF
        assert s2(-math.inf).special_value() is SpecialValue.NEG_INF

    def test_sentinel_nominators(self, s2) -> None:
        width = StorageWidth.INT64
        assert s2.nan().nominator == width.max_value
        assert s2.infinity().nominator == width.max_value - 1
        assert s2.infinity(-1).nominator == width.min_value + 1

    def test_from_nominator_accepts_sentinels(self, s2) -> None:
        assert s2.from_nominator(StorageWidth.INT64.max_value).is_nan()

    def test_rendering(self, s2) -> None:
        assert s2("nan").to_string() == "nan"
        assert str(s2("inf")) == "inf"
        assert s2("-inf").to_string() == "-inf"

    def test_predicates(self, s2) -> None:
        assert s2("1").is_finite()
        assert not s2("1").is_nan()
        assert s2("inf").is_infinite()
        assert not s2("nan").is_infinite()
        assert not s2("nan").is_finite()

    def test_float_conversion(self, s2) -> None:
        assert math.isnan(s2("nan").to_double())
        assert s2("inf").to_double() == math.inf
        assert s2("-inf").to_float() == -math.inf

    def test_int_conversion_rejected(self, s2) -> None:
        with pytest.raises(ValueError):
            int(s2("nan"))
        with pytest.raises(OverflowError):
            int(s2("-inf"))

    def test_repr(self, s2) -> None:
        assert repr(s2("nan")) == "StrictDecimal[int64, 2]('nan')"


# =============================================================================
# ДЕЛЕНИЕ НА НОЛЬ
# =============================================================================


class TestDivisionByZero:
    """Тесты деления на ноль"""

    def test_positive_over_zero(self, s2) -> None:
        assert (s2("10") / s2(0)).to_string() == "inf"

    def test_negative_over_zero(self, s2) -> None:
        assert (s2("-10") / s2(0)).to_string() == "-inf"

    def test_zero_over_zero(self, s2) -> None:
        assert (s2(0) / s2(0)).to_string() == "nan"

    def test_int_zero_divisor(self, s2) -> None:
        assert (s2("1.5") / 0).to_string() == "inf"

    def test_logs_debug(self, s2, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="scaled_decimal.core.domain.strict"):
            s2(1) / s2(0)
        assert "division by zero" in caplog.text


# =============================================================================
# РАСПРОСТРАНЕНИЕ
# =============================================================================


class TestPropagation:
    """Тесты распространения специальных значений"""

    def test_nan_dominates(self, s2) -> None:
        nan = s2("nan")
        for result in (nan + 1, s2(1) - nan, nan * s2("inf"), s2(0) / nan, -nan):
            assert result.is_nan()

    def test_infinity_addition(self, s2) -> None:
        inf = s2("inf")
        assert (inf + 5).to_string() == "inf"
        assert (s2(5) - inf).to_string() == "-inf"
        assert (inf + inf).to_string() == "inf"
        assert (inf - inf).is_nan()
        assert (inf + s2("-inf")).is_nan()
        assert (s2("-inf") - inf).to_string() == "-inf"

    def test_infinity_multiplication(self, s2) -> None:
        inf = s2("inf")
        assert (inf * s2("-2")).to_string() == "-inf"
        assert (s2("-inf") * s2("-inf")).to_string() == "inf"
        assert (inf * 0).is_nan()

    def test_infinity_division(self, s2) -> None:
        inf = s2("inf")
        assert (s2(5) / inf).to_string() == "0.00"
        assert (inf / s2("-2")).to_string() == "-inf"
        assert (inf / inf).is_nan()
        assert (s2("-inf") / 0).to_string() == "-inf"

    def test_negation_swaps_infinities(self, s2) -> None:
        assert (-s2("inf")).to_string() == "-inf"
        assert (-s2("-inf")).to_string() == "inf"
        assert abs(s2("-inf")).to_string() == "inf"

    def test_specials_across_precisions(self) -> None:
        s3 = strict_decimal_type("int64", 3)
        s2 = strict_decimal_type("int64", 2)
        assert (s3("inf") * s2("1.5")).to_string() == "inf"
        assert s2(s3("-inf")).to_string() == "-inf"

    def test_lenient_rejects_strict_special(self) -> None:
        lenient = decimal_type("int64", 2)
        with pytest.raises(ValueError):
            lenient(1) + strict_decimal_type("int64", 2)("nan")


# =============================================================================
# ДИАПАЗОН И ПОРЯДОК
# =============================================================================


class TestRangeAndOrdering:
    """Тесты диапазона и порядка"""

    def test_finite_range_narrowed(self) -> None:
        s = strict_decimal_type("int8", 0)
        assert s(125).nominator == 125
        assert s(-126).nominator == -126
        with pytest.raises(DecimalOverflowError):
            s(126)
        with pytest.raises(DecimalOverflowError):
            s(-127)

    def test_arithmetic_never_lands_on_sentinel(self) -> None:
        s = strict_decimal_type("int8", 0)
        with pytest.raises(DecimalOverflowError):
            s(120) + s(6)

    def test_total_order_by_nominator(self, s2) -> None:
        assert s2("-inf") < s2("-1000") < s2("1000") < s2("inf") < s2("nan")
        assert s2("nan") == s2("nan")
        assert hash(s2("nan")) == hash(s2("nan"))


# =============================================================================
# ПРЕСЕТЫ
# =============================================================================


class TestPresets:
    """Тесты пресетов"""

    def test_integer(self) -> None:
        assert Integer.PRECISION == 0
        assert Integer.WIDTH is StorageWidth.INT64
        assert (Integer(38148) / Integer(0)).to_string() == "inf"

    def test_decimal32x3(self) -> None:
        assert issubclass(Decimal32x3, StrictDecimal)
        assert Decimal32x3.WIDTH is StorageWidth.INT32
        assert Decimal32x3("1.0005").to_string() == "1.001"

    def test_decimal64x4(self) -> None:
        assert Decimal64x4 is strict_decimal_type("int64", 4)
        assert (Decimal64x4(1) / Decimal64x4(3)).to_string() == "0.3333"

    def test_cast_keeps_variant(self) -> None:
        value = Decimal32x3("2.5").cast_to("int64", 1)
        assert type(value) is strict_decimal_type("int64", 1)
        assert Decimal32x3("nan").cast_to("int64", 1).is_nan()

    def test_two_digit_presets_are_strict(self) -> None:
        assert Decimal32x2 is strict_decimal_type("int32", 2)
        assert Decimal64x2 is strict_decimal_type("int64", 2)
        assert issubclass(Decimal64x2, StrictDecimal)
        assert Decimal64x2("nan").is_nan()
        assert (Decimal32x2(1) / 0).to_string() == "inf"
