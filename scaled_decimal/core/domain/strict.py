"""
StrictDecimal — decimal с фиксированной точкой и специальными значениями

Strict-вариант ScaledDecimal: деление на ноль не падает, а возвращает
специальное значение, закодированное зарезервированным nominator'ом ширины:

    0 / 0        → NaN        (nominator = max)
    +x / 0       → +Infinity  (nominator = max - 1)
    -x / 0       → -Infinity  (nominator = min + 1)

Специальные значения в + - * распространяются по правилам IEEE 754
(NaN доминирует, ∞ - ∞ = NaN, ∞ * 0 = NaN), конечное / ∞ = 0.
Сравнения остаются полным порядком по nominator: NaN — наибольшее значение
и равен сам себе.

Конечные значения лежат в [min + 2, max - 2]; выход за пределы —
DecimalOverflowError.
"""

import logging
import math
from functools import lru_cache
from typing import Final

from scaled_decimal.core.domain.config import DecimalConfig
from scaled_decimal.core.domain.decimal import (
    Operation,
    ScaledDecimal,
    _is_plain_int,
    build_decimal_class,
)
from scaled_decimal.core.domain.width import SpecialValue, StorageWidth
from scaled_decimal.core.math.numerical_safeguards import validate_in_range

logger = logging.getLogger(__name__)

# Строковые литералы специальных значений (без учёта регистра)
SPECIAL_LITERALS: Final[dict[str, SpecialValue]] = {
    "nan": SpecialValue.NAN,
    "inf": SpecialValue.POS_INF,
    "+inf": SpecialValue.POS_INF,
    "infinity": SpecialValue.POS_INF,
    "+infinity": SpecialValue.POS_INF,
    "-inf": SpecialValue.NEG_INF,
    "-infinity": SpecialValue.NEG_INF,
}


def _sign(value: ScaledDecimal, special: SpecialValue | None) -> int:
    if special is not None:
        return special.sign
    return (value.nominator > 0) - (value.nominator < 0)


def _infinity(sign: int) -> SpecialValue:
    return SpecialValue.POS_INF if sign > 0 else SpecialValue.NEG_INF


def propagate_special(
    operation: Operation,
    lhs: ScaledDecimal,
    lhs_special: SpecialValue | None,
    rhs: ScaledDecimal,
    rhs_special: SpecialValue | None,
) -> int | SpecialValue:
    """
    Результат операции, в которой хотя бы один операнд специальный.

    Returns:
        SpecialValue либо 0 (конечное / ∞)
    """
    if SpecialValue.NAN in (lhs_special, rhs_special):
        return SpecialValue.NAN

    lhs_sign = _sign(lhs, lhs_special)
    rhs_sign = _sign(rhs, rhs_special)

    if operation in (Operation.ADD, Operation.SUB):
        if operation is Operation.SUB:
            rhs_sign = -rhs_sign
        if lhs_special is not None and rhs_special is not None:
            return _infinity(lhs_sign) if lhs_sign == rhs_sign else SpecialValue.NAN
        return _infinity(lhs_sign if lhs_special is not None else rhs_sign)

    if operation is Operation.MUL:
        if lhs_sign == 0 or rhs_sign == 0:
            return SpecialValue.NAN
        return _infinity(lhs_sign * rhs_sign)

    # DIV
    if lhs_special is not None and rhs_special is not None:
        return SpecialValue.NAN
    if rhs_special is not None:
        return 0
    # ∞ / 0 сохраняет знак делимого
    return _infinity(lhs_sign * rhs_sign if rhs_sign else lhs_sign)


class StrictDecimal(ScaledDecimal):
    """
    Strict decimal с NaN/Infinity.

    Конкретный тип создаётся через strict_decimal_type(width, precision):

        >>> D = strict_decimal_type("int64", 2)
        >>> (D(0) / D(0)).to_string()
        'nan'
        >>> (D(-5) / D(0)).to_string()
        '-inf'
    """

    __slots__ = ()

    @classmethod
    def from_nominator(cls, nominator: int) -> "StrictDecimal":
        """
        Значение из "сырого" nominator; зарезервированные nominator'ы дают
        соответствующие специальные значения.
        """
        if _is_plain_int(nominator) and cls.WIDTH.special_of(nominator) is not None:
            return cls._from_raw(nominator)
        return super().from_nominator(nominator)

    @classmethod
    def nan(cls) -> "StrictDecimal":
        return cls._from_raw(cls.WIDTH.nan_nominator)

    @classmethod
    def infinity(cls, sign: int = 1) -> "StrictDecimal":
        return cls._from_raw(cls.WIDTH.sentinel(_infinity(sign)))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _nominator_from_float(cls, value: float) -> int | SpecialValue:
        if math.isnan(value):
            return SpecialValue.NAN
        if math.isinf(value):
            return _infinity(1 if value > 0 else -1)
        return super()._nominator_from_float(value)

    @classmethod
    def _nominator_from_string(cls, text: str) -> int | SpecialValue:
        special = SPECIAL_LITERALS.get(text.strip().lower())
        if special is not None:
            return special
        return super()._nominator_from_string(text)

    @classmethod
    def _finalize(cls, raw: int | SpecialValue) -> int:
        if isinstance(raw, SpecialValue):
            return cls.WIDTH.sentinel(raw)
        return validate_in_range(raw, cls.__name__, cls.WIDTH.finite_min, cls.WIDTH.finite_max)

    @classmethod
    def _family_type(cls, width: StorageWidth | str, precision: int) -> type["StrictDecimal"]:
        return strict_decimal_type(width, precision)

    # -------------------------------------------------------------------------
    # Special values
    # -------------------------------------------------------------------------

    def special_value(self) -> SpecialValue | None:
        return self.WIDTH.special_of(self._nominator)

    def is_nan(self) -> bool:
        return self.special_value() is SpecialValue.NAN

    def is_infinite(self) -> bool:
        return self.special_value() in (SpecialValue.POS_INF, SpecialValue.NEG_INF)

    def is_finite(self) -> bool:
        return self.special_value() is None

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _compute(self, operation: Operation, rhs: ScaledDecimal) -> int | SpecialValue:
        lhs_special = self.special_value()
        rhs_special = rhs.special_value()
        if lhs_special is not None or rhs_special is not None:
            return propagate_special(operation, self, lhs_special, rhs, rhs_special)

        if operation is Operation.DIV and rhs.nominator == 0:
            return self._divide_by_zero()
        return super()._compute(operation, rhs)

    def _divide_by_zero(self) -> SpecialValue:
        if self._nominator == 0:
            result = SpecialValue.NAN
        else:
            result = _infinity(self._nominator)
        logger.debug(
            "%s division by zero: %s / 0 -> %s",
            type(self).__name__,
            self.to_string(),
            result.value,
        )
        return result

    def _negated(self) -> int | SpecialValue:
        special = self.special_value()
        if special is None:
            return -self._nominator
        if special is SpecialValue.NAN:
            return special
        return _infinity(-special.sign)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Десятичная запись; специальные значения — 'nan', 'inf', '-inf'."""
        special = self.special_value()
        if special is not None:
            return special.value
        return super().to_string()

    def to_double(self) -> float:
        special = self.special_value()
        if special is SpecialValue.NAN:
            return math.nan
        if special is not None:
            return math.copysign(math.inf, special.sign)
        return super().to_double()

    def __int__(self) -> int:
        special = self.special_value()
        if special is SpecialValue.NAN:
            raise ValueError("cannot convert nan to integer")
        if special is not None:
            raise OverflowError("cannot convert infinity to integer")
        return self.integer_part


# =============================================================================
# ФАБРИКА ТИПОВ
# =============================================================================


@lru_cache(maxsize=None)
def _cached_strict_type(width: StorageWidth, precision: int) -> type[StrictDecimal]:
    config = DecimalConfig(width=width, precision=precision)
    return build_decimal_class(StrictDecimal, config, f"StrictDecimal[{config.describe()}]")


def strict_decimal_type(
    width: StorageWidth | str = StorageWidth.INT64, precision: int = 2
) -> type[StrictDecimal]:
    """
    Strict decimal-тип для (width, precision).

    Одинаковые аргументы возвращают один и тот же класс.
    """
    return _cached_strict_type(StorageWidth(width), precision)

