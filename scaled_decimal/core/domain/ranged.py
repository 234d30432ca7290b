"""
RangedDecimal — strict decimal, ограниченный диапазоном [min_units, max_units]

Обёртка над strict-значением той же ширины и точности. Каждый результат
(конструирование, арифметика, унарный минус) зажимается в диапазон вместо
переполнения:

    - конечное значение вне диапазона → ближайшая граница
    - +Infinity → max, -Infinity → min
    - NaN не зажимается и остаётся NaN

Промежуточный результат операции вычисляется без проверки ширины, поэтому
range-bounded тип не выбрасывает DecimalOverflowError на арифметике.
"""

import logging
from functools import lru_cache
from typing import Any, ClassVar

from scaled_decimal.core.domain.config import DecimalConfig
from scaled_decimal.core.domain.decimal import (
    DecimalValue,
    Operation,
    ScaledDecimal,
    _is_plain_int,
    build_decimal_class,
    decimal_cast,
)
from scaled_decimal.core.domain.strict import StrictDecimal, strict_decimal_type
from scaled_decimal.core.domain.width import SpecialValue, StorageWidth
from scaled_decimal.core.math.construction import nominator_from_int
from scaled_decimal.core.math.numerical_safeguards import clamp

logger = logging.getLogger(__name__)


class RangedDecimal(DecimalValue):
    """
    Range-bounded strict decimal.

    Конкретный тип создаётся через ranged_decimal_type(width, precision,
    min_units, max_units):

        >>> Ratio = ranged_decimal_type("int64", 5, 0, 1)
        >>> Ratio("1.5").to_string()
        '1.00000'
        >>> (Ratio("0.5") - 2).to_string()
        '0.00000'
    """

    __slots__ = ("_value",)

    WIDTH: ClassVar[StorageWidth]
    PRECISION: ClassVar[int]
    DENOMINATOR: ClassVar[int]
    INNER: ClassVar[type[StrictDecimal]]
    MIN_NOMINATOR: ClassVar[int]
    MAX_NOMINATOR: ClassVar[int]

    def __init__(self, value: Any = 0, fraction_part: int | None = None) -> None:
        cls = type(self)
        if "config" not in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} has no configuration; build a concrete type first"
            )
        object.__setattr__(self, "_value", cls._clamped(cls.INNER._construct(value, fraction_part)))

    @classmethod
    def from_nominator(cls, nominator: int) -> "RangedDecimal":
        """
        Значение из "сырого" nominator с зажатием в диапазон.

        Зарезервированные nominator'ы ширины трактуются как специальные
        значения (NaN сохраняется, бесконечности насыщаются).
        """
        if not _is_plain_int(nominator):
            raise TypeError(f"nominator must be int, got {type(nominator).__name__}")
        special = cls.WIDTH.special_of(nominator)
        return cls._wrap(special if special is not None else nominator)

    @classmethod
    def min_value(cls) -> "RangedDecimal":
        return cls._wrap(cls.MIN_NOMINATOR)

    @classmethod
    def max_value(cls) -> "RangedDecimal":
        return cls._wrap(cls.MAX_NOMINATOR)

    @classmethod
    def _clamped(cls, raw: int | SpecialValue) -> StrictDecimal:
        if raw is SpecialValue.NAN:
            return cls.INNER.nan()

        if isinstance(raw, SpecialValue):
            clamped = cls.MAX_NOMINATOR if raw.sign > 0 else cls.MIN_NOMINATOR
            logger.debug("%s saturated %s to %s", cls.__name__, raw.value, clamped)
        else:
            clamped = clamp(raw, cls.MIN_NOMINATOR, cls.MAX_NOMINATOR)
            if clamped != raw:
                logger.debug("%s clamped nominator %s to %s", cls.__name__, raw, clamped)
        return cls.INNER._from_raw(clamped)

    @classmethod
    def _wrap(cls, raw: int | SpecialValue) -> "RangedDecimal":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", cls._clamped(raw))
        return instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "RangedDecimal":
        return self

    def __deepcopy__(self, memo: dict) -> "RangedDecimal":
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def as_scaled(self) -> StrictDecimal:
        return self._value

    @property
    def nominator(self) -> int:
        return self._value.nominator

    @property
    def integer_part(self) -> int:
        return self._value.integer_part

    @property
    def fraction_part(self) -> int:
        return self._value.fraction_part

    @property
    def min_units(self) -> int:
        return self.config.min_units

    @property
    def max_units(self) -> int:
        return self.config.max_units

    def special_value(self) -> SpecialValue | None:
        return self._value.special_value()

    def is_nan(self) -> bool:
        return self._value.is_nan()

    def is_infinite(self) -> bool:
        return False

    def is_finite(self) -> bool:
        return self._value.is_finite()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> ScaledDecimal | None:
        if isinstance(other, DecimalValue):
            return other.as_scaled()
        if _is_plain_int(other):
            return self._int_operand(other)
        return None

    def _int_operand(self, value: int) -> StrictDecimal:
        # без проверки ширины: результат всё равно зажимается в _wrap
        return self.INNER._from_raw(nominator_from_int(value, self.PRECISION))

    def _binary(self, operation: Operation, other: Any) -> "RangedDecimal":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._value._compute(operation, rhs))

    def _reflected(self, operation: Operation, other: Any) -> "RangedDecimal":
        # int слева: считается без зажатия левого операнда
        if not _is_plain_int(other):
            return NotImplemented
        return self._wrap(self._int_operand(other)._compute(operation, self._value))

    def __add__(self, other: Any) -> "RangedDecimal":
        return self._binary(Operation.ADD, other)

    def __radd__(self, other: Any) -> "RangedDecimal":
        return self._reflected(Operation.ADD, other)

    def __sub__(self, other: Any) -> "RangedDecimal":
        return self._binary(Operation.SUB, other)

    def __rsub__(self, other: Any) -> "RangedDecimal":
        return self._reflected(Operation.SUB, other)

    def __mul__(self, other: Any) -> "RangedDecimal":
        return self._binary(Operation.MUL, other)

    def __rmul__(self, other: Any) -> "RangedDecimal":
        return self._reflected(Operation.MUL, other)

    def __truediv__(self, other: Any) -> "RangedDecimal":
        return self._binary(Operation.DIV, other)

    def __rtruediv__(self, other: Any) -> "RangedDecimal":
        return self._reflected(Operation.DIV, other)

    def __neg__(self) -> "RangedDecimal":
        return self._wrap(self._value._negated())

    def __pos__(self) -> "RangedDecimal":
        return self

    def __abs__(self) -> "RangedDecimal":
        return -self if self._value.nominator < 0 else self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        return self._value == other

    def __ne__(self, other: object) -> bool:
        return self._value != other

    def __lt__(self, other: Any) -> bool:
        return self._value < other

    def __le__(self, other: Any) -> bool:
        return self._value <= other

    def __gt__(self, other: Any) -> bool:
        return self._value > other

    def __ge__(self, other: Any) -> bool:
        return self._value >= other

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        return self._value.to_string()

    def to_double(self) -> float:
        return self._value.to_double()

    def to_float(self) -> float:
        return self._value.to_float()

    def cast_to(self, width: StorageWidth | str, precision: int) -> "RangedDecimal":
        """Cast в другую ширину/точность с теми же границами."""
        target = ranged_decimal_type(width, precision, self.config.min_units, self.config.max_units)
        return decimal_cast(self, target)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        return int(self._value)


# =============================================================================
# ФАБРИКА ТИПОВ
# =============================================================================


@lru_cache(maxsize=None)
def _cached_ranged_type(
    width: StorageWidth, precision: int, min_units: int, max_units: int
) -> type[RangedDecimal]:
    config = DecimalConfig(
        width=width, precision=precision, min_units=min_units, max_units=max_units
    )
    return build_decimal_class(
        RangedDecimal,
        config,
        f"RangedDecimal[{config.describe()}]",
        INNER=strict_decimal_type(width, precision),
        MIN_NOMINATOR=config.min_nominator,
        MAX_NOMINATOR=config.max_nominator,
    )


def ranged_decimal_type(
    width: StorageWidth | str, precision: int, min_units: int, max_units: int
) -> type[RangedDecimal]:
    """
    Range-bounded decimal-тип для (width, precision, [min_units, max_units]).

    Одинаковые аргументы возвращают один и тот же класс.

    Raises:
        pydantic.ValidationError: Если границы невалидны (min > max или
            не помещаются в ширину)
    """
    return _cached_ranged_type(StorageWidth(width), precision, min_units, max_units)
