"""
ScaledDecimal — десятичное число с фиксированной точкой (lenient-вариант)

Значение хранится одним целым nominator = value * 10^precision. Тип
параметризуется шириной хранения и точностью; конкретные типы строятся
фабрикой decimal_type() и кэшируются, поэтому одна конфигурация — один класс.

Свойства:
- Immutable и hashable; составное присваивание (a += b) связывает имя с
  новым значением типа левого операнда
- Тип результата бинарной операции — всегда тип левого операнда
- Все округления — half-away-from-zero
- Переполнение ширины → DecimalOverflowError; деление на ноль →
  ZeroDivisionError (нарушение предусловия, как у встроенных int)
"""

import math
import struct
from abc import ABC, abstractmethod
from enum import Enum
from fractions import Fraction
from functools import lru_cache
from typing import Any, ClassVar, Final

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from scaled_decimal.core.domain.config import DecimalConfig
from scaled_decimal.core.domain.width import SpecialValue, StorageWidth
from scaled_decimal.core.math.arithmetic import (
    add,
    divide,
    multiply_cross,
    multiply_same,
    rescale,
    subtract,
)
from scaled_decimal.core.math.construction import (
    nominator_from_float,
    nominator_from_int,
    nominator_from_parts,
    nominator_from_string,
)
from scaled_decimal.core.math.numerical_safeguards import trunc_div, validate_in_range

# Максимальное конечное значение IEEE binary32
FLOAT32_MAX: Final[float] = 3.4028234663852886e38


class Operation(str, Enum):
    """Бинарная арифметическая операция"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def as_float32(value: float) -> float:
    """Округление double до ближайшего IEEE binary32 (результат — float)."""
    if math.isfinite(value) and abs(value) > FLOAT32_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("<f", struct.pack("<f", value))[0]


# =============================================================================
# BASE
# =============================================================================


class DecimalValue(ABC):
    """
    Общий протокол всех decimal-типов (ScaledDecimal, StrictDecimal,
    RangedDecimal): приведение к ScaledDecimal и поддержка Pydantic-полей.
    """

    __slots__ = ()

    config: ClassVar[DecimalConfig]

    @abstractmethod
    def as_scaled(self) -> "ScaledDecimal":
        """Значение как ScaledDecimal (для range-bounded — внутреннее значение)."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _validate(cls, value: Any) -> "DecimalValue":
        if type(value) is cls:
            return value
        try:
            return cls(value)
        except (TypeError, ArithmeticError) as exc:
            raise ValueError(str(exc)) from exc


class ScaledDecimal(DecimalValue):
    """
    Lenient decimal с фиксированной точкой.

    Конкретный тип создаётся через decimal_type(width, precision):

        >>> Decimal2D = decimal_type("int32", 2)
        >>> Decimal2D("10.115")
        ScaledDecimal[int32, 2]('10.12')
        >>> Decimal2D(10, 5).to_string()
        '10.05'

    Конструктор принимает str, float, int, другой decimal (cast) или пару
    (integer_part, fraction_part).
    """

    __slots__ = ("_nominator",)

    WIDTH: ClassVar[StorageWidth]
    PRECISION: ClassVar[int]
    DENOMINATOR: ClassVar[int]

    def __init__(self, value: Any = 0, fraction_part: int | None = None) -> None:
        cls = type(self)
        if "config" not in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} has no configuration; build a concrete type first"
            )
        object.__setattr__(self, "_nominator", cls._finalize(cls._construct(value, fraction_part)))

    @classmethod
    def from_nominator(cls, nominator: int) -> "ScaledDecimal":
        """
        Значение из "сырого" nominator без преобразований.

        Raises:
            TypeError: Если nominator не int
            DecimalOverflowError: Если nominator не помещается в ширину
        """
        if not _is_plain_int(nominator):
            raise TypeError(f"nominator must be int, got {type(nominator).__name__}")
        return cls._from_raw(cls._finalize(nominator))

    @classmethod
    def _from_raw(cls, nominator: int) -> "ScaledDecimal":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_nominator", nominator)
        return instance

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _construct(cls, value: Any, fraction_part: int | None) -> int | SpecialValue:
        precision = cls.PRECISION

        if fraction_part is not None:
            if not (_is_plain_int(value) and _is_plain_int(fraction_part)):
                raise TypeError("integer_part and fraction_part must both be int")
            return nominator_from_parts(value, fraction_part, precision)

        if _is_plain_int(value):
            return nominator_from_int(value, precision)
        if isinstance(value, float):
            return cls._nominator_from_float(value)
        if isinstance(value, str):
            return cls._nominator_from_string(value)
        if isinstance(value, DecimalValue):
            return cls._nominator_from_decimal(value.as_scaled())

        raise TypeError(f"Cannot build {cls.__name__} from {type(value).__name__}")

    @classmethod
    def _nominator_from_float(cls, value: float) -> int | SpecialValue:
        return nominator_from_float(value, cls.PRECISION)

    @classmethod
    def _nominator_from_string(cls, text: str) -> int | SpecialValue:
        return nominator_from_string(text, cls.PRECISION)

    @classmethod
    def _nominator_from_decimal(cls, value: "ScaledDecimal") -> int | SpecialValue:
        special = value.special_value()
        if special is not None:
            return special
        return rescale(value._nominator, value.PRECISION, cls.PRECISION)

    @classmethod
    def _finalize(cls, raw: int | SpecialValue) -> int:
        """Проверка итогового nominator по ширине хранения."""
        if isinstance(raw, SpecialValue):
            raise ValueError(f"{cls.__name__} cannot represent {raw.value}")
        return validate_in_range(raw, cls.__name__, cls.WIDTH.min_value, cls.WIDTH.max_value)

    @classmethod
    def _family_type(cls, width: StorageWidth | str, precision: int) -> type["ScaledDecimal"]:
        return decimal_type(width, precision)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "ScaledDecimal":
        return self

    def __deepcopy__(self, memo: dict) -> "ScaledDecimal":
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def as_scaled(self) -> "ScaledDecimal":
        return self

    @property
    def nominator(self) -> int:
        return self._nominator

    @property
    def integer_part(self) -> int:
        """Целая часть (усечение к нулю): -10.11 → -10."""
        return trunc_div(self._nominator, self.DENOMINATOR)

    @property
    def fraction_part(self) -> int:
        """Дробные разряды: abs(nominator) % denominator."""
        return abs(self._nominator) % self.DENOMINATOR

    def special_value(self) -> SpecialValue | None:
        """Специальное значение (у lenient-варианта их нет)."""
        return None

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> "ScaledDecimal | None":
        if isinstance(other, DecimalValue):
            return other.as_scaled()
        if _is_plain_int(other):
            return type(self)(other)
        return None

    def _compute(self, operation: Operation, rhs: "ScaledDecimal") -> int | SpecialValue:
        lhs_nom, lhs_precision = self._nominator, self.PRECISION
        rhs_nom, rhs_precision = rhs._nominator, rhs.PRECISION

        # strict-операнд со специальным значением lenient-тип не представляет
        special = rhs.special_value()
        if special is not None:
            return special

        if operation is Operation.ADD:
            return add(lhs_nom, lhs_precision, rhs_nom, rhs_precision)
        if operation is Operation.SUB:
            return subtract(lhs_nom, lhs_precision, rhs_nom, rhs_precision)
        if operation is Operation.MUL:
            if lhs_precision == rhs_precision:
                return multiply_same(lhs_nom, rhs_nom, self.DENOMINATOR)
            return multiply_cross(lhs_nom, lhs_precision, rhs_nom, rhs_precision)

        if rhs_nom == 0:
            raise ZeroDivisionError(f"{type(self).__name__} division by zero")
        return divide(lhs_nom, rhs_nom, rhs_precision)

    def _negated(self) -> int | SpecialValue:
        return -self._nominator

    def _binary(self, operation: Operation, other: Any) -> "ScaledDecimal":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._from_raw(self._finalize(self._compute(operation, rhs)))

    def _reflected(self, operation: Operation, other: Any) -> "ScaledDecimal":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._binary(operation, self)

    def __add__(self, other: Any) -> "ScaledDecimal":
        return self._binary(Operation.ADD, other)

    def __radd__(self, other: Any) -> "ScaledDecimal":
        return self._reflected(Operation.ADD, other)

    def __sub__(self, other: Any) -> "ScaledDecimal":
        return self._binary(Operation.SUB, other)

    def __rsub__(self, other: Any) -> "ScaledDecimal":
        return self._reflected(Operation.SUB, other)

    def __mul__(self, other: Any) -> "ScaledDecimal":
        return self._binary(Operation.MUL, other)

    def __rmul__(self, other: Any) -> "ScaledDecimal":
        return self._reflected(Operation.MUL, other)

    def __truediv__(self, other: Any) -> "ScaledDecimal":
        return self._binary(Operation.DIV, other)

    def __rtruediv__(self, other: Any) -> "ScaledDecimal":
        return self._reflected(Operation.DIV, other)

    def __neg__(self) -> "ScaledDecimal":
        return self._from_raw(self._finalize(self._negated()))

    def __pos__(self) -> "ScaledDecimal":
        return self

    def __abs__(self) -> "ScaledDecimal":
        return -self if self._nominator < 0 else self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _cmp(self, other: Any) -> int:
        """Точное сравнение со значением любой конфигурации или int."""
        if isinstance(other, DecimalValue):
            rhs = other.as_scaled()
            lhs_scaled = self._nominator * rhs.DENOMINATOR
            rhs_scaled = rhs._nominator * self.DENOMINATOR
        elif _is_plain_int(other):
            lhs_scaled = self._nominator
            rhs_scaled = other * self.DENOMINATOR
        else:
            return NotImplemented
        return (lhs_scaled > rhs_scaled) - (lhs_scaled < rhs_scaled)

    def __eq__(self, other: object) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result == 0

    def __ne__(self, other: object) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result != 0

    def __lt__(self, other: Any) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._cmp(other)
        return result if result is NotImplemented else result >= 0

    def __hash__(self) -> int:
        return hash(Fraction(self._nominator, self.DENOMINATOR))

    def __bool__(self) -> bool:
        return self._nominator != 0

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Десятичная запись: целая часть, точка, дробь из PRECISION разрядов.

        Знак сохраняется и при нулевой целой части (-0.50). При PRECISION == 0
        точка не выводится.
        """
        sign = "-" if self._nominator < 0 else ""
        integer = abs(self._nominator) // self.DENOMINATOR
        if self.PRECISION == 0:
            return f"{sign}{integer}"
        return f"{sign}{integer}.{self.fraction_part:0{self.PRECISION}d}"

    def to_double(self) -> float:
        return self._nominator / self.DENOMINATOR

    def to_float(self) -> float:
        """Значение, округлённое до IEEE binary32."""
        return as_float32(self.to_double())

    def cast_to(self, width: StorageWidth | str, precision: int) -> "ScaledDecimal":
        """Cast в другую конфигурацию того же варианта."""
        return decimal_cast(self, self._family_type(width, precision))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        return self.integer_part


# =============================================================================
# ФАБРИКА ТИПОВ
# =============================================================================


def build_decimal_class(base: type, config: DecimalConfig, name: str, **attributes: Any) -> type:
    """Конкретный подкласс base с зафиксированной конфигурацией."""
    return type(base)(
        name,
        (base,),
        {
            "__slots__": (),
            "__module__": base.__module__,
            "__qualname__": name,
            "config": config,
            "WIDTH": config.width,
            "PRECISION": config.effective_precision,
            "DENOMINATOR": config.denominator,
            **attributes,
        },
    )


@lru_cache(maxsize=None)
def _cached_decimal_type(width: StorageWidth, precision: int) -> type[ScaledDecimal]:
    config = DecimalConfig(width=width, precision=precision)
    return build_decimal_class(ScaledDecimal, config, f"ScaledDecimal[{config.describe()}]")


def decimal_type(
    width: StorageWidth | str = StorageWidth.INT64, precision: int = 2
) -> type[ScaledDecimal]:
    """
    Lenient decimal-тип для (width, precision).

    Одинаковые аргументы возвращают один и тот же класс.

    Raises:
        pydantic.ValidationError: Если конфигурация невалидна
    """
    return _cached_decimal_type(StorageWidth(width), precision)


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def decimal_cast(value: DecimalValue, target: type[DecimalValue]) -> DecimalValue:
    """
    Перевод значения в другую конфигурацию (ширина и/или точность).

    При равных точностях nominator переносится как есть (DecimalOverflowError,
    если не помещается в новую ширину). Иначе — rescale с округлением
    half-away-from-zero. Специальные значения strict-варианта переносятся в
    strict/range-bounded типы и отвергаются lenient-типами (ValueError).
    """
    if not isinstance(value, DecimalValue):
        raise TypeError(f"decimal_cast expects a decimal, got {type(value).__name__}")
    return target(value)


def decimal_min(lhs: DecimalValue, rhs: DecimalValue) -> DecimalValue:
    """Меньшее из двух значений (при равенстве — lhs)."""
    return rhs if rhs < lhs else lhs


def decimal_max(lhs: DecimalValue, rhs: DecimalValue) -> DecimalValue:
    """Большее из двух значений (при равенстве — lhs)."""
    return rhs if rhs > lhs else lhs
