"""
scaled_decimal — десятичные числа с фиксированной точкой.

Значение хранится одним целым (nominator = value * 10^precision) в заданной
ширине хранения. Три варианта:

- ScaledDecimal  — lenient: деление на ноль → ZeroDivisionError
- StrictDecimal  — strict: NaN / ±Infinity вместо исключения
- RangedDecimal  — strict, зажатый в [min, max]

    >>> from scaled_decimal import decimal_type
    >>> Money = decimal_type("int64", 2)
    >>> (Money("2.01") * Money("23.5")).to_string()
    '47.24'
"""

from scaled_decimal.core.domain import (
    Decimal32x2,
    Decimal32x3,
    Decimal64x2,
    Decimal64x4,
    DecimalConfig,
    DecimalValue,
    Integer,
    RangedDecimal,
    Ratio64,
    ScaledDecimal,
    SpecialValue,
    StorageWidth,
    StrictDecimal,
    decimal_cast,
    decimal_max,
    decimal_min,
    decimal_type,
    ranged_decimal_type,
    strict_decimal_type,
)
from scaled_decimal.core.math import DecimalOverflowError, DecimalParseError

__version__ = "0.1.0"

__all__ = [
    "Decimal32x2",
    "Decimal32x3",
    "Decimal64x2",
    "Decimal64x4",
    "DecimalConfig",
    "DecimalOverflowError",
    "DecimalParseError",
    "DecimalValue",
    "Integer",
    "RangedDecimal",
    "Ratio64",
    "ScaledDecimal",
    "SpecialValue",
    "StorageWidth",
    "StrictDecimal",
    "decimal_cast",
    "decimal_max",
    "decimal_min",
    "decimal_type",
    "ranged_decimal_type",
    "strict_decimal_type",
]
