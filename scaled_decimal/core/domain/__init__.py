"""
Domain: decimal-типы и их конфигурация.

Содержит lenient (ScaledDecimal), strict (StrictDecimal) и range-bounded
(RangedDecimal) варианты, фабрики типов и пресеты.
"""

from scaled_decimal.core.domain.width import SpecialValue, StorageWidth
from scaled_decimal.core.domain.config import DecimalConfig
from scaled_decimal.core.domain.decimal import (
    DecimalValue,
    Operation,
    ScaledDecimal,
    decimal_cast,
    decimal_max,
    decimal_min,
    decimal_type,
)
from scaled_decimal.core.domain.strict import StrictDecimal, strict_decimal_type
from scaled_decimal.core.domain.ranged import RangedDecimal, ranged_decimal_type
from scaled_decimal.core.domain.presets import (
    Decimal32x2,
    Decimal32x3,
    Decimal64x2,
    Decimal64x4,
    Integer,
    Ratio64,
)

__all__ = [
    # Width / config
    "SpecialValue",
    "StorageWidth",
    "DecimalConfig",
    # Types
    "DecimalValue",
    "Operation",
    "ScaledDecimal",
    "StrictDecimal",
    "RangedDecimal",
    # Factories
    "decimal_type",
    "strict_decimal_type",
    "ranged_decimal_type",
    # Free functions
    "decimal_cast",
    "decimal_min",
    "decimal_max",
    # Presets
    "Decimal32x2",
    "Decimal32x3",
    "Decimal64x2",
    "Decimal64x4",
    "Integer",
    "Ratio64",
]
