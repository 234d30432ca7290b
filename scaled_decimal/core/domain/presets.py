"""
Presets — готовые decimal-типы для типичных конфигураций

Все пресеты strict: NaN и ±Infinity представимы, деление на ноль не
выбрасывает исключение.
"""

from scaled_decimal.core.domain.ranged import ranged_decimal_type
from scaled_decimal.core.domain.strict import strict_decimal_type
from scaled_decimal.core.domain.width import StorageWidth

Decimal32x2 = strict_decimal_type(StorageWidth.INT32, 2)
Decimal64x2 = strict_decimal_type(StorageWidth.INT64, 2)
Decimal32x3 = strict_decimal_type(StorageWidth.INT32, 3)
Decimal64x4 = strict_decimal_type(StorageWidth.INT64, 4)
Integer = strict_decimal_type(StorageWidth.INT64, 0)

# Range-bounded: доля в [0, 1] с 5 дробными разрядами
Ratio64 = ranged_decimal_type(StorageWidth.INT64, 5, 0, 1)
