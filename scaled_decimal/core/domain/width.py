"""
StorageWidth — ширина хранения nominator

Знаковые целые фиксированной ширины, в которых живёт nominator. В Python
int не ограничен, поэтому ширина — это диапазон, которому обязан
удовлетворять итоговый nominator каждой операции.

Strict-вариант резервирует три значения диапазона под специальные значения:
    NaN        = max
    +Infinity  = max - 1
    -Infinity  = min + 1
Конечные strict-значения лежат в [min + 2, max - 2].
"""

from enum import Enum


class SpecialValue(str, Enum):
    """Специальные значения strict-варианта (рендеринг совпадает со значением)"""

    NAN = "nan"
    POS_INF = "inf"
    NEG_INF = "-inf"

    @property
    def sign(self) -> int:
        """Знак бесконечности: +1 / -1 (для NaN — 0)."""
        if self is SpecialValue.POS_INF:
            return 1
        if self is SpecialValue.NEG_INF:
            return -1
        return 0


class StorageWidth(str, Enum):
    """Знаковая ширина хранения nominator"""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    INT128 = "int128"

    @property
    def bits(self) -> int:
        return int(self.value.removeprefix("int"))

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def digits10(self) -> int:
        """Количество десятичных разрядов, всегда представимых без потерь."""
        return len(str(self.max_value)) - 1

    @property
    def max_digits10(self) -> int:
        """
        Разряды, нужные для восстановления значения по десятичной записи.

        Для целочисленного хранения дополнительные разряды не требуются.
        """
        return 0

    # -------------------------------------------------------------------------
    # Strict sentinels
    # -------------------------------------------------------------------------

    @property
    def nan_nominator(self) -> int:
        return self.max_value

    @property
    def pos_inf_nominator(self) -> int:
        return self.max_value - 1

    @property
    def neg_inf_nominator(self) -> int:
        return self.min_value + 1

    @property
    def finite_min(self) -> int:
        return self.min_value + 2

    @property
    def finite_max(self) -> int:
        return self.max_value - 2

    def sentinel(self, special: SpecialValue) -> int:
        """nominator, зарезервированный под специальное значение."""
        if special is SpecialValue.NAN:
            return self.nan_nominator
        if special is SpecialValue.POS_INF:
            return self.pos_inf_nominator
        return self.neg_inf_nominator

    def special_of(self, nominator: int) -> SpecialValue | None:
        """Специальное значение для nominator или None для конечного."""
        if nominator == self.nan_nominator:
            return SpecialValue.NAN
        if nominator == self.pos_inf_nominator:
            return SpecialValue.POS_INF
        if nominator == self.neg_inf_nominator:
            return SpecialValue.NEG_INF
        return None
