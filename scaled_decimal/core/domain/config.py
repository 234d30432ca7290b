"""
DecimalConfig — конфигурация типа с фиксированной точкой

Immutable Pydantic модель: ширина хранения, объявленная точность и
(для range-bounded типов) границы в целых единицах. Из неё выводятся
эффективная точность и denominator.

Один экземпляр конфигурации соответствует одному сгенерированному типу.
"""

from pydantic import BaseModel, Field, model_validator

from scaled_decimal.core.domain.width import StorageWidth
from scaled_decimal.core.math.numerical_safeguards import is_in_range, power10


class DecimalConfig(BaseModel):
    """
    Конфигурация decimal-типа.

    Immutable модель (frozen=True): конфигурация — часть идентичности типа и
    используется как ключ кэша фабрик.
    """

    width: StorageWidth = Field(
        default=StorageWidth.INT64, description="Ширина хранения nominator"
    )
    precision: int = Field(default=2, ge=0, description="Объявленная точность (дробные разряды)")

    # Только для range-bounded типов
    min_units: int | None = Field(default=None, description="Нижняя граница (целые единицы)")
    max_units: int | None = Field(default=None, description="Верхняя граница (целые единицы)")

    model_config = {"frozen": True}  # Immutable

    @property
    def effective_precision(self) -> int:
        """
        Эффективная точность: не ниже естественной десятичной ёмкости ширины
        минус один разряд.
        """
        return max(self.precision, self.width.max_digits10 - 1)

    @property
    def denominator(self) -> int:
        return power10(self.effective_precision)

    @property
    def is_bounded(self) -> bool:
        return self.min_units is not None

    @property
    def min_nominator(self) -> int | None:
        if self.min_units is None:
            return None
        return self.min_units * self.denominator

    @property
    def max_nominator(self) -> int | None:
        if self.max_units is None:
            return None
        return self.max_units * self.denominator

    @model_validator(mode="after")
    def validate_denominator_fits(self) -> "DecimalConfig":
        """denominator сам должен помещаться в ширину хранения."""
        if self.denominator > self.width.max_value:
            raise ValueError(
                f"precision {self.effective_precision} does not fit {self.width.value} "
                f"(at most {self.width.digits10} digits)"
            )
        return self

    @model_validator(mode="after")
    def validate_bounds(self) -> "DecimalConfig":
        """
        Проверка границ range-bounded типа.

        Границы задаются парой, min_units <= max_units, а их nominator'ы
        должны быть конечными strict-значениями ширины.
        """
        if (self.min_units is None) != (self.max_units is None):
            raise ValueError("min_units and max_units must be given together")
        if self.min_units is None or self.max_units is None:
            return self

        if self.min_units > self.max_units:
            raise ValueError(
                f"min_units {self.min_units} exceeds max_units {self.max_units}"
            )
        for bound in (self.min_nominator, self.max_nominator):
            if not is_in_range(bound, self.width.finite_min, self.width.finite_max):
                raise ValueError(
                    f"bound nominator {bound} does not fit {self.width.value}"
                )
        return self

    def describe(self) -> str:
        """Короткое имя конфигурации: 'int32, 2' или 'int64, 5, [0, 1]'."""
        text = f"{self.width.value}, {self.effective_precision}"
        if self.is_bounded:
            text += f", [{self.min_units}, {self.max_units}]"
        return text
