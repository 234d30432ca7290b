"""
Тесты decimal-типов как полей Pydantic моделей

Decimal-тип в аннотации поля принимает те же входные данные, что и
конструктор (str, int, float, другой decimal), и сериализуется в строку.
"""

import pytest
from pydantic import BaseModel, ValidationError

from scaled_decimal import Decimal64x2, Decimal64x4, Ratio64, decimal_type

Money = decimal_type("int64", 2)


class Quote(BaseModel):
    price: Decimal64x2
    fee: Decimal64x4
    fill_ratio: Ratio64

    model_config = {"frozen": True}


class Invoice(BaseModel):
    total: Money


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def quote() -> Quote:
    return Quote(price="101.255", fee=0.0005, fill_ratio="1.2")


# =============================================================================
# ПОЛЯ МОДЕЛИ
# =============================================================================


class TestPydanticFields:
    """Тесты decimal-типов в полях Pydantic модели"""

    def test_fields_are_converted(self, quote: Quote) -> None:
        """Строка и float приводятся к типу поля, ranged-поле зажимается"""
        assert type(quote.price) is Decimal64x2
        assert quote.price.to_string() == "101.26"
        assert quote.fee.to_string() == "0.0005"
        assert quote.fill_ratio.to_string() == "1.00000"

    def test_instance_passes_through(self) -> None:
        """Значение нужного типа не копируется"""
        price = Decimal64x2("1.5")
        model = Quote(price=price, fee=0, fill_ratio=0)
        assert model.price is price

    def test_other_decimal_is_cast(self) -> None:
        """Другой decimal-тип приводится cast'ом к точности поля"""
        model = Quote(price=decimal_type("int64", 3)("1.005"), fee=1, fill_ratio=0)
        assert model.price.to_string() == "1.01"

    def test_special_values_in_strict_field(self) -> None:
        model = Quote(price="-inf", fee="nan", fill_ratio=0)
        assert model.fee.is_nan()
        assert model.price.is_infinite()
        assert model.model_dump(mode="json")["fee"] == "nan"
        assert model.model_dump(mode="json")["price"] == "-inf"

    def test_lenient_field_rejects_nan(self) -> None:
        """Lenient-тип не представляет NaN: ошибка валидации"""
        assert Invoice(total="12.5").total.to_string() == "12.50"
        with pytest.raises(ValidationError):
            Invoice(total="nan")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("price", "abc"),
            ("price", "1.2.3"),
            ("price", "1e30"),
            ("price", [1]),
            ("fee", None),
            ("fill_ratio", "ratio"),
        ],
    )
    def test_invalid_input(self, field: str, value: object) -> None:
        data = {"price": 1, "fee": 1, "fill_ratio": 0}
        data[field] = value
        with pytest.raises(ValidationError):
            Quote(**data)


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


class TestPydanticSerialization:
    """Тесты JSON-сериализации моделей с decimal-полями"""

    def test_json_serialization(self, quote: Quote) -> None:
        assert quote.model_dump(mode="json") == {
            "price": "101.26",
            "fee": "0.0005",
            "fill_ratio": "1.00000",
        }

    def test_json_roundtrip(self, quote: Quote) -> None:
        """Строковое представление восстанавливает равное значение"""
        assert Quote.model_validate_json(quote.model_dump_json()) == quote
