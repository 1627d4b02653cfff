"""
Tests for Pydantic Calculation Models

Покрывает:
- Создание и валидация CalculationRequest / CalculationResult
- Инвариант: NaN ⇔ задана причина невалидности
- Фабрики CalculationResult.of / CalculationResult.nan
- Immutability (frozen=True)
- JSON сериализация + JSON Schema compliance
"""

import pytest
from pydantic import ValidationError

from src.core.contracts import validate_calculation_request, validate_calculation_result
from src.core.domain import CalculationRequest, CalculationResult, InvalidInputReason


# =============================================================================
# CalculationRequest
# =============================================================================


class TestCalculationRequest:
    """Тесты для CalculationRequest"""

    def test_defaults_are_absent(self) -> None:
        """По умолчанию оба входа отсутствуют"""
        request = CalculationRequest()
        assert request.x is None
        assert request.y is None

    def test_raw_strings_kept_verbatim(self) -> None:
        """Сырые строки не нормализуются моделью"""
        request = CalculationRequest(x=" 12 ", y="10asdad")
        assert request.x == " 12 "
        assert request.y == "10asdad"

    def test_frozen(self) -> None:
        """Модель immutable"""
        request = CalculationRequest(x="1", y="2")
        with pytest.raises(ValidationError):
            request.x = "3"

    def test_json_schema_compliance(self) -> None:
        """model_dump(mode="json") соответствует calculation_request.json"""
        validate_calculation_request(CalculationRequest(x="12", y=None).model_dump(mode="json"))


# =============================================================================
# CalculationResult
# =============================================================================


class TestCalculationResult:
    """Тесты для CalculationResult"""

    def test_numeric_result(self) -> None:
        """Численный результат без причин"""
        result = CalculationResult(value="36")
        assert result.value == "36"
        assert result.is_nan is False

    def test_zero_result(self) -> None:
        """Ноль — допустимый результат"""
        assert CalculationResult(value="0").is_nan is False

    def test_nan_result_with_reason(self) -> None:
        """NaN с причиной"""
        result = CalculationResult(value="NaN", x_reason=InvalidInputReason.NON_DIGIT)
        assert result.is_nan is True
        assert result.x_reason == InvalidInputReason.NON_DIGIT
        assert result.y_reason is None

    @pytest.mark.parametrize("value", ["-5", "5.0", " 5", "05", "00", "nan", "", "1e3"])
    def test_malformed_value_rejected(self, value: str) -> None:
        """Только каноническая строка цифр или NaN"""
        with pytest.raises(ValidationError):
            CalculationResult(value=value)

    def test_nan_without_reason_rejected(self) -> None:
        """NaN без причины нарушает инвариант"""
        with pytest.raises(ValidationError, match="requires x_reason or y_reason"):
            CalculationResult(value="NaN")

    def test_numeric_with_reason_rejected(self) -> None:
        """Число с причиной нарушает инвариант"""
        with pytest.raises(ValidationError, match="cannot carry invalid-input reasons"):
            CalculationResult(value="36", y_reason=InvalidInputReason.EMPTY)

    def test_frozen(self) -> None:
        """Модель immutable"""
        result = CalculationResult(value="36")
        with pytest.raises(ValidationError):
            result.value = "37"

    def test_of_factory(self) -> None:
        """CalculationResult.of рендерит int канонически"""
        assert CalculationResult.of(36).value == "36"
        assert CalculationResult.of(0).value == "0"
        assert CalculationResult.of(2**100).value == str(2**100)

    def test_of_negative_raises(self) -> None:
        """Отрицательное значение → ValueError"""
        with pytest.raises(ValueError):
            CalculationResult.of(-1)

    def test_nan_factory(self) -> None:
        """CalculationResult.nan сохраняет переданные причины"""
        result = CalculationResult.nan(InvalidInputReason.ABSENT, InvalidInputReason.EMPTY)
        assert result.is_nan
        assert result.x_reason == InvalidInputReason.ABSENT
        assert result.y_reason == InvalidInputReason.EMPTY

    def test_nan_factory_default_reason(self) -> None:
        """Без причин фабрика ставит PARSE_FAILURE"""
        result = CalculationResult.nan()
        assert result.x_reason == InvalidInputReason.PARSE_FAILURE

    def test_json_roundtrip(self) -> None:
        """JSON сериализация и обратная загрузка"""
        result = CalculationResult.nan(y_reason=InvalidInputReason.WHITESPACE_ONLY)
        restored = CalculationResult.model_validate_json(result.model_dump_json())
        assert restored == result

    @pytest.mark.parametrize(
        "result",
        [
            CalculationResult(value="36"),
            CalculationResult(value="0"),
            CalculationResult.nan(InvalidInputReason.NON_DIGIT),
            CalculationResult.nan(y_reason=InvalidInputReason.TOO_MANY_DIGITS),
        ],
    )
    def test_json_schema_compliance(self, result: CalculationResult) -> None:
        """model_dump(mode="json") соответствует calculation_result.json"""
        validate_calculation_result(result.model_dump(mode="json"))
