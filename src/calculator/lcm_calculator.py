"""LCM Calculator — сервисный фасад над natural_arithmetic.

- Диагностика каждого входа (InvalidInputReason)
- Опциональное ограничение длины входа (LCMCalculatorConfig)
- Тотальность: evaluate/calculate никогда не бросают исключение
- Результат — CalculationResult (pydantic), совместимый с calculation_result.json
- evaluate_payload: JSON-граница с проверкой calculation_request/calculation_result
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.contracts.validators import (
    CalculationRequestValidator,
    CalculationResultValidator,
)
from src.core.domain.calculation import (
    CalculationRequest,
    CalculationResult,
    InvalidInputReason,
)
from src.core.math.natural_arithmetic import (
    is_natural_number,
    lcm,
    parse_natural,
    strip_raw,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LCMCalculatorConfig:
    """Конфигурация калькулятора.

    max_input_digits: максимальная длина входа после strip_raw() (None = без ограничения)
    """
    max_input_digits: Optional[int] = None

    def __post_init__(self) -> None:
        cap = self.max_input_digits
        if cap is None:
            return
        if isinstance(cap, bool) or not isinstance(cap, int):
            raise TypeError(f"max_input_digits must be int or None, got {type(cap).__name__}")
        if cap <= 0:
            raise ValueError(f"max_input_digits must be positive or None, got {cap}")


def diagnose_natural_input(
    raw: object,
    max_digits: Optional[int] = None,
) -> Optional[InvalidInputReason]:
    """Причина невалидности входа, либо None если вход — натуральное число.

    Порядок проверок:
    1. None → ABSENT
    2. "" → EMPTY
    3. Только пробелы → WHITESPACE_ONLY
    4. Не только ASCII-цифры → NON_DIGIT
    5. Длиннее max_digits → TOO_MANY_DIGITS
    """
    if raw is None:
        return InvalidInputReason.ABSENT

    text = raw if isinstance(raw, str) else str(raw)
    if text == "":
        return InvalidInputReason.EMPTY

    trimmed = strip_raw(text)
    if not trimmed:
        return InvalidInputReason.WHITESPACE_ONLY

    if not is_natural_number(trimmed):
        return InvalidInputReason.NON_DIGIT

    if max_digits is not None and len(trimmed) > max_digits:
        return InvalidInputReason.TOO_MANY_DIGITS

    return None


class LCMCalculator:
    """Калькулятор LCM двух сырых входов.

    Порядок:
    1. Диагностика x и y → при любой причине NaN с причинами
    2. Разбор обоих входов в int произвольной точности
    3. lcm(x, y) → CalculationResult
    """

    def __init__(self, config: Optional[LCMCalculatorConfig] = None):
        """
        Args:
            config: Конфигурация (default: LCMCalculatorConfig())
        """
        self.config = config or LCMCalculatorConfig()

    def evaluate(self, x: object, y: object) -> CalculationResult:
        """Расчёт LCM с диагностикой. Никогда не бросает исключение."""
        try:
            return self._evaluate(x, y)
        except Exception:
            logger.exception("LCM calculation failed unexpectedly")
            return CalculationResult.nan(InvalidInputReason.PARSE_FAILURE)

    def evaluate_request(self, request: CalculationRequest) -> CalculationResult:
        return self.evaluate(request.x, request.y)

    def evaluate_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Расчёт по JSON-payload с проверкой обоих контрактов.

        Args:
            payload: dict по схеме calculation_request.json

        Returns:
            dict по схеме calculation_result.json

        Raises:
            ValidationError: Если payload не соответствует calculation_request.json
        """
        CalculationRequestValidator().validate(payload)
        result = self.evaluate_request(CalculationRequest.model_validate(payload))

        data = result.model_dump(mode="json")
        CalculationResultValidator().validate(data)
        return data

    def calculate(self, x: object, y: object) -> str:
        """LCM как строка цифр или "NaN"."""
        return self.evaluate(x, y).value

    def _evaluate(self, x: object, y: object) -> CalculationResult:
        max_digits = self.config.max_input_digits
        x_reason = diagnose_natural_input(x, max_digits)
        y_reason = diagnose_natural_input(y, max_digits)

        if x_reason is not None or y_reason is not None:
            logger.debug(
                "Invalid LCM input: x_reason=%s y_reason=%s",
                x_reason.value if x_reason else None,
                y_reason.value if y_reason else None,
            )
            return CalculationResult.nan(x_reason, y_reason)

        return CalculationResult.of(lcm(parse_natural(x), parse_natural(y)))
