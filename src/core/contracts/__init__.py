"""
Contract Validation Module

Модуль для валидации JSON контрактов калькулятора LCM.
"""

from .validators import (
    CalculationRequestValidator,
    CalculationResultValidator,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_calculation_request,
    validate_calculation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationRequestValidator",
    "CalculationResultValidator",
    # Functions
    "get_schema_loader",
    "validate_calculation_request",
    "validate_calculation_result",
]
