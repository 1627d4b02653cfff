"""
Domain models and value objects.

Contains the calculation request/result models and the invalid-input reasons.
"""

from src.core.domain.calculation import (
    CalculationRequest,
    CalculationResult,
    InvalidInputReason,
)

__all__ = [
    # Calculation models
    "CalculationRequest",
    "CalculationResult",
    "InvalidInputReason",
]
