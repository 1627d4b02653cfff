"""
Calculation — Модели запроса и результата расчёта LCM

Immutable Pydantic модели для входа и выхода калькулятора.
Полная совместимость с JSON Schema (contracts/schema/calculation_request.json,
contracts/schema/calculation_result.json).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.math.natural_arithmetic import NAN_SENTINEL, render_natural


# =============================================================================
# ENUMS
# =============================================================================


class InvalidInputReason(str, Enum):
    """
    Причина, по которой вход не признан натуральным числом.

    Только диагностика: для вызывающего кода любая причина означает "NaN".
    """

    ABSENT = "ABSENT"
    EMPTY = "EMPTY"
    WHITESPACE_ONLY = "WHITESPACE_ONLY"
    NON_DIGIT = "NON_DIGIT"
    TOO_MANY_DIGITS = "TOO_MANY_DIGITS"
    PARSE_FAILURE = "PARSE_FAILURE"


# =============================================================================
# MODELS
# =============================================================================


class CalculationRequest(BaseModel):
    """Пара сырых входов x, y (уже извлечённых вызывающим кодом)."""

    x: Optional[str] = Field(None, description="Сырой вход x (None = отсутствует)")
    y: Optional[str] = Field(None, description="Сырой вход y (None = отсутствует)")

    model_config = {"frozen": True}


class CalculationResult(BaseModel):
    """
    Результат расчёта LCM.

    Инварианты:
    - value — каноническая строка цифр либо "NaN"
    - value == "NaN" тогда и только тогда, когда задана хотя бы одна причина
    """

    value: str = Field(
        ...,
        pattern=r"^(NaN|0|[1-9][0-9]*)$",
        description="LCM в десятичной записи или NaN",
    )
    x_reason: Optional[InvalidInputReason] = Field(
        None, description="Причина невалидности x"
    )
    y_reason: Optional[InvalidInputReason] = Field(
        None, description="Причина невалидности y"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_reasons_match_value(self) -> "CalculationResult":
        """Проверка согласованности value и причин"""
        has_reason = self.x_reason is not None or self.y_reason is not None
        if self.value == NAN_SENTINEL and not has_reason:
            raise ValueError("NaN result requires x_reason or y_reason")
        if self.value != NAN_SENTINEL and has_reason:
            raise ValueError(f"Numeric result {self.value} cannot carry invalid-input reasons")
        return self

    @property
    def is_nan(self) -> bool:
        return self.value == NAN_SENTINEL

    @classmethod
    def of(cls, value: int) -> "CalculationResult":
        """Успешный результат из натурального числа."""
        return cls(value=render_natural(value))

    @classmethod
    def nan(
        cls,
        x_reason: Optional[InvalidInputReason] = None,
        y_reason: Optional[InvalidInputReason] = None,
    ) -> "CalculationResult":
        """Результат NaN; без явных причин считается PARSE_FAILURE по x."""
        if x_reason is None and y_reason is None:
            x_reason = InvalidInputReason.PARSE_FAILURE
        return cls(value=NAN_SENTINEL, x_reason=x_reason, y_reason=y_reason)
