"""Calculator — сервисный слой расчёта LCM натуральных чисел.

Принимает уже извлечённые сырые входы и возвращает строку цифр или "NaN".
"""

from .lcm_calculator import (
    LCMCalculator,
    LCMCalculatorConfig,
    diagnose_natural_input,
)

__all__ = [
    "LCMCalculator",
    "LCMCalculatorConfig",
    "diagnose_natural_input",
]
