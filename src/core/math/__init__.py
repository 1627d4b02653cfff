"""
Core math modules

Целочисленные примитивы произвольной точности для расчёта LCM/GCD.
"""

# Natural Arithmetic
from src.core.math.natural_arithmetic import (
    # Constants
    NAN_SENTINEL,
    # Exceptions
    InvalidNaturalInput,
    # Validation
    is_natural_number,
    # Conversion
    parse_natural,
    render_natural,
    strip_raw,
    # Arithmetic
    gcd,
    lcm,
    calculate,
)

__all__ = [
    # Natural Arithmetic — Constants
    "NAN_SENTINEL",
    # Natural Arithmetic — Exceptions
    "InvalidNaturalInput",
    # Natural Arithmetic — Validation
    "is_natural_number",
    # Natural Arithmetic — Conversion
    "parse_natural",
    "render_natural",
    "strip_raw",
    # Natural Arithmetic — Arithmetic
    "gcd",
    "lcm",
    "calculate",
]
