"""
Core math modules

Численные примитивы для компонент значений.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Number checks
    is_number,
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    is_close,
    is_zero,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Number checks
    "is_number",
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
]
