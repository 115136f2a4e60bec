"""
Domain models and value objects.

Contains the ComplexNumber value type and its functional API.
"""

from src.core.domain.complex_number import (
    DESCRIBE_TEMPLATE,
    IMAGINARY_UNIT_LABEL,
    REAL_UNIT_LABEL,
    ComplexNumber,
    InvalidValue,
    add,
    create,
    describe,
    from_builtin,
    from_dict,
    is_close,
    negate,
    subtract,
    to_builtin,
    to_dict,
)

__all__ = [
    # Constants
    "REAL_UNIT_LABEL",
    "IMAGINARY_UNIT_LABEL",
    "DESCRIBE_TEMPLATE",
    # Model
    "ComplexNumber",
    "InvalidValue",
    # Functions
    "create",
    "add",
    "subtract",
    "negate",
    "describe",
    "is_close",
    "from_builtin",
    "to_builtin",
    "from_dict",
    "to_dict",
]
