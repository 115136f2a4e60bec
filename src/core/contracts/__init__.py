"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений.
"""

from .validators import (
    ComplexNumberValidator,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_complex_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexNumberValidator",
    # Functions
    "get_schema_loader",
    "validate_complex_number",
]
