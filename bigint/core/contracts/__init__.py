"""
Contract Validation Module

Модуль для валидации JSON контрактов bigint.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SignedIntegerValidator,
    validate_signed_integer,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SignedIntegerValidator",
    # Functions
    "validate_signed_integer",
]
