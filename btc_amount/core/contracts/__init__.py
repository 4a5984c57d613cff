"""
Contract Validation Module

Модуль для валидации JSON контрактов btc-amount.
"""

from .validators import (
    AmountValidator,
    ContractValidator,
    SchemaLoader,
    validate_amount,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AmountValidator",
    # Functions
    "validate_amount",
]
