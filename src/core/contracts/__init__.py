"""
Contract Validation Module

Валидация JSON контрактов сериализованных значений BigNumber.
"""

from .validators import (
    BigNumberStateValidator,
    ContractValidator,
    SchemaLoader,
    validate_big_number_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigNumberStateValidator",
    # Functions
    "validate_big_number_state",
]
