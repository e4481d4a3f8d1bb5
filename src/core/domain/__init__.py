"""
Domain models and value objects.

Contains the BigNumber value type, its configuration and state snapshot.
"""

from src.core.domain.big_number import DEFAULT_CONFIG, ArithmeticConfig, BigNumber
from src.core.domain.big_number_state import BigNumberState, Sign

__all__ = [
    # BigNumber value type
    "BigNumber",
    "ArithmeticConfig",
    "DEFAULT_CONFIG",
    # State snapshot
    "BigNumberState",
    "Sign",
]
