"""
Core math modules для BigNumber

Алгоритмы на группах цифр base-10^9 и десятичный кодек.
"""

# Groups: арифметика модулей
from src.core.math.groups import (
    # Constants
    DEFAULT_MAX_GROUPS,
    GROUP_BASE,
    GROUP_DIGITS,
    # Exceptions
    BigNumberError,
    CapacityExceeded,
    # Functions
    add_magnitudes,
    check_capacity,
    compare_magnitudes,
    groups_from_int,
    groups_to_int,
    multiply_magnitudes,
    scale_magnitude,
    shift_groups,
    strictest_capacity,
    subtract_magnitudes,
    trim,
)

# Decimal Codec: строка и группы
from src.core.math.decimal_codec import (
    CANONICAL_DECIMAL_PATTERN,
    CANONICAL_DECIMAL_RE,
    InvalidFormat,
    format_decimal,
    parse_decimal,
    validate_decimal,
)

__all__ = [
    # Groups: Constants
    "DEFAULT_MAX_GROUPS",
    "GROUP_BASE",
    "GROUP_DIGITS",
    # Groups: Exceptions
    "BigNumberError",
    "CapacityExceeded",
    # Groups: Functions
    "add_magnitudes",
    "check_capacity",
    "compare_magnitudes",
    "groups_from_int",
    "groups_to_int",
    "multiply_magnitudes",
    "scale_magnitude",
    "shift_groups",
    "strictest_capacity",
    "subtract_magnitudes",
    "trim",
    # Decimal Codec: Constants
    "CANONICAL_DECIMAL_PATTERN",
    "CANONICAL_DECIMAL_RE",
    # Decimal Codec: Exceptions
    "InvalidFormat",
    # Decimal Codec: Functions
    "format_decimal",
    "parse_decimal",
    "validate_decimal",
]
