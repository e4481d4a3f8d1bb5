"""
BigNumberState — снапшот внутреннего представления BigNumber

Immutable Pydantic модель: знак, число групп, группы (little-endian)
и каноническая десятичная запись. Используется для диагностики и
сериализации; полная совместимость с JSON Schema
(contracts/schema/big_number_state.json).
"""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from src.core.math.decimal_codec import CANONICAL_DECIMAL_PATTERN, format_decimal
from src.core.math.groups import GROUP_BASE

if TYPE_CHECKING:
    from src.core.domain.big_number import ArithmeticConfig, BigNumber


# =============================================================================
# ENUMS
# =============================================================================


class Sign(int, Enum):
    """Знак числа: отрицательное / ноль / положительное."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, value: int) -> "Sign":
        """Знак native int."""
        if value < 0:
            return cls.NEGATIVE
        if value > 0:
            return cls.POSITIVE
        return cls.ZERO

    def flipped(self) -> "Sign":
        """Противоположный знак (ZERO остаётся ZERO)."""
        return Sign(-self.value)


# =============================================================================
# STATE MODEL
# =============================================================================


class BigNumberState(BaseModel):
    """
    Снапшот BigNumber.

    Инварианты проверяются при создании:
    - каждая группа в [0, GROUP_BASE)
    - len(groups) == length
    - старшая группа ненулевая
    - sign == ZERO ⇔ length == 0
    - decimal совпадает с канонической записью (sign, groups)
    """

    sign: Sign = Field(..., description="Знак (-1/0/1)")
    length: int = Field(..., ge=0, description="Количество используемых групп")
    groups: tuple[int, ...] = Field(
        ..., description="Группы base-10^9, младшая первой"
    )
    decimal: str = Field(
        ...,
        pattern=CANONICAL_DECIMAL_PATTERN,
        description="Каноническая десятичная запись",
    )

    model_config = {"frozen": True}

    @field_validator("groups")
    @classmethod
    def validate_groups(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Диапазон групп, длина, нормализация и согласованность со знаком."""
        for i, group in enumerate(v):
            if not 0 <= group < GROUP_BASE:
                raise ValueError(f"group {i} = {group} outside [0, {GROUP_BASE})")

        if v and v[-1] == 0:
            raise ValueError("most significant group must be non-zero")

        if "length" in info.data and len(v) != info.data["length"]:
            raise ValueError(
                f"length {info.data['length']} does not match {len(v)} groups"
            )

        if "sign" in info.data:
            is_zero_sign = info.data["sign"] == Sign.ZERO
            if is_zero_sign != (len(v) == 0):
                raise ValueError("sign ZERO requires empty groups and vice versa")

        return v

    @field_validator("decimal")
    @classmethod
    def validate_decimal(cls, v: str, info) -> str:
        """Десятичная запись должна соответствовать группам."""
        if "sign" not in info.data or "groups" not in info.data:
            return v

        expected = format_decimal(info.data["sign"], info.data["groups"])
        if v != expected:
            raise ValueError(f"decimal {v!r} does not match groups ({expected!r})")
        return v

    def to_big_number(self, config: "ArithmeticConfig | None" = None) -> "BigNumber":
        """
        Восстановление BigNumber из снапшота.

        Снапшот не хранит ёмкость: без config значение восстанавливается
        с конфигурацией по умолчанию (без ограничения).

        Args:
            config: Конфигурация ёмкости восстановленного значения

        Returns:
            BigNumber с теми же знаком и группами

        Raises:
            CapacityExceeded: Если значение не помещается в ёмкость config
        """
        from src.core.domain.big_number import BigNumber

        return BigNumber.from_string(self.decimal, config)
