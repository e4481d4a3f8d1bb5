"""
BigNumber — знаковое целое произвольной точности

Immutable value type поверх групп base-10^9 (little-endian).
Операции: конструирование (int / десятичная строка / копия), сравнение,
сложение, вычитание, умножение (на int и на BigNumber), каноническая
десятичная сериализация.

Каждый оператор возвращает новый независимый экземпляр; состояние
экземпляра после конструирования не изменяется.

Диспетчеризация по знакам:
- a + b при разных знаках сводится к a - (-b)
- a - b при разных знаках сводится к a + (-b)
- при одинаковых знаках работают алгоритмы модулей из src.core.math.groups
"""

from dataclasses import dataclass
from typing import Union

from src.core.domain.big_number_state import BigNumberState, Sign
from src.core.math.decimal_codec import format_decimal, parse_decimal
from src.core.math.groups import (
    DEFAULT_MAX_GROUPS,
    add_magnitudes,
    check_capacity,
    compare_magnitudes,
    groups_from_int,
    groups_to_int,
    multiply_magnitudes,
    scale_magnitude,
    strictest_capacity,
    subtract_magnitudes,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики BigNumber.

    max_groups=None — без ограничения (список групп растёт по мере надобности).
    При заданной ёмкости результат, не помещающийся в неё, вызывает
    CapacityExceeded.
    """

    max_groups: int | None = None

    def __post_init__(self) -> None:
        if self.max_groups is not None and self.max_groups <= 0:
            raise ValueError(f"max_groups must be positive, got {self.max_groups}")

    @classmethod
    def classic(cls) -> "ArithmeticConfig":
        """Классическая ёмкость: 20 групп (180 десятичных цифр)."""
        return cls(max_groups=DEFAULT_MAX_GROUPS)


DEFAULT_CONFIG = ArithmeticConfig()


# =============================================================================
# BIG NUMBER
# =============================================================================


class BigNumber:
    """
    Знаковое целое произвольной точности.

    Examples:
        >>> str(BigNumber("9999999999123456789123456") + BigNumber("12345678912"))
        '9999999999123469134802368'
        >>> BigNumber(-1) < BigNumber(0)
        True
    """

    __slots__ = ("_sign", "_groups", "_config")

    def __init__(
        self,
        value: Union[int, str, "BigNumber"] = 0,
        config: ArithmeticConfig | None = None,
    ):
        """
        Args:
            value: native int, каноническая десятичная строка или BigNumber (копия)
            config: Конфигурация ёмкости; для копии по умолчанию наследуется

        Raises:
            InvalidFormat: Если строка не является каноническим целым
            CapacityExceeded: Если значение не помещается в ёмкость
            TypeError: Если тип value не поддерживается
        """
        if isinstance(value, BigNumber):
            sign, groups = value._sign, list(value._groups)
            if config is None:
                config = value._config
        elif isinstance(value, bool):
            raise TypeError("BigNumber cannot be constructed from bool")
        elif isinstance(value, int):
            sign, groups = Sign.of(value), groups_from_int(value)
        elif isinstance(value, str):
            raw_sign, groups = parse_decimal(value)
            sign = Sign(raw_sign)
        else:
            raise TypeError(
                f"BigNumber cannot be constructed from {type(value).__name__}"
            )

        self._init_parts(sign, groups, config or DEFAULT_CONFIG)

    def _init_parts(
        self, sign: Sign, groups: list[int], config: ArithmeticConfig
    ) -> None:
        check_capacity(groups, config.max_groups)
        object.__setattr__(self, "_sign", sign if groups else Sign.ZERO)
        object.__setattr__(self, "_groups", tuple(groups))
        object.__setattr__(self, "_config", config)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"BigNumber is immutable: cannot assign to {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"BigNumber is immutable: cannot delete {name!r}")

    @classmethod
    def _from_parts(
        cls, sign: Sign, groups: list[int], config: ArithmeticConfig
    ) -> "BigNumber":
        """Сборка результата операции из уже нормализованных групп."""
        number = cls.__new__(cls)
        number._init_parts(sign, groups, config)
        return number

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int, config: ArithmeticConfig | None = None) -> "BigNumber":
        """Конструирование из native int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(value, config)

    @classmethod
    def from_string(cls, text: str, config: ArithmeticConfig | None = None) -> "BigNumber":
        """Конструирование из канонической десятичной строки."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return cls(text, config)

    @classmethod
    def copy_of(cls, other: "BigNumber") -> "BigNumber":
        """Независимая копия (знак, группы, конфигурация)."""
        if not isinstance(other, BigNumber):
            raise TypeError(f"Expected BigNumber, got {type(other).__name__}")
        return cls(other)

    # -------------------------------------------------------------------------
    # Доступ к представлению
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def groups(self) -> tuple[int, ...]:
        """Группы base-10^9, младшая первой."""
        return self._groups

    @property
    def length(self) -> int:
        return len(self._groups)

    @property
    def config(self) -> ArithmeticConfig:
        return self._config

    def is_zero(self) -> bool:
        return self._sign == Sign.ZERO

    def to_int(self) -> int:
        """Конверсия в native int."""
        return self._sign.value * groups_to_int(self._groups)

    def to_string(self) -> str:
        """Каноническая десятичная запись."""
        return format_decimal(self._sign.value, self._groups)

    def state(self) -> BigNumberState:
        """Снапшот внутреннего представления."""
        return BigNumberState(
            sign=self._sign,
            length=self.length,
            groups=self._groups,
            decimal=self.to_string(),
        )

    # -------------------------------------------------------------------------
    # Служебное
    # -------------------------------------------------------------------------

    def _merged_config(self, other: "BigNumber") -> ArithmeticConfig:
        if other._config == self._config:
            return self._config
        capacity = strictest_capacity(self._config.max_groups, other._config.max_groups)
        return ArithmeticConfig(max_groups=capacity)

    @staticmethod
    def _coerce(value: object) -> "BigNumber | None":
        """int → BigNumber, BigNumber как есть, остальное → None."""
        if isinstance(value, BigNumber):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigNumber(value)
        return None

    def _zero(self, config: ArithmeticConfig) -> "BigNumber":
        return BigNumber._from_parts(Sign.ZERO, [], config)

    def _product_sign(self, other_sign: Sign) -> Sign:
        return Sign.POSITIVE if self._sign == other_sign else Sign.NEGATIVE

    # =========================================================================
    # СЛОЖЕНИЕ / ВЫЧИТАНИЕ
    # =========================================================================

    def negate(self) -> "BigNumber":
        """Смена знака; ноль остаётся каноническим нулём."""
        return BigNumber._from_parts(self._sign.flipped(), list(self._groups), self._config)

    def add(self, other: "BigNumber | int") -> "BigNumber":
        """
        Сложение.

        - нулевой операнд: результат равен другому операнду
        - одинаковые знаки: ripple-carry сложение модулей, знак общий
        - разные знаки: a + b = a - (-b)

        Raises:
            CapacityExceeded: Если сумма не помещается в ёмкость
        """
        other = self._require_operand(other)
        config = self._merged_config(other)

        if other.is_zero():
            return BigNumber._from_parts(self._sign, list(self._groups), config)
        if self.is_zero():
            return BigNumber._from_parts(other._sign, list(other._groups), config)

        if self._sign == other._sign:
            groups = add_magnitudes(self._groups, other._groups)
            return BigNumber._from_parts(self._sign, groups, config)

        return self.subtract(other.negate())

    def subtract(self, other: "BigNumber | int") -> "BigNumber":
        """
        Вычитание.

        - одинаковые знаки: из большего модуля вычитается меньший с заёмом
          в единицах GROUP_BASE; если больше модуль правого операнда,
          знак результата противоположен общему знаку
        - разные знаки: a - b = a + (-b)
        - нулевой результат всегда канонический ноль

        Raises:
            CapacityExceeded: Если результат не помещается в ёмкость
        """
        other = self._require_operand(other)

        if self._sign != other._sign:
            return self.add(other.negate())

        config = self._merged_config(other)
        order = compare_magnitudes(self._groups, other._groups)

        if order == 0:
            return self._zero(config)
        if order > 0:
            groups = subtract_magnitudes(self._groups, other._groups)
            return BigNumber._from_parts(self._sign, groups, config)

        groups = subtract_magnitudes(other._groups, self._groups)
        return BigNumber._from_parts(self._sign.flipped(), groups, config)

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def multiply_by_int(self, factor: int) -> "BigNumber":
        """
        Умножение на native int за один проход с переносом.

        Знак положительный, если знаки множителей совпадают.

        Raises:
            TypeError: Если factor не int
            CapacityExceeded: Если произведение не помещается в ёмкость
        """
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Expected int factor, got {type(factor).__name__}")

        if factor == 0 or self.is_zero():
            return self._zero(self._config)

        groups = scale_magnitude(self._groups, abs(factor))
        return BigNumber._from_parts(self._product_sign(Sign.of(factor)), groups, self._config)

    def multiply(self, other: "BigNumber | int") -> "BigNumber":
        """
        Schoolbook умножение.

        Частичные произведения right * left.groups[i] сдвигаются на i групп
        и накапливаются. Знак положительный, если знаки операндов совпадают.

        Raises:
            CapacityExceeded: Если произведение не помещается в ёмкость
        """
        if isinstance(other, int) and not isinstance(other, bool):
            return self.multiply_by_int(other)

        other = self._require_operand(other)
        config = self._merged_config(other)

        if self.is_zero() or other.is_zero():
            return self._zero(config)

        groups = multiply_magnitudes(self._groups, other._groups, config.max_groups)
        return BigNumber._from_parts(self._product_sign(other._sign), groups, config)

    def _require_operand(self, value: object) -> "BigNumber":
        operand = self._coerce(value)
        if operand is None:
            raise TypeError(f"Unsupported operand type: {type(value).__name__}")
        return operand

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: "BigNumber") -> bool:
        """Равенство: одинаковые знак, длина и все группы."""
        return self._sign == other._sign and self._groups == other._groups

    def less_than(self, other: "BigNumber") -> bool:
        """
        Строгий порядок.

        1. Знак: отрицательные < ноль < положительные
        2. При равном ненулевом знаке больше групп → больше модуль
           (больше значение для положительных, меньше для отрицательных)
        3. При равной длине группы сравниваются от старшей к младшей,
           для отрицательных смысл сравнения инвертирован
        """
        if self._sign != other._sign:
            return self._sign < other._sign
        if self.is_zero():
            return False

        order = compare_magnitudes(self._groups, other._groups)
        if self._sign == Sign.NEGATIVE:
            return order > 0
        return order < 0

    def __eq__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.equals(operand)

    def __ne__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self.equals(operand)

    def __lt__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_than(operand)

    def __le__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.less_than(operand) or self.equals(operand)

    def __gt__(self, other: object) -> bool:
        result = self.__le__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __ge__(self, other: object) -> bool:
        result = self.__lt__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        # Согласован с __eq__ для int: BigNumber(n) == n
        return hash(self.to_int())

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: object) -> "BigNumber":
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "BigNumber":
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "BigNumber":
        if self._coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "BigNumber":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return BigNumber(operand, self._config).subtract(self)

    def __mul__(self, other: object) -> "BigNumber":
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "BigNumber":
        if self._coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "BigNumber":
        return self.negate()

    def __pos__(self) -> "BigNumber":
        return BigNumber(self)

    def __abs__(self) -> "BigNumber":
        if self._sign == Sign.NEGATIVE:
            return self.negate()
        return BigNumber(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    def __copy__(self) -> "BigNumber":
        return BigNumber(self)

    def __deepcopy__(self, memo: dict) -> "BigNumber":
        return BigNumber(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigNumber({self.to_string()!r})"
