"""
Groups — арифметика модулей (magnitude) на группах цифр base-10^9

Представление: список неотрицательных int, little-endian
(groups[0] — младшие 9 десятичных цифр).

Модуль работает только с модулями чисел; знак обрабатывается в BigNumber.
Все функции чистые: входные списки не изменяются, результат — новый список.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая группа в диапазоне [0, GROUP_BASE)
2. Старшая группа результата ненулевая (пустой список == ноль)
3. Заём (borrow) и перенос (carry) считаются в единицах GROUP_BASE
4. Превышение capacity → CapacityExceeded, никогда не усечение
"""

from typing import Final, Sequence

from src.core.logging_config import get_logger

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание группы: одна группа хранит значения 0..999_999_999
GROUP_BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в полной группе
GROUP_DIGITS: Final[int] = 9

# Классическая ёмкость: 20 групп (до 180 десятичных цифр)
DEFAULT_MAX_GROUPS: Final[int] = 20

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigNumberError(ValueError):
    """Базовая ошибка арифметики BigNumber."""

    pass


class CapacityExceeded(BigNumberError):
    """
    Результат требует больше групп, чем разрешает capacity.

    Старое поведение (тихое отбрасывание старших групп) искажает значение,
    поэтому переполнение всегда поднимается наружу.
    """

    def __init__(self, required: int, capacity: int):
        self.required = required
        self.capacity = capacity
        super().__init__(
            f"Result needs {required} groups, capacity is {capacity} groups "
            f"({capacity * GROUP_DIGITS} decimal digits)"
        )


# =============================================================================
# НОРМАЛИЗАЦИЯ И ЁМКОСТЬ
# =============================================================================


def trim(groups: list[int]) -> list[int]:
    """
    Удаление нулевых старших групп (in place).

    Args:
        groups: Рабочий список групп (little-endian)

    Returns:
        Тот же список без ведущих нулевых групп
    """
    while groups and groups[-1] == 0:
        groups.pop()
    return groups


def check_capacity(groups: Sequence[int], capacity: int | None) -> None:
    """
    Проверка, что число групп не превышает capacity.

    Args:
        groups: Группы результата
        capacity: Максимум групп или None (без ограничения)

    Raises:
        CapacityExceeded: Если len(groups) > capacity
    """
    if capacity is None or len(groups) <= capacity:
        return

    logger.warning("capacity_exceeded", required=len(groups), capacity=capacity)
    raise CapacityExceeded(len(groups), capacity)


def strictest_capacity(a: int | None, b: int | None) -> int | None:
    """Наиболее строгая из двух ёмкостей (None == без ограничения)."""
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


# =============================================================================
# КОНВЕРСИЯ С NATIVE INT
# =============================================================================


def groups_from_int(n: int) -> list[int]:
    """
    Разложение abs(n) на группы base-10^9, младшая первой.

    Examples:
        >>> groups_from_int(0)
        []
        >>> groups_from_int(1_000_000_007)
        [7, 1]
        >>> groups_from_int(-42)
        [42]
    """
    n = abs(n)
    groups: list[int] = []
    while n > 0:
        n, group = divmod(n, GROUP_BASE)
        groups.append(group)
    return groups


def groups_to_int(groups: Sequence[int]) -> int:
    """Сборка модуля из групп (обратная к groups_from_int)."""
    value = 0
    for group in reversed(groups):
        value = value * GROUP_BASE + group
    return value


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей двух нормализованных чисел.

    Больше групп → больше модуль. При равной длине группы сравниваются
    от старшей к младшей, первое различие решает.

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitudes([5], [0, 1])
        -1
        >>> compare_magnitudes([1, 2], [9, 1])
        1
        >>> compare_magnitudes([], [])
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с ripple-carry по группам.

    Для каждой позиции до длины более длинного операнда:
        sum = a[i] + b[i] + carry
        result[i] = sum mod GROUP_BASE
        carry = sum // GROUP_BASE
    Остаточный carry добавляется новой старшей группой.

    Examples:
        >>> add_magnitudes([999_999_999], [1])
        [0, 1]
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    for i in range(len(a)):
        carry += a[i] + (b[i] if i < len(b) else 0)
        carry, group = divmod(carry, GROUP_BASE)
        result.append(group)

    if carry:
        result.append(carry)
    return result


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Вычитание модулей: |a| - |b| при условии |a| >= |b|.

    Заём идёт от младшей группы к старшей. Если группа уменьшаемого меньше
    группы вычитаемого, к ней добавляется GROUP_BASE, а следующая старшая
    группа уменьшается на единицу.

    Raises:
        ValueError: Если |a| < |b|

    Examples:
        >>> subtract_magnitudes([0, 1], [1])
        [999999999]
        >>> subtract_magnitudes([7], [7])
        []
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("subtract_magnitudes requires |a| >= |b|")

    result: list[int] = []
    borrow = 0
    for i in range(len(a)):
        group = a[i] - borrow - (b[i] if i < len(b) else 0)
        if group < 0:
            group += GROUP_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(group)

    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ МОДУЛЕЙ
# =============================================================================


def scale_magnitude(a: Sequence[int], factor: int) -> list[int]:
    """
    Умножение модуля на неотрицательный native int за один проход.

    Каждая группа умножается на factor и складывается с входящим carry;
    младшие 9 цифр остаются в группе, остальное уходит в carry.
    Остаточный carry может дать несколько новых групп.

    Raises:
        ValueError: Если factor < 0

    Examples:
        >>> scale_magnitude([500_000_000], 4)
        [0, 2]
        >>> scale_magnitude([1], 0)
        []
    """
    if factor < 0:
        raise ValueError(f"factor must be non-negative, got {factor}")
    if factor == 0 or not a:
        return []

    result: list[int] = []
    carry = 0
    for group in a:
        carry, group = divmod(group * factor + carry, GROUP_BASE)
        result.append(group)

    while carry:
        carry, group = divmod(carry, GROUP_BASE)
        result.append(group)
    return result


def shift_groups(a: Sequence[int], positions: int) -> list[int]:
    """
    Сдвиг влево на positions групп (умножение на 10^(9 * positions)).

    Нули вставляются со стороны младших групп. Ноль остаётся нулём.
    """
    if positions < 0:
        raise ValueError(f"positions must be non-negative, got {positions}")
    if not a:
        return []
    return [0] * positions + list(a)


def multiply_magnitudes(
    a: Sequence[int],
    b: Sequence[int],
    capacity: int | None = None,
) -> list[int]:
    """
    Schoolbook умножение модулей.

    Для каждой группы i левого операнда (от младшей к старшей):
        partial = scale_magnitude(b, a[i])
        partial = shift_groups(partial, i)
        result = add_magnitudes(result, partial)

    Сложность O(len(a) * len(b)).

    Args:
        a: Левый множитель
        b: Правый множитель
        capacity: Ёмкость; проверяется на каждой частичной сумме

    Raises:
        CapacityExceeded: Если промежуточный или итоговый результат
            не помещается в capacity
    """
    result: list[int] = []
    for i, group in enumerate(a):
        partial = shift_groups(scale_magnitude(b, group), i)
        result = add_magnitudes(result, partial)
        check_capacity(result, capacity)
    return result
