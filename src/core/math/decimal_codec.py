"""
Decimal Codec — десятичная строка ⇄ группы base-10^9

Формат входа: необязательный ведущий '-', затем десятичные цифры ASCII.
Ведущий ноль допустим только в литерале "0"; "-0" — невалидный вход.

Формат выхода (канонический):
- "0" для нуля
- иначе: необязательный '-', старшая группа без ведущих нулей,
  затем каждая оставшаяся группа ровно из 9 цифр (с ведущими нулями)

Дополнение внутренних групп нулями обязательно: без него группа со
значением 5 дала бы "5" вместо "000000005" и исказила бы число.
"""

import re
from typing import Final, Sequence

from src.core.logging_config import get_logger
from src.core.math.groups import GROUP_DIGITS, BigNumberError

# Канонический вид: "0" или [-]ненулевая цифра + цифры
CANONICAL_DECIMAL_PATTERN: Final[str] = r"^(?:-?[1-9][0-9]*|0)$"

CANONICAL_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(CANONICAL_DECIMAL_PATTERN)

_ASCII_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormat(BigNumberError):
    """Строка не является каноническим десятичным целым."""

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid decimal integer {value!r}: {reason}")


# =============================================================================
# ПАРСИНГ
# =============================================================================


def validate_decimal(text: str) -> None:
    """
    Проверка строки на канонический десятичный формат.

    Raises:
        InvalidFormat: Пустая строка, одинокий '-', нецифровые символы,
            лишний ведущий ноль или "-0"
    """
    if CANONICAL_DECIMAL_RE.fullmatch(text):
        return

    reason = _describe_violation(text)
    logger.debug("invalid_format", value=text, reason=reason)
    raise InvalidFormat(text, reason)


def _describe_violation(text: str) -> str:
    if not text:
        return "empty string"

    digits = text[1:] if text.startswith("-") else text
    if not digits:
        return "sign without digits"
    if not _ASCII_DIGITS_RE.fullmatch(digits):
        return "non-digit characters after optional sign"
    if digits == "0":
        return "negative zero"
    return "extraneous leading zero"


def parse_decimal(text: str) -> tuple[int, list[int]]:
    """
    Разбор десятичной строки в (sign, groups).

    Строка цифр режется на куски по 9 цифр от младшего конца; самый левый
    кусок может быть короче. Каждый кусок — одна группа, младшая первой.

    Args:
        text: Каноническая десятичная строка

    Returns:
        (sign, groups): sign ∈ {-1, 0, 1}, groups little-endian

    Raises:
        InvalidFormat: Если строка не канонична

    Examples:
        >>> parse_decimal("0")
        (0, [])
        >>> parse_decimal("-1000000007")
        (-1, [7, 1])
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    validate_decimal(text)

    if text == "0":
        return 0, []

    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("-")

    groups: list[int] = []
    end = len(digits)
    while end > 0:
        start = max(0, end - GROUP_DIGITS)
        groups.append(int(digits[start:end]))
        end = start

    return sign, groups


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================


def format_decimal(sign: int, groups: Sequence[int]) -> str:
    """
    Каноническая десятичная запись числа.

    Examples:
        >>> format_decimal(0, [])
        '0'
        >>> format_decimal(1, [5, 12])
        '12000000005'
        >>> format_decimal(-1, [123])
        '-123'
    """
    if not groups:
        return "0"

    parts = [str(groups[-1])]
    parts.extend(f"{group:0{GROUP_DIGITS}d}" for group in reversed(groups[:-1]))

    prefix = "-" if sign < 0 else ""
    return prefix + "".join(parts)
