"""
Demo CLI — демонстрация API BigNumber из командной строки

Команда `bignumber-demo`: разбирает два десятичных операнда и печатает
сумму, разность, произведение и результаты сравнения.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TextIO

from src.core.domain import ArithmeticConfig, BigNumber
from src.core.logging_config import DEFAULT_LOG_LEVEL, configure_logging, get_logger
from src.core.math import BigNumberError

# Операнды по умолчанию
DEFAULT_LEFT = "9999999999123456789123456"
DEFAULT_RIGHT = "12345678912"

logger = get_logger(__name__)


def render_demo(a: BigNumber, b: BigNumber, show_state: bool = False) -> list[str]:
    """Строки демонстрации для двух операндов."""
    lines = []

    if show_state:
        for label, value in (("A", a), ("B", b)):
            state = value.state().model_dump(mode="json")
            lines.append(f"{label} state: {json.dumps(state)}")

    for symbol, result in (("+", a + b), ("-", a - b), ("*", a * b)):
        logger.debug("operation", op=symbol, left=str(a), right=str(b), result=str(result))
        lines.append(f"{a} {symbol} {b} = {result}")

    if a == b:
        lines.append(f"{a} is equal to {b}")
    else:
        lines.append(f"{a} is not equal to {b}")

    if a > b:
        lines.append(f"{a} is greater than {b}")
    else:
        lines.append(f"{a} is not greater than {b}")

    return lines


def cmd_demo(
    args: argparse.Namespace,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Запуск демонстрации.

    Returns:
        0 при успехе, 1 при ошибке формата или ёмкости
    """
    out = out or sys.stdout
    err = err or sys.stderr
    config = ArithmeticConfig(max_groups=args.max_groups)

    try:
        a = BigNumber.from_string(args.left, config)
        b = BigNumber.from_string(args.right, config)
        lines = render_demo(a, b, show_state=args.state)
    except BigNumberError as e:
        print(f"Error: {e}", file=err)
        return 1

    for line in lines:
        print(line, file=out)
    return 0


def positive_int(value: str) -> int:
    """Тип argparse для --max-groups."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Создание парсера аргументов."""
    parser = argparse.ArgumentParser(
        prog="bignumber-demo",
        description="Demonstrate arbitrary-precision integer arithmetic",
    )
    parser.add_argument(
        "left",
        nargs="?",
        default=DEFAULT_LEFT,
        help=f"Left operand (default: {DEFAULT_LEFT})",
    )
    parser.add_argument(
        "right",
        nargs="?",
        default=DEFAULT_RIGHT,
        help=f"Right operand (default: {DEFAULT_RIGHT})",
    )
    parser.add_argument(
        "--max-groups",
        type=positive_int,
        default=None,
        help="Capacity in base-10^9 groups (default: unbounded)",
    )
    parser.add_argument(
        "--state",
        action="store_true",
        help="Also print the internal state of each operand as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Log level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.set_defaults(func=cmd_demo)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Точка входа."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
