"""
Тесты демонстрационного CLI

Проверяет:
1. Вывод по умолчанию (сумма, разность, произведение, сравнения)
2. Пользовательские операнды и --state
3. Ошибки формата и ёмкости (exit code 1, сообщение в stderr)
4. Валидацию аргументов argparse
"""

import argparse
import io
import json

import pytest

from src.core.domain import BigNumber
from src.demo import cli
from src.demo.cli import (
    DEFAULT_LEFT,
    DEFAULT_RIGHT,
    cmd_demo,
    create_parser,
    main,
    positive_int,
    render_demo,
)


def run_demo(*argv: str) -> tuple[int, str, str]:
    """Запуск cmd_demo с перехватом вывода."""
    args = create_parser().parse_args(list(argv))
    out, err = io.StringIO(), io.StringIO()
    code = cmd_demo(args, out=out, err=err)
    return code, out.getvalue(), err.getvalue()


class TestRenderDemo:
    """Тесты render_demo"""

    def test_default_operands(self) -> None:
        a, b = BigNumber(DEFAULT_LEFT), BigNumber(DEFAULT_RIGHT)
        lines = render_demo(a, b)

        assert lines == [
            f"{DEFAULT_LEFT} + {DEFAULT_RIGHT} = 9999999999123469134802368",
            f"{DEFAULT_LEFT} - {DEFAULT_RIGHT} = 9999999999123444443444544",
            f"{DEFAULT_LEFT} * {DEFAULT_RIGHT} = {int(DEFAULT_LEFT) * int(DEFAULT_RIGHT)}",
            f"{DEFAULT_LEFT} is not equal to {DEFAULT_RIGHT}",
            f"{DEFAULT_LEFT} is greater than {DEFAULT_RIGHT}",
        ]

    def test_equal_operands(self) -> None:
        lines = render_demo(BigNumber(-5), BigNumber(-5))
        assert lines[-2] == "-5 is equal to -5"
        assert lines[-1] == "-5 is not greater than -5"

    def test_state_lines(self) -> None:
        lines = render_demo(BigNumber(-7), BigNumber(0), show_state=True)
        assert lines[0].startswith("A state: ")
        assert json.loads(lines[0][len("A state: "):]) == {
            "sign": -1,
            "length": 1,
            "groups": [7],
            "decimal": "-7",
        }
        assert lines[1].startswith("B state: ")


class TestCmdDemo:
    """Тесты cmd_demo"""

    def test_default_run(self) -> None:
        code, out, err = run_demo()
        assert code == 0
        assert err == ""
        assert len(out.splitlines()) == 5

    def test_custom_operands(self) -> None:
        code, out, _ = run_demo("-3", "10")
        assert code == 0
        assert out.splitlines()[:3] == ["-3 + 10 = 7", "-3 - 10 = -13", "-3 * 10 = -30"]

    def test_state_flag(self) -> None:
        code, out, _ = run_demo("1", "2", "--state")
        assert code == 0
        assert len(out.splitlines()) == 7

    def test_invalid_operand(self) -> None:
        code, out, err = run_demo("12x", "1")
        assert code == 1
        assert out == ""
        assert err.startswith("Error: Invalid decimal integer '12x'")

    def test_capacity_exceeded(self) -> None:
        """Произведение не помещается в 3 группы"""
        code, out, err = run_demo(str(10**18), str(10**18), "--max-groups", "3")
        assert code == 1
        assert out == ""
        assert "capacity is 3 groups" in err


class TestParser:
    """Тесты argparse"""

    def test_defaults(self) -> None:
        args = create_parser().parse_args([])
        assert args.left == DEFAULT_LEFT
        assert args.right == DEFAULT_RIGHT
        assert args.max_groups is None
        assert args.state is False

    def test_negative_operand_after_separator(self) -> None:
        args = create_parser().parse_args(["--", "-5", "-6"])
        assert (args.left, args.right) == ("-5", "-6")

    @pytest.mark.parametrize("value", ["0", "-2", "x"])
    def test_positive_int_rejects(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            positive_int(value)

    def test_positive_int_accepts(self) -> None:
        assert positive_int("20") == 20

    def test_bad_max_groups_exits(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--max-groups", "0"])


class TestMain:
    """Тесты точки входа"""

    def test_main_prints_results(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        levels = []
        monkeypatch.setattr(cli, "configure_logging", levels.append)

        code = main(["7", "6", "--log-level", "ERROR"])
        captured = capsys.readouterr()

        assert code == 0
        assert levels == ["ERROR"]
        assert "7 * 6 = 42" in captured.out
        assert "7 is greater than 6" in captured.out
