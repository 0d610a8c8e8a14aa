from collections.abc import Callable
from pathlib import Path

import pytest

from tests.conftest import CALCULATOR, DATABASE
from wiringlab.cli import main

WriteResource = Callable[[str, str], Path]


@pytest.mark.parametrize(
    ("strategy", "expected"),
    [
        ("static", "Database version!\nResult: 529.0\n"),
        ("dynamic", "Web Service version\nResult: 276.0\n"),
        ("xml", "Database version!\nResult: 529.0\n"),
        ("annotation", "Web Service version\nResult: 276.0\n"),
    ],
)
def test_strategies(capsys: pytest.CaptureFixture[str], strategy: str, expected: str) -> None:
    assert main([strategy]) == 0
    assert capsys.readouterr().out == expected


def test_config_option_feeds_dynamic_strategy(
    capsys: pytest.CaptureFixture[str],
    write_resource: WriteResource,
) -> None:
    path = write_resource("config.txt", f"{DATABASE}\n{CALCULATOR}\n")

    assert main(["dynamic", "--config", str(path)]) == 0
    assert capsys.readouterr().out.endswith("Result: 529.0\n")


def test_dynamic_failure_still_exits_normally(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    assert main(["dynamic", "--config", str(tmp_path / "absent.txt")]) == 0
    assert "Result:" not in capsys.readouterr().out


def test_scan_option_feeds_annotation_strategy(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["annotation", "--scan", "wiringlab.data_source", "--scan", "wiringlab.calculator"]) == 0
    assert capsys.readouterr().out == "Database version!\nResult: 529.0\n"


def test_unknown_strategy_is_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["spring"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
