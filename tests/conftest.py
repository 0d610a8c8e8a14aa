"""Shared pytest fixtures for wiringlab tests."""

import os
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

import pytest

from wiringlab.container import Container
from wiringlab.registry import TypeRegistry, build_default_registry

DATABASE = "wiringlab.data_source.DatabaseDataSource"
WEB_SERVICE = "wiringlab.extension.web_service.WebServiceDataSource"
CALCULATOR = "wiringlab.calculator.MultiplierCalculator"


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep WIRINGLAB_* variables of the host out of settings."""
    for name in list(os.environ):
        if name.upper().startswith("WIRINGLAB_"):
            monkeypatch.delenv(name)


@pytest.fixture()
def registry() -> TypeRegistry:
    """Registry with every data source and calculator of the lab."""
    return build_default_registry()


@pytest.fixture()
def container() -> Container:
    """Empty container."""
    return Container()


@pytest.fixture()
def write_resource(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a text resource under ``tmp_path`` and return its path."""

    def write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture()
def read_streams(monkeypatch: pytest.MonkeyPatch) -> list[IO[Any]]:
    """Collect every stream ``Path.open`` returns for reading during the test."""
    streams: list[IO[Any]] = []
    original_open = Path.open

    def recording_open(self: Path, mode: str = "r", *args: Any, **kwargs: Any) -> IO[Any]:
        stream = original_open(self, mode, *args, **kwargs)
        if mode == "r":
            streams.append(stream)
        return stream

    monkeypatch.setattr(Path, "open", recording_open)
    return streams
