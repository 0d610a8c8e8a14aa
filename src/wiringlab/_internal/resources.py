from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import TextIO

from wiringlab.exceptions import WiringLabResourceNotFoundError

_RESOURCES_PACKAGE = "wiringlab"
_RESOURCES_DIRECTORY = "resources"


def packaged_resource(name: str) -> Traversable:
    """Return the packaged resource ``name`` shipped inside ``wiringlab/resources``."""
    return files(_RESOURCES_PACKAGE) / _RESOURCES_DIRECTORY / name


@contextmanager
def open_text_resource(path: Path | None, default_name: str) -> Iterator[TextIO]:
    """Open ``path`` for reading, or the packaged ``default_name`` when ``path`` is ``None``.

    The stream is closed when the block exits, whether it exits normally or
    through an exception.

    Raises:
        WiringLabResourceNotFoundError: If the resource does not exist.

    """
    source: Path | Traversable = path if path is not None else packaged_resource(default_name)
    try:
        stream = source.open("r", encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as error:
        msg = f"Resource '{source}' does not exist."
        raise WiringLabResourceNotFoundError(msg) from error
    with stream:
        yield stream
