from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from wiringlab._internal.resources import open_text_resource
from wiringlab.exceptions import WiringLabConfigFormatError

logger = logging.getLogger(__name__)

DEFAULT_WIRING_CONFIG = "config.txt"


class WiringConfiguration(NamedTuple):
    """Type names picked by the config-driven strategy.

    The first line of the resource names the data source type, the second
    one the calculator type.
    """

    data_source_type: str
    calculator_type: str


def load_wiring_configuration(path: Path | None = None) -> WiringConfiguration:
    """Read the two type names from ``path`` or the packaged ``config.txt``.

    Only line terminators are stripped. Lines after the second are ignored.

    Raises:
        WiringLabResourceNotFoundError: If the resource does not exist.
        WiringLabConfigFormatError: If the resource holds fewer than two lines
            or is not UTF-8 text.

    """
    source = path if path is not None else DEFAULT_WIRING_CONFIG
    with open_text_resource(path, DEFAULT_WIRING_CONFIG) as stream:
        try:
            data_source_line = stream.readline()
            calculator_line = stream.readline()
        except UnicodeDecodeError as error:
            msg = f"Wiring configuration '{source}' is not UTF-8 text: {error}"
            raise WiringLabConfigFormatError(msg) from error

    if not data_source_line or not calculator_line:
        msg = f"Wiring configuration '{source}' must contain two lines, a data source type and a calculator type."
        raise WiringLabConfigFormatError(msg)

    configuration = WiringConfiguration(
        data_source_type=data_source_line.rstrip("\r\n"),
        calculator_type=calculator_line.rstrip("\r\n"),
    )
    logger.debug("Loaded wiring configuration %s", configuration)
    return configuration
