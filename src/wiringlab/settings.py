from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from wiringlab.scanning import DEFAULT_SCAN_MODULES

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class WiringLabSettings(BaseSettings):
    """Runtime settings read from ``WIRINGLAB_*`` environment variables.

    Leaving a path unset selects the resource packaged with ``wiringlab``.
    ``WIRINGLAB_SCAN_MODULES`` takes a JSON list of module names.
    """

    model_config = SettingsConfigDict(env_prefix="WIRINGLAB_", frozen=True)

    wiring_config_path: Path | None = None
    """Two-line text file naming the data source and calculator types."""
    definitions_path: Path | None = None
    """XML component definitions file."""
    scan_modules: tuple[str, ...] = DEFAULT_SCAN_MODULES
    """Modules scanned for ``@component`` classes."""
    log_level: LogLevel = "WARNING"
