from __future__ import annotations

import logging

from wiringlab.calculator import Calculator
from wiringlab.data_source import DataSource
from wiringlab.exceptions import WiringLabTypeMismatchError
from wiringlab.registry import TypeRegistry, build_default_registry
from wiringlab.settings import WiringLabSettings
from wiringlab.wiring_config import load_wiring_configuration

logger = logging.getLogger(__name__)


def assemble(settings: WiringLabSettings, registry: TypeRegistry) -> Calculator:
    """Build the calculator named by the wiring configuration.

    The data source is created through its zero-argument constructor and
    passed to the calculator constructor that accepts a ``DataSource``.
    """
    configuration = load_wiring_configuration(settings.wiring_config_path)

    data_source = registry.get(configuration.data_source_type).find_constructor().create()
    if not isinstance(data_source, DataSource):
        msg = f"'{configuration.data_source_type}' is not a {DataSource.__qualname__}."
        raise WiringLabTypeMismatchError(msg)

    calculator_registration = registry.get(configuration.calculator_type)
    calculator = calculator_registration.find_constructor(DataSource).create(data_source)
    if not isinstance(calculator, Calculator):
        msg = f"'{configuration.calculator_type}' is not a {Calculator.__qualname__}."
        raise WiringLabTypeMismatchError(msg)
    return calculator


def main(settings: WiringLabSettings | None = None, registry: TypeRegistry | None = None) -> None:
    settings = settings if settings is not None else WiringLabSettings()
    registry = registry if registry is not None else build_default_registry()
    try:
        calculator = assemble(settings, registry)
        print(f"Result: {calculator.compute()}")
    except Exception as error:  # noqa: BLE001
        logger.debug("Dynamic wiring failed", exc_info=error)
        print(error)


if __name__ == "__main__":
    main()
