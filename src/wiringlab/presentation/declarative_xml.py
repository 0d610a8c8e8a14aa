from __future__ import annotations

from wiringlab.calculator import Calculator
from wiringlab.settings import WiringLabSettings
from wiringlab.xml_definitions import xml_container


def main(settings: WiringLabSettings | None = None) -> None:
    settings = settings if settings is not None else WiringLabSettings()
    container = xml_container(settings.definitions_path)
    calculator = container.resolve("calculator", of_type=Calculator)
    print(f"Result: {calculator.compute()}")


if __name__ == "__main__":
    main()
