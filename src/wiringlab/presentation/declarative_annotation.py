from __future__ import annotations

from wiringlab.calculator import Calculator
from wiringlab.scanning import annotation_container
from wiringlab.settings import WiringLabSettings


def main(settings: WiringLabSettings | None = None) -> None:
    settings = settings if settings is not None else WiringLabSettings()
    container = annotation_container(*settings.scan_modules)
    calculator = container.resolve("calculator", of_type=Calculator)
    print(f"Result: {calculator.compute()}")


if __name__ == "__main__":
    main()
