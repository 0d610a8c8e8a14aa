from __future__ import annotations

from wiringlab.calculator import MultiplierCalculator
from wiringlab.data_source import DatabaseDataSource


def main() -> None:
    data_source = DatabaseDataSource()

    # Constructor injection; ``calculator.set_data_source(data_source)`` works as well.
    calculator = MultiplierCalculator(data_source)
    print(f"Result: {calculator.compute()}")


if __name__ == "__main__":
    main()
