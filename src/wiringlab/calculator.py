from __future__ import annotations

from abc import ABC, abstractmethod

from wiringlab.data_source import DataSource
from wiringlab.exceptions import WiringLabDataSourceNotSetError
from wiringlab.markers import component

MULTIPLIER = 23


class Calculator(ABC):
    """Compute a result from the value of a data source."""

    @abstractmethod
    def compute(self) -> float:
        """Return the computed result."""


@component("calculator")
class MultiplierCalculator(Calculator):
    """Multiply the value of a data source by ``MULTIPLIER``.

    The data source is attached either at construction time or later through
    ``set_data_source``; it must be attached before the first ``compute``.

    Examples:
        .. code-block:: python

            calculator = MultiplierCalculator(DatabaseDataSource())
            calculator.compute()  # => 529.0

            calculator = MultiplierCalculator()
            calculator.set_data_source(WebServiceDataSource())
            calculator.compute()  # => 276.0

    """

    def __init__(self, data_source: DataSource | None = None) -> None:
        self._data_source = data_source

    @property
    def data_source(self) -> DataSource | None:
        return self._data_source

    def set_data_source(self, data_source: DataSource) -> None:
        self._data_source = data_source

    def compute(self) -> float:
        if self._data_source is None:
            msg = f"{type(self).__qualname__} has no data source attached."
            raise WiringLabDataSourceNotSetError(msg)
        value = self._data_source.fetch_value()
        return value * MULTIPLIER
