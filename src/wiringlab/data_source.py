from __future__ import annotations

from abc import ABC, abstractmethod

from wiringlab.markers import component


class DataSource(ABC):
    """Provide the single value a calculator works on."""

    @abstractmethod
    def fetch_value(self) -> float:
        """Return the value and announce which source produced it."""


@component("data_source")
class DatabaseDataSource(DataSource):
    """Data source standing in for a database lookup."""

    def fetch_value(self) -> float:
        print("Database version!")
        return 23.0
