from __future__ import annotations

from wiringlab.data_source import DataSource
from wiringlab.markers import component


@component("web_service_data_source", primary=True)
class WebServiceDataSource(DataSource):
    """Data source standing in for a remote web service call.

    Marked primary so it wins over ``DatabaseDataSource`` whenever both are
    discovered by the same scan.
    """

    def fetch_value(self) -> float:
        print("Web Service version")
        return 12.0
