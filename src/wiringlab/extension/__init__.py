from wiringlab.extension.web_service import WebServiceDataSource

__all__ = ["WebServiceDataSource"]
