from .app import Application
from .errors import ApplicationError, DeliveryError, DisposeError, ReportRunError
from .settings import Settings

__all__ = [
    "Application",
    "ApplicationError",
    "DeliveryError",
    "DisposeError",
    "ReportRunError",
    "Settings",
]
