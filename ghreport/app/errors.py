import typing


class ApplicationError(Exception):
    def __init__(self, message: str, *args: typing.Any) -> None:
        super().__init__(*args)
        self.message = message


class DisposeError(ApplicationError):
    pass


class ReportRunError(ApplicationError):
    pass


class DeliveryError(ApplicationError):
    pass


__all__ = [
    "ApplicationError",
    "DeliveryError",
    "DisposeError",
    "ReportRunError",
]
