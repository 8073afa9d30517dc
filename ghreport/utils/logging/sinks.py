import logging
import typing

logger = logging.getLogger(__name__)

LogSink = typing.Callable[[str], None]


def null_sink(message: str) -> None: ...


def emit(sink: LogSink, message: str) -> None:
    """Pass a telemetry line to a sink; a failing sink never interrupts the caller."""
    try:
        sink(message)
    except Exception:
        logger.warning("Log sink has failed to accept message(%s)", message, exc_info=True)


__all__ = [
    "LogSink",
    "emit",
    "null_sink",
]
