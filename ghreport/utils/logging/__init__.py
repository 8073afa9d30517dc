from .config import LoggerConfig, LogLevel, create_config, initialize
from .formatters import SecretMaskingFormatter, mask_secrets, register_secret
from .sinks import LogSink, emit, null_sink

__all__ = [
    "LogLevel",
    "LogSink",
    "LoggerConfig",
    "SecretMaskingFormatter",
    "create_config",
    "emit",
    "initialize",
    "mask_secrets",
    "null_sink",
    "register_secret",
]
