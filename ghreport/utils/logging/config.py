import dataclasses
import logging.config
import typing

import ghreport.utils.logging.formatters as formatters

LogLevel = typing.Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    propagate: bool
    level: LogLevel


def create_config(
    log_level: LogLevel,
    log_format: str,
    loggers: dict[str, LoggerConfig] | None = None,
) -> dict[str, typing.Any]:
    loggers = loggers or {}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "class": f"{formatters.__name__}.{formatters.SecretMaskingFormatter.__name__}",
                "format": log_format,
            },
        },
        "handlers": {
            "console": {
                "level": log_level,
                "class": "logging.StreamHandler",
                "formatter": "console",
            },
        },
        "loggers": {
            name: {
                "handlers": ["console"],
                "level": logger_config.level,
                "propagate": logger_config.propagate,
            }
            for name, logger_config in loggers.items()
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }


def initialize(config: dict[str, typing.Any]) -> None:
    logging.config.dictConfig(config)


__all__ = [
    "LogLevel",
    "LoggerConfig",
    "create_config",
    "initialize",
]
