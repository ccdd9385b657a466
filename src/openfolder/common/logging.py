"""Loguru setup for openfolder.

The library stays silent until asked: importing ``openfolder`` disables its
loggers. The CLI writes to a rotating log file, library users may opt into
stderr output with :func:`enable_library_logging`.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from openfolder.constants import APP_NAME

from .models import AppInfo
from .paths import get_data_directory

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_TEXT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[scope]}] "
    "{name}:{function}:{line} - {message} | {extra}\n{exception}"
)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: LogLevel = Field(default="INFO")
    log_file: str | None = Field(default=None, description="Defaults to <data dir>/logs/openfolder.log")
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")

    def resolve_log_file(self) -> Path:
        if self.log_file:
            return Path(self.log_file).expanduser()
        return get_data_directory() / "logs" / f"{APP_NAME}.log"


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig) -> int:
    """Route openfolder logs to the configured file; returns the loguru handler id."""
    log_file = config.resolve_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    sink_options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        sink_options["serialize"] = True
    else:
        sink_options["format"] = _TEXT_FORMAT

    handler_id = logger.add(log_file, **sink_options)
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "library"})
    return logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)
