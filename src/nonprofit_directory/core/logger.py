"""
Logging configuration for the nonprofit directory.

Log settings come from the `logging` section of the loaded Config:

    "logging": {"level": "DEBUG", "console_level": "INFO", "file": "logs/directory.log"}

An empty "file" keeps logging on the console only. Without a Config the
LOG_FILE environment variable (or logs/nonprofit_directory.log) is used.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional

from .config import Config

DEFAULT_LOG_FILE = "logs/nonprofit_directory.log"

FILE_FORMAT = (
    "%(asctime)s - %(name)s - [%(environment)s] %(levelname)s - "
    "%(filename)s:%(lineno)d - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class EnvironmentFilter(logging.Filter):
    """Stamp every record with the deployment environment (development, test...)."""

    def __init__(self, environment: str):
        super().__init__()
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.environment = self.environment
        return True


def _level(name: Optional[str], default: int = logging.INFO) -> int:
    if not name:
        return default
    return getattr(logging, str(name).upper(), default)


def resolve_log_file(config: Optional[Config] = None, log_file: Optional[str] = None) -> Optional[str]:
    """
    Pick the log file path: explicit argument, then config, then LOG_FILE.

    Returns:
        Path string, or None when file logging is switched off
    """
    if log_file is None and config is not None:
        log_file = config.log_file
    if log_file is None:
        log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
    return log_file or None


def setup_logger(
    config: Optional[Config] = None,
    name: str = "nonprofit_directory",
    log_file: Optional[str] = None,
    log_level: Optional[str] = None
) -> logging.Logger:
    """
    Set up the application logger with console and file handlers.

    Args:
        config: Loaded configuration; its logging section supplies the defaults
        name: Logger name
        log_file: Overrides the configured log file ("" disables file logging)
        log_level: Overrides the configured level

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = config.log_level if config is not None else "INFO"
    console_level = config.console_log_level if config is not None else "INFO"
    environment = config.get("environment", "development") if config is not None else "development"

    logger = logging.getLogger(name)
    logger.setLevel(_level(log_level))
    logger.handlers.clear()
    stamp = EnvironmentFilter(environment)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level(console_level))
    console_handler.addFilter(stamp)
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    path = resolve_log_file(config, log_file)
    if path is not None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.addFilter(stamp)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """
    Time one directory operation and log its outcome.

    Callers may set `detail` inside the block (for example "8 records");
    it is appended to the completion message.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.detail: Optional[str] = None
        self.duration: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._started

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {self.duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        suffix = f" ({self.detail})" if self.detail else ""
        self.logger.info(f"Completed {self.operation} in {self.duration:.2f}s{suffix}")
        return False
