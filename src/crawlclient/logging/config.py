"""
Logging configuration management.

Provides configuration classes and utilities for setting up logging.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import LoggingConstants
from ..exceptions.config import InvalidConfigurationError


class LoggingConfig:
    """Configuration for the logging system."""

    def __init__(
        self,
        level: Union[str, int] = logging.INFO,
        format_type: str = "console",  # "console", "json", "rich"
        output: Union[str, List[str]] = "console",  # "console", "file", ["console", "file"]
        file_path: Optional[Path] = None,
        max_file_size: int = LoggingConstants.DEFAULT_LOG_FILE_SIZE_BYTES,
        backup_count: int = LoggingConstants.DEFAULT_LOG_BACKUP_COUNT,
        service_name: str = LoggingConstants.DEFAULT_SERVICE_NAME,
        version: str = "unknown",
    ):
        self.level = level if isinstance(level, int) else _parse_level(level)
        self.format_type = format_type
        self.output = output if isinstance(output, list) else [output]
        self.file_path = Path(file_path) if file_path else None
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.service_name = service_name
        self.version = version


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise InvalidConfigurationError("logging.level", level, "one of DEBUG, INFO, WARNING, ERROR")
    return value


def create_default_config() -> LoggingConfig:
    """Create a default logging configuration."""
    return LoggingConfig(
        level=logging.INFO,
        format_type="console",
        output="console",
    )
