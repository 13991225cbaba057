"""
Bridge between the configuration models and the logging package.
"""

from typing import Optional

from . import __version__
from .config.models import LoggingSettings
from .logging import LoggingConfig, configure_logging


def logging_config_from_settings(
    settings: LoggingSettings,
    level_override: Optional[str] = None,
    service_name: str = "crawlclient",
) -> LoggingConfig:
    """Translate validated logging settings into a LoggingConfig."""
    return LoggingConfig(
        level=level_override or settings.level.value,
        format_type=settings.format,
        output=list(settings.output),
        file_path=settings.file_path,
        max_file_size=settings.max_file_size,
        backup_count=settings.backup_count,
        service_name=service_name,
        version=__version__,
    )


def configure_logging_from_settings(
    settings: LoggingSettings,
    level_override: Optional[str] = None,
    service_name: str = "crawlclient",
) -> LoggingConfig:
    """Configure global logging from settings and return the config used."""
    config = logging_config_from_settings(settings, level_override, service_name)
    configure_logging(config)
    return config
