"""
Configuration package for crawlclient.

- models: pydantic models for HTTP and logging settings
- manager: TOML + environment configuration loading
"""

from .manager import ConfigManager, default_config_file
from .models import (
    CrawlClientConfig,
    CrawlClientSettings,
    HttpConfig,
    LoggingSettings,
    LogLevel,
)

__all__ = [
    "ConfigManager",
    "default_config_file",
    "CrawlClientConfig",
    "CrawlClientSettings",
    "HttpConfig",
    "LoggingSettings",
    "LogLevel",
]
