"""
crawlclient Logging Package

Structured logging with configurable outputs, shared by the HTTP client and
the CLI:
- formatters: Log formatting (JSON, console, rich)
- loggers: ClientLogger with correlation IDs
- config: Logging configuration
- manager: Centralized logging setup and management
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter
from .loggers import ClientLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "create_default_config",
    "logging_manager",
    "ClientLogger",
    "get_logger",
    "StructuredFormatter",
]
