"""
Configuration-related exceptions.

All exceptions related to configuration parsing, validation, and management.
"""

from typing import Any, List

from .base import CrawlClientError, ExceptionContext
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(CrawlClientError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        context = ExceptionContext(
            help_text=f"Check the configuration for '{field}' and make sure it is {expected}",
            error_code=ErrorCodes.CONFIG_INVALID,
            user_action="Run 'crawlclient config --show' to inspect the effective configuration",
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        context = ExceptionContext(
            help_text="Check your configuration file and environment variables and fix the errors listed above",
            error_code=ErrorCodes.CONFIG_VALIDATION,
            user_action="Run 'crawlclient config --init' to write a fresh default configuration",
        )
        super().__init__(message, context)
