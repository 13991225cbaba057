"""
crawlclient Exception Hierarchy

Exception Hierarchy:
    CrawlClientError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    └── HttpClientError
        ├── UnsupportedAuthSchemeError
        └── RedirectPolicyError
            ├── TooManyRedirectsError
            └── OffHostRedirectError

    UseLastResponse        (redirect policy stop signal)
    RedirectBlockedError   (requests.RequestException, transport level)

This package provides focused exception components:
- base: Core CrawlClientError base class
- config: Configuration-related exceptions
- http: Authentication and redirect exceptions
"""

from .base import CrawlClientError, ExceptionContext

from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .http import (
    HttpClientError,
    OffHostRedirectError,
    RedirectBlockedError,
    RedirectPolicyError,
    TooManyRedirectsError,
    UnsupportedAuthSchemeError,
    UseLastResponse,
)

__all__ = [
    # Base
    "CrawlClientError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    # HTTP
    "HttpClientError",
    "UnsupportedAuthSchemeError",
    "RedirectPolicyError",
    "TooManyRedirectsError",
    "OffHostRedirectError",
    "UseLastResponse",
    "RedirectBlockedError",
]
