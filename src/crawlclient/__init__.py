"""
crawlclient: HTTP client core for web crawlers.

Issues one GET request per call, answers HTTP 401 Basic challenges with the
configured credentials, and lets the owning crawler control how redirects
are followed.

Architecture Overview:
- HTTP: the authenticating client, executor capabilities and redirect policies
- Config: pydantic configuration models and the TOML/env configuration manager
- Logging: structured logging setup shared by the client and the CLI
- CLI: command-line interface for one-off fetches
"""

__version__ = "0.2.0"

from .exceptions import CrawlClientError
from .http import AuthenticatingHttpClient, CrawlSession, create_client

__all__ = [
    "__version__",
    "AuthenticatingHttpClient",
    "CrawlSession",
    "CrawlClientError",
    "create_client",
]
