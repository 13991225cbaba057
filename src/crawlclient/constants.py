"""
Application constants and default values.

This module centralizes magic numbers and hardcoded values used by the
HTTP client, its configuration and the logging setup.
"""


class HttpConstants:
    """Constants for outgoing HTTP requests."""

    DEFAULT_USER_AGENT = "crawlclient/0.2 (+https://github.com/crawlclient)"

    # Status codes and headers involved in the authentication handshake
    HTTP_UNAUTHORIZED = 401
    CHALLENGE_HEADER = "WWW-Authenticate"
    AUTHORIZATION_HEADER = "Authorization"
    USER_AGENT_HEADER = "User-Agent"
    BASIC_SCHEME = "basic"

    # Transport defaults
    DEFAULT_TIMEOUT_SECONDS = 30.0
    MAX_TIMEOUT_SECONDS = 600.0
    DEFAULT_MAX_REDIRECTS = 10
    MAX_REDIRECTS_LIMIT = 100
    DEFAULT_POOL_MAXSIZE = 10


class LoggingConstants:
    """Constants for the logging subsystem."""

    DEFAULT_SERVICE_NAME = "crawlclient"
    DEFAULT_LOG_FILE = "logs/crawlclient.log"
    DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
    MIN_LOG_FILE_SIZE_BYTES = 1024
    DEFAULT_LOG_BACKUP_COUNT = 5


class ConfigConstants:
    """Constants for configuration discovery."""

    CONFIG_DIR_NAME = "crawlclient"
    CONFIG_FILE_NAME = "config.toml"
