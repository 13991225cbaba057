"""
Standardized error codes and message templates.

Keeps error wording consistent across the crawlclient exceptions.
"""


class ErrorCodes:
    """Error codes for programmatic handling."""

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_VALIDATION = "CONFIG_VALIDATION"
    CONFIG_FILE = "CONFIG_FILE"

    AUTH_SCHEME_UNSUPPORTED = "AUTH_SCHEME_UNSUPPORTED"
    REDIRECT_LIMIT = "REDIRECT_LIMIT"
    REDIRECT_OFF_HOST = "REDIRECT_OFF_HOST"


class ErrorMessageTemplates:
    """Message templates shared by the exception classes."""

    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"
    CONFIG_FILE_ERROR = "Configuration file error: {file_path} - {details}"

    UNSUPPORTED_AUTH_SCHEME = "Unsupported WWW-Authenticate method: {scheme}"
    TOO_MANY_REDIRECTS = "Stopped after {limit} redirects"
    OFF_HOST_REDIRECT = "Refusing redirect from {origin_host} to {target_host}"
