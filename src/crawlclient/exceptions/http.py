"""
HTTP client exceptions.

Covers authentication negotiation and redirect handling. Transport failures
are reported with the ``requests`` exception hierarchy so callers can catch
every network-level problem through ``requests.RequestException``.
"""

from typing import Optional

import requests

from .base import CrawlClientError, ExceptionContext
from .templates import ErrorCodes, ErrorMessageTemplates


class HttpClientError(CrawlClientError):
    """Base class for HTTP client errors that are not transport failures."""
    pass


class UnsupportedAuthSchemeError(HttpClientError):
    """Raised when a server challenges with a scheme other than Basic."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        context = ExceptionContext(
            help_text="Only HTTP Basic authentication is supported",
            error_code=ErrorCodes.AUTH_SCHEME_UNSUPPORTED,
            context={"scheme": scheme},
        )
        super().__init__(
            ErrorMessageTemplates.UNSUPPORTED_AUTH_SCHEME.format(scheme=scheme), context
        )


class RedirectPolicyError(HttpClientError):
    """Base class for errors raised by redirect policies to refuse a redirect."""
    pass


class TooManyRedirectsError(RedirectPolicyError):
    """Raised by a policy when the redirect chain reaches its limit."""

    def __init__(self, limit: int):
        self.limit = limit
        context = ExceptionContext(
            error_code=ErrorCodes.REDIRECT_LIMIT,
            context={"limit": limit},
        )
        super().__init__(ErrorMessageTemplates.TOO_MANY_REDIRECTS.format(limit=limit), context)


class OffHostRedirectError(RedirectPolicyError):
    """Raised by a policy when a redirect leaves the original host."""

    def __init__(self, origin_host: str, target_host: str):
        self.origin_host = origin_host
        self.target_host = target_host
        context = ExceptionContext(
            error_code=ErrorCodes.REDIRECT_OFF_HOST,
            context={"origin_host": origin_host, "target_host": target_host},
        )
        super().__init__(
            ErrorMessageTemplates.OFF_HOST_REDIRECT.format(
                origin_host=origin_host, target_host=target_host
            ),
            context,
        )


class UseLastResponse(Exception):
    """Raised by a redirect policy to stop following and keep the redirect response."""


class RedirectBlockedError(requests.RequestException):
    """A redirect policy refused to follow a redirect.

    ``response`` is the last redirect response received and ``request`` is the
    request the policy refused. The policy's own exception is the ``__cause__``.
    """

    def __init__(self, message: str, *, response: Optional[requests.Response] = None,
                 request: Optional[requests.PreparedRequest] = None):
        super().__init__(message, response=response, request=request)
