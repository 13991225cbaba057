"""
Authenticating HTTP client for crawlers.

AuthenticatingHttpClient sends one GET per call through an injected
executor. When the server answers 401 with a Basic challenge and
credentials are configured, the request is sent once more with an
Authorization header. Everything else about the response is left to the
caller: a 401 is data, not an error.
"""

import base64
from typing import Optional, Protocol

import requests

from ..constants import HttpConstants
from ..exceptions.http import UnsupportedAuthSchemeError
from ..logging import get_logger
from .executor import RedirectPolicySettable, RequestExecutor
from .redirects import RedirectPolicy


class DiagnosticSink(Protocol):
    """Write-only destination for non-fatal client diagnostics."""

    def info(self, msg: str) -> None:
        ...

    def error(self, msg: str) -> None:
        ...


class AuthenticatingHttpClient:
    """HTTP client with transparent HTTP Basic challenge handling."""

    def __init__(
        self,
        executor: RequestExecutor,
        user_agent: str = HttpConstants.DEFAULT_USER_AGENT,
        username: Optional[str] = "",
        password: Optional[str] = "",
        logger: Optional[DiagnosticSink] = None,
    ):
        """Initialize the client.

        Args:
            executor: Object that sends prepared requests (usually a CrawlSession)
            user_agent: User-Agent header sent with every request
            username: HTTP Basic username, empty for none
            password: HTTP Basic password, empty for none
            logger: Diagnostic sink; defaults to a ClientLogger for this module
        """
        self.executor = executor
        self._user_agent = user_agent
        self._username = username or ""
        self._password = password or ""
        self._basic_auth_str = ""
        self.logger = logger or get_logger(f"{__name__}.{self.__class__.__name__}")

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    @property
    def has_credentials(self) -> bool:
        return bool(self._username or self._password)

    def request_url(self, url: str) -> requests.Response:
        """Request the URL given, answering a Basic auth challenge if possible.

        Args:
            url: Absolute URL to GET

        Returns:
            The response to the last request sent. This is the original 401
            when the challenge cannot be answered.

        Raises:
            requests.RequestException: The executor could not complete an
                exchange, on either attempt.
        """
        request = self._make_request(url)
        response = self.executor.send(request)

        if response.status_code != HttpConstants.HTTP_UNAUTHORIZED:
            return response

        challenge = response.headers.get(HttpConstants.CHALLENGE_HEADER, "").strip()
        # No request for auth
        if not challenge:
            return response
        # Nothing to offer
        if not self.has_credentials:
            return response

        retry_request = self._make_request(url)
        try:
            self._add_auth_header(retry_request, challenge)
        except UnsupportedAuthSchemeError as e:
            self.logger.info(e.message)
            return response

        return self.executor.send(retry_request)

    def set_check_redirect(self, policy: Optional[RedirectPolicy]) -> None:
        """Install a redirect policy on the executor if it supports one.

        Executors without the capability are left untouched and the failure
        is only logged.
        """
        if not isinstance(self.executor, RedirectPolicySettable):
            self.logger.error(
                f"Unable to set redirect policy: {type(self.executor).__name__} "
                "does not support redirect policies."
            )
            return
        self.executor.set_check_redirect(policy)

    def _make_request(self, url: str, method: str = "GET") -> requests.PreparedRequest:
        """Build a request with our preferred options."""
        return requests.Request(
            method,
            str(url),
            headers={HttpConstants.USER_AGENT_HEADER: self._user_agent},
        ).prepare()

    def _add_auth_header(self, request: requests.PreparedRequest, challenge: str) -> None:
        """Add an Authorization header answering the challenge."""
        scheme = challenge.split(" ", 1)[0]
        if scheme.lower() != HttpConstants.BASIC_SCHEME:
            raise UnsupportedAuthSchemeError(scheme)
        request.headers[HttpConstants.AUTHORIZATION_HEADER] = f"Basic {self._get_basic_auth_str()}"

    def _get_basic_auth_str(self) -> str:
        """Build the base64-encoded username/password string once."""
        if self._basic_auth_str:
            return self._basic_auth_str
        userpass = f"{self._username}:{self._password}".encode("utf-8")
        # Concurrent first calls may both compute; the value is identical
        self._basic_auth_str = base64.b64encode(userpass).decode("ascii")
        return self._basic_auth_str

    def close(self) -> None:
        """Close the executor if it holds resources."""
        close = getattr(self.executor, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "AuthenticatingHttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
