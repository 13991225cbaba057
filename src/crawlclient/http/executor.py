"""
Request executors used by the HTTP client.

The client only needs something that can send a prepared request. Setting a
redirect policy is an optional extra capability that executors may or may
not offer; CrawlSession, the default executor, offers both.
"""

import logging
from typing import Any, List, Optional, Protocol, runtime_checkable

import requests

from ..constants import HttpConstants
from ..exceptions.http import RedirectBlockedError, UseLastResponse
from .redirects import RedirectPolicy


@runtime_checkable
class RequestExecutor(Protocol):
    """Anything that can send a prepared request.

    Transport failures are raised as ``requests.RequestException``.
    """

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        ...


@runtime_checkable
class RedirectPolicySettable(Protocol):
    """Executors that let the caller decide whether a redirect is followed."""

    def set_check_redirect(self, policy: Optional[RedirectPolicy]) -> None:
        ...


class CrawlSession(requests.Session):
    """requests.Session with a default timeout and pluggable redirect policy.

    Redirects are always followed here, one hop at a time, rather than by
    ``requests.Session.resolve_redirects``. ``redirect_limit`` caps the number
    of hops; the inherited ``max_redirects`` is left at the requests default
    because requests also consults it while computing ``Response.next``,
    which would refuse every redirect when the cap is zero.
    """

    def __init__(
        self,
        timeout: float = HttpConstants.DEFAULT_TIMEOUT_SECONDS,
        max_redirects: int = HttpConstants.DEFAULT_MAX_REDIRECTS,
    ):
        super().__init__()
        self.timeout = timeout
        self.redirect_limit = max_redirects
        self.check_redirect: Optional[RedirectPolicy] = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def set_check_redirect(self, policy: Optional[RedirectPolicy]) -> None:
        """Install a redirect policy, or restore default following with None."""
        self.check_redirect = policy

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        # Requests prepared outside the session have no cookies from our jar yet
        if "Cookie" not in request.headers:
            request.prepare_cookies(self.cookies)

        if not kwargs.get("allow_redirects", True):
            return super().send(request, **kwargs)

        kwargs["allow_redirects"] = False
        return self._follow_redirects(request, kwargs)

    def _follow_redirects(
        self, request: requests.PreparedRequest, kwargs: dict
    ) -> requests.Response:
        """Follow redirects one hop at a time, consulting the policy before each."""
        via: List[requests.PreparedRequest] = [request]
        history: List[requests.Response] = []

        response = super().send(request, **kwargs)
        while response.is_redirect and response.next is not None:
            next_request = response.next

            if self.check_redirect is not None:
                try:
                    self.check_redirect(next_request, list(via))
                except UseLastResponse:
                    self.logger.debug(f"Redirect policy kept response from {response.url}")
                    break
                except Exception as exc:
                    raise RedirectBlockedError(
                        f"Redirect to {next_request.url} refused: {exc}",
                        response=response,
                        request=next_request,
                    ) from exc

            if len(history) >= self.redirect_limit:
                raise requests.TooManyRedirects(
                    f"Exceeded {self.redirect_limit} redirects.", response=response
                )

            self.logger.debug(f"Following redirect {response.status_code} -> {next_request.url}")
            history.append(response)
            via.append(next_request)
            response = super().send(next_request, **kwargs)

        response.history = history
        return response
