"""
Redirect policies for CrawlSession.

A redirect policy is called before each redirect is followed, with the
request about to be sent and the chain of requests already sent (oldest
first). Returning normally lets the redirect proceed. Raising
``UseLastResponse`` stops following and hands the redirect response back to
the caller. Raising anything else aborts the request with
``RedirectBlockedError``.
"""

from typing import Callable, List
from urllib.parse import urlsplit

import requests

from ..exceptions.http import OffHostRedirectError, TooManyRedirectsError, UseLastResponse

RedirectPolicy = Callable[[requests.PreparedRequest, List[requests.PreparedRequest]], None]


def never_follow(request: requests.PreparedRequest, via: List[requests.PreparedRequest]) -> None:
    """Do not follow any redirect; the caller gets the 3xx response."""
    raise UseLastResponse()


def limit_redirects(limit: int) -> RedirectPolicy:
    """Build a policy that refuses to follow more than ``limit`` redirects."""
    if limit < 0:
        raise ValueError("limit must be >= 0")

    def policy(request: requests.PreparedRequest, via: List[requests.PreparedRequest]) -> None:
        # via always holds the original request, so n hops means len(via) == n + 1
        if len(via) > limit:
            raise TooManyRedirectsError(limit)

    return policy


def same_host_only(request: requests.PreparedRequest, via: List[requests.PreparedRequest]) -> None:
    """Refuse redirects that leave the host of the original request."""
    origin_host = urlsplit(via[0].url).hostname or ""
    target_host = urlsplit(request.url).hostname or ""
    if origin_host.lower() != target_host.lower():
        raise OffHostRedirectError(origin_host, target_host)
