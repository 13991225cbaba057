"""
Factory for building a ready-to-use client from configuration.
"""

from typing import Optional

from requests.adapters import HTTPAdapter

from ..config.models import HttpConfig
from .client import AuthenticatingHttpClient, DiagnosticSink
from .executor import CrawlSession
from .redirects import never_follow


def create_session(config: HttpConfig) -> CrawlSession:
    """Create a CrawlSession configured for crawling."""
    session = CrawlSession(timeout=config.timeout, max_redirects=config.max_redirects)
    session.verify = config.verify_tls

    # Transport errors are reported to the caller, never retried here
    adapter = HTTPAdapter(
        pool_connections=config.pool_maxsize,
        pool_maxsize=config.pool_maxsize,
        max_retries=0,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


def create_client(
    config: Optional[HttpConfig] = None,
    logger: Optional[DiagnosticSink] = None,
) -> AuthenticatingHttpClient:
    """Create an AuthenticatingHttpClient backed by a CrawlSession.

    Args:
        config: HTTP settings; defaults are used when omitted
        logger: Optional diagnostic sink passed to the client

    Returns:
        The configured client
    """
    config = config or HttpConfig()
    client = AuthenticatingHttpClient(
        create_session(config),
        user_agent=config.user_agent,
        username=config.username,
        password=config.password,
        logger=logger,
    )
    if not config.follow_redirects:
        client.set_check_redirect(never_follow)
    return client
