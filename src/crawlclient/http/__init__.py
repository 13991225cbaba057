"""HTTP client components."""

from .client import AuthenticatingHttpClient, DiagnosticSink
from .executor import CrawlSession, RedirectPolicySettable, RequestExecutor
from .factory import create_client, create_session
from .redirects import RedirectPolicy, limit_redirects, never_follow, same_host_only

__all__ = [
    "AuthenticatingHttpClient",
    "DiagnosticSink",
    "CrawlSession",
    "RequestExecutor",
    "RedirectPolicySettable",
    "RedirectPolicy",
    "create_client",
    "create_session",
    "never_follow",
    "limit_redirects",
    "same_host_only",
]
