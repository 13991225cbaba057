"""
Unit tests for the authenticating HTTP client.
"""

import base64
import threading
from unittest.mock import Mock, patch

import pytest
import requests

from crawlclient.http.client import AuthenticatingHttpClient
from crawlclient.http.redirects import never_follow
from crawlclient.exceptions import UnsupportedAuthSchemeError
from crawlclient.logging import ClientLogger

URL = "https://example.com/private"
BASIC_USER_PASS = "Basic " + base64.b64encode(b"user:pass").decode()


@pytest.mark.unit
class TestClientInitialization:
    """Test construction and identity handling."""

    def test_credentials_default_to_empty(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), user_agent="bot/1.0")

        assert client.username == ""
        assert client.password == ""
        assert client.has_credentials is False

    def test_none_credentials_normalised(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", None, None)

        assert client.username == ""
        assert client.password == ""

    def test_credentials_are_read_only(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "user", "pass")

        with pytest.raises(AttributeError):
            client.username = "other"
        with pytest.raises(AttributeError):
            client.password = "other"

    def test_default_logger_is_client_logger(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0")

        assert isinstance(client.logger, ClientLogger)


@pytest.mark.unit
class TestRequestUrl:
    """Test the request/challenge/retry flow."""

    def test_non_401_returned_unchanged(self, fake_executor, make_response):
        ok = make_response(200)
        executor = fake_executor(ok)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is ok
        assert len(executor.sent) == 1

    @pytest.mark.parametrize("status", [200, 204, 301, 403, 404, 500])
    def test_single_send_for_other_statuses(self, status, fake_executor, make_response):
        response = make_response(status, {"WWW-Authenticate": 'Basic realm="x"'})
        executor = fake_executor(response)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is response
        assert len(executor.sent) == 1

    def test_request_is_get_with_user_agent(self, fake_executor, make_response):
        executor = fake_executor(make_response(200))
        client = AuthenticatingHttpClient(executor, "bot/1.0")

        client.request_url(URL)

        sent = executor.sent[0]
        assert sent.method == "GET"
        assert sent.url == URL
        assert sent.headers["User-Agent"] == "bot/1.0"
        assert "Authorization" not in sent.headers

    def test_401_without_challenge(self, fake_executor, make_response):
        denied = make_response(401)
        executor = fake_executor(denied)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is denied
        assert len(executor.sent) == 1

    def test_401_with_blank_challenge(self, fake_executor, make_response):
        denied = make_response(401, {"WWW-Authenticate": "  "})
        executor = fake_executor(denied)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is denied
        assert len(executor.sent) == 1

    def test_basic_challenge_retries_with_credentials(self, fake_executor, make_response):
        denied = make_response(401, {"WWW-Authenticate": 'Basic realm="x"'})
        ok = make_response(200)
        executor = fake_executor(denied, ok)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is ok
        assert len(executor.sent) == 2

        retry = executor.sent[1]
        assert retry.method == "GET"
        assert retry.url == URL
        assert retry.headers["Authorization"] == BASIC_USER_PASS
        assert retry.headers["User-Agent"] == "bot/1.0"

    def test_retry_uses_fresh_request(self, fake_executor, make_response):
        executor = fake_executor(
            make_response(401, {"WWW-Authenticate": "Basic"}), make_response(200)
        )
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        client.request_url(URL)

        first, retry = executor.sent
        assert first is not retry
        assert "Authorization" not in first.headers

    @pytest.mark.parametrize("challenge", ["basic", "BASIC realm=x", "Basic", 'bAsIc realm="a b"'])
    def test_scheme_is_case_insensitive(self, challenge, fake_executor, make_response):
        executor = fake_executor(
            make_response(401, {"WWW-Authenticate": challenge}), make_response(200)
        )
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL).status_code == 200
        assert executor.sent[1].headers["Authorization"] == BASIC_USER_PASS

    def test_second_401_is_returned(self, fake_executor, make_response):
        denied = make_response(401, {"WWW-Authenticate": 'Basic realm="x"'})
        denied_again = make_response(401, {"WWW-Authenticate": 'Basic realm="x"'})
        executor = fake_executor(denied, denied_again)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        assert client.request_url(URL) is denied_again
        assert len(executor.sent) == 2

    def test_digest_challenge_not_supported(self, fake_executor, make_response, sink):
        denied = make_response(401, {"WWW-Authenticate": 'Digest realm="x", nonce="abc"'})
        executor = fake_executor(denied)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass", logger=sink)

        assert client.request_url(URL) is denied
        assert len(executor.sent) == 1
        assert sink.messages == [("info", "Unsupported WWW-Authenticate method: Digest")]

    def test_no_credentials_no_retry(self, fake_executor, make_response, sink):
        denied = make_response(401, {"WWW-Authenticate": 'Basic realm="x"'})
        executor = fake_executor(denied)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "", "", logger=sink)

        assert client.request_url(URL) is denied
        assert len(executor.sent) == 1
        assert sink.messages == []

    def test_password_only_still_retries(self, fake_executor, make_response):
        executor = fake_executor(
            make_response(401, {"WWW-Authenticate": "Basic"}), make_response(200)
        )
        client = AuthenticatingHttpClient(executor, "bot/1.0", "", "token")

        client.request_url(URL)

        expected = "Basic " + base64.b64encode(b":token").decode()
        assert executor.sent[1].headers["Authorization"] == expected

    def test_transport_error_on_first_attempt(self, fake_executor):
        error = requests.ConnectionError("connection refused")
        executor = fake_executor(error)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        with pytest.raises(requests.ConnectionError) as exc_info:
            client.request_url(URL)

        assert exc_info.value is error
        assert len(executor.sent) == 1

    def test_transport_error_on_retry(self, fake_executor, make_response):
        error = requests.Timeout("read timed out")
        executor = fake_executor(make_response(401, {"WWW-Authenticate": "Basic"}), error)
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        with pytest.raises(requests.Timeout):
            client.request_url(URL)

        assert len(executor.sent) == 2

    def test_transport_error_keeps_response(self, fake_executor, make_response):
        partial = make_response(502)
        executor = fake_executor(requests.HTTPError("bad gateway", response=partial))
        client = AuthenticatingHttpClient(executor, "bot/1.0")

        with pytest.raises(requests.HTTPError) as exc_info:
            client.request_url(URL)

        assert exc_info.value.response is partial

    def test_invalid_url_raises_request_exception(self, fake_executor):
        executor = fake_executor()
        client = AuthenticatingHttpClient(executor, "bot/1.0")

        with pytest.raises(requests.RequestException):
            client.request_url("not a url")

        assert executor.sent == []


@pytest.mark.unit
class TestAuthHeader:
    """Test Authorization header construction and caching."""

    def test_add_auth_header_basic(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "user", "pass")
        request = client._make_request(URL)

        client._add_auth_header(request, 'Basic realm="x"')

        assert request.headers["Authorization"] == BASIC_USER_PASS

    def test_add_auth_header_unsupported(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "user", "pass")
        request = client._make_request(URL)

        with pytest.raises(UnsupportedAuthSchemeError) as exc_info:
            client._add_auth_header(request, "Bearer realm=api")

        assert exc_info.value.scheme == "Bearer"
        assert "Bearer" in exc_info.value.message
        assert "Authorization" not in request.headers

    def test_basic_auth_string(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "user", "pass")

        assert client._get_basic_auth_str() == "dXNlcjpwYXNz"

    def test_basic_auth_string_non_ascii(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "josé", "päss")

        expected = base64.b64encode("josé:päss".encode("utf-8")).decode()
        assert client._get_basic_auth_str() == expected

    def test_basic_auth_string_memoized(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0", "user", "pass")

        with patch("crawlclient.http.client.base64.b64encode", wraps=base64.b64encode) as encode:
            first = client._get_basic_auth_str()
            second = client._get_basic_auth_str()

        assert first == second
        assert encode.call_count == 1

    def test_cache_reused_across_requests(self, fake_executor, make_response):
        challenge = {"WWW-Authenticate": "Basic"}
        executor = fake_executor(
            make_response(401, challenge), make_response(200),
            make_response(401, challenge), make_response(200),
        )
        client = AuthenticatingHttpClient(executor, "bot/1.0", "user", "pass")

        with patch("crawlclient.http.client.base64.b64encode", wraps=base64.b64encode) as encode:
            client.request_url(URL)
            client.request_url(URL)

        assert encode.call_count == 1
        assert executor.sent[1].headers["Authorization"] == executor.sent[3].headers["Authorization"]

    def test_concurrent_requests_share_one_encoding(self, make_response):
        class ChallengingExecutor:
            def send(self, request, **kwargs):
                if "Authorization" in request.headers:
                    return make_response(200, content=request.headers["Authorization"].encode())
                return make_response(401, {"WWW-Authenticate": 'Basic realm="x"'})

        client = AuthenticatingHttpClient(ChallengingExecutor(), "bot/1.0", "user", "pass")
        results = []
        lock = threading.Lock()

        def worker():
            response = client.request_url(URL)
            with lock:
                results.append(response.content.decode())

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [BASIC_USER_PASS] * 16
        assert client._get_basic_auth_str() == "dXNlcjpwYXNz"


@pytest.mark.unit
class TestSetCheckRedirect:
    """Test redirect policy installation."""

    def test_installs_on_capable_executor(self, settable_executor, sink):
        executor = settable_executor()
        client = AuthenticatingHttpClient(executor, "bot/1.0", logger=sink)

        client.set_check_redirect(never_follow)

        assert executor.policy is never_follow
        assert sink.messages == []

    def test_noop_on_plain_executor(self, fake_executor, make_response, sink):
        ok = make_response(200)
        executor = fake_executor(ok)
        client = AuthenticatingHttpClient(executor, "bot/1.0", logger=sink)

        client.set_check_redirect(never_follow)

        assert sink.levels() == ["error"]
        assert "FakeExecutor" in sink.messages[0][1]
        assert client.request_url(URL) is ok
        assert len(executor.sent) == 1


@pytest.mark.unit
class TestClientLifecycle:
    """Test closing the client and its executor."""

    def test_close_closes_executor(self):
        executor = Mock()
        client = AuthenticatingHttpClient(executor, "bot/1.0")

        client.close()

        executor.close.assert_called_once()

    def test_close_without_executor_close(self, fake_executor):
        client = AuthenticatingHttpClient(fake_executor(), "bot/1.0")

        client.close()

    def test_context_manager(self):
        executor = Mock()

        with AuthenticatingHttpClient(executor, "bot/1.0") as client:
            assert client.executor is executor

        executor.close.assert_called_once()
