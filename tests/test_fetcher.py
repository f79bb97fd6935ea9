"""Tests for page fetching and title lookup over HTTP."""

from unittest.mock import Mock, patch

import pytest
import requests

from clippy_ai.config import USER_AGENT
from clippy_ai.exceptions import HttpStatusError, NetworkError
from clippy_ai.fetcher import fetch_html, fetch_title, make_session


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


class TestMakeSession:
    def test_user_agent_and_tls(self):
        s = make_session()
        assert s.headers["User-Agent"] == USER_AGENT
        assert s.verify is True


class TestFetchHtml:
    def test_get_with_timeout(self, session, response_factory):
        session.request.return_value = response_factory(text="<p>hi</p>")

        assert fetch_html("https://example.com", timeout=10, session=session) == "<p>hi</p>"
        session.request.assert_called_once_with("GET", "https://example.com", timeout=10)

    def test_missing_charset_decodes_as_utf8(self, session, response_factory):
        session.request.return_value = response_factory(text="<title>Café</title>")
        assert "Café" in fetch_html("https://example.com", session=session)

    def test_timeout_is_network_error(self, session):
        session.request.side_effect = requests.exceptions.ReadTimeout("slow")
        with pytest.raises(NetworkError, match="timed out after 10s"):
            fetch_html("https://example.com", timeout=10, session=session)

    def test_tls_failure_is_network_error(self, session):
        session.request.side_effect = requests.exceptions.SSLError("bad cert")
        with pytest.raises(NetworkError, match="TLS error"):
            fetch_html("https://self-signed.example", session=session)

    def test_connection_failure_is_network_error(self, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(NetworkError, match="Failed to fetch"):
            fetch_html("https://down.example", session=session)

    def test_error_status(self, session, response_factory):
        session.request.return_value = response_factory(
            status=404, text="nope", reason="Not Found"
        )
        with pytest.raises(HttpStatusError) as exc_info:
            fetch_html("https://example.com/missing", session=session)
        assert exc_info.value.status_code == 404
        assert "404 Not Found" in str(exc_info.value)

    def test_error_status_returned_when_unchecked(self, session, response_factory):
        session.request.return_value = response_factory(
            status=403, text="<p>Please verify you are human</p>", reason="Forbidden"
        )
        html = fetch_html("https://example.com", session=session, check_status=False)
        assert "verify you are human" in html


class TestFetchTitle:
    def test_returns_page_title(self, session, response_factory):
        session.request.return_value = response_factory(
            text="<html><head><TITLE>My &amp; Page</TITLE></head></html>"
        )
        assert fetch_title("https://example.com", session=session) == "My & Page"

    def test_falls_back_to_host(self, session, response_factory):
        session.request.return_value = response_factory(text="<body>untitled</body>")
        assert fetch_title("https://blog.example.com/post/1", session=session) == "blog.example.com"

    def test_network_errors_propagate(self, session):
        session.request.side_effect = requests.exceptions.ConnectTimeout("slow")
        with pytest.raises(NetworkError):
            fetch_title("https://example.com", session=session)

    def test_default_session_used(self, response_factory):
        with patch("clippy_ai.fetcher.make_session") as factory:
            factory.return_value.request.return_value = response_factory(
                text="<title>Hi</title>"
            )
            assert fetch_title("https://example.com") == "Hi"
        factory.return_value.request.assert_called_once_with(
            "GET", "https://example.com", timeout=10.0
        )
        factory.return_value.close.assert_called_once()

    def test_default_session_closed_on_error(self):
        with patch("clippy_ai.fetcher.make_session") as factory:
            factory.return_value.request.side_effect = requests.exceptions.ConnectionError("refused")
            with pytest.raises(NetworkError):
                fetch_title("https://example.com")
        factory.return_value.close.assert_called_once()
