"""
Tests for the Fetcher module.
"""

import pytest
import requests
from unittest.mock import Mock, patch

from wpjson_mapper.errors import NetworkError
from wpjson_mapper.fetcher import API_LINK_REL, WpJsonFetcher


def make_response(content=b"{}", status_code=200, headers=None, text="", links=None):
    response = Mock()
    response.content = content
    response.status_code = status_code
    response.headers = headers or {}
    response.text = text
    response.links = links or {}
    return response


class TestWpJsonFetcher:
    """Test cases for WpJsonFetcher class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.fetcher = WpJsonFetcher()

    def test_init(self):
        """Test fetcher initialization."""
        fetcher = WpJsonFetcher(timeout=15, verbose=True)
        assert fetcher.timeout == 15
        assert fetcher.verbose is True
        assert isinstance(fetcher.session, requests.Session)

    def test_default_timeout_is_none(self):
        assert self.fetcher.timeout is None

    def test_build_api_url(self):
        assert WpJsonFetcher.build_api_url("https://example.com") == "https://example.com/wp-json"
        assert WpJsonFetcher.build_api_url("https://example.com/") == "https://example.com/wp-json"
        assert WpJsonFetcher.build_api_url("https://example.com///") == "https://example.com/wp-json"
        assert (
            WpJsonFetcher.build_api_url("https://example.com/blog/")
            == "https://example.com/blog/wp-json"
        )

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_success(self, mock_get):
        """Test fetching a wp-json document."""
        mock_get.return_value = make_response(content=b'{"name": "Site"}')

        body = self.fetcher.fetch("https://example.com/")

        assert body == b'{"name": "Site"}'
        mock_get.assert_called_once_with("https://example.com/wp-json", timeout=None)

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_passes_timeout(self, mock_get):
        mock_get.return_value = make_response()

        WpJsonFetcher(timeout=5).fetch("https://example.com")

        mock_get.assert_called_once_with("https://example.com/wp-json", timeout=5)

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_non_2xx_returns_body(self, mock_get):
        """Test that HTTP errors are not raised by the fetcher."""
        mock_get.return_value = make_response(content=b"Not Found", status_code=404)

        assert self.fetcher.fetch("https://example.com") == b"Not Found"

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_network_error(self, mock_get):
        """Test error handling during fetch."""
        mock_get.side_effect = requests.ConnectionError("Connection refused")

        with pytest.raises(NetworkError) as exc_info:
            self.fetcher.fetch("https://example.com")

        assert "Connection refused" in str(exc_info.value)
        assert "https://example.com/wp-json" in str(exc_info.value)

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_verbose_reports_status(self, mock_get, capsys):
        mock_get.return_value = make_response(status_code=500)

        WpJsonFetcher(verbose=True).fetch("https://example.com")

        output = capsys.readouterr().out
        assert "Fetching: https://example.com/wp-json" in output
        assert "HTTP 500" in output

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_fetch_url_not_normalized(self, mock_get):
        mock_get.return_value = make_response()

        self.fetcher.fetch_url("https://example.com/?rest_route=/")

        mock_get.assert_called_once_with("https://example.com/?rest_route=/", timeout=None)

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_from_link_header(self, mock_get):
        """Test API root discovery from the Link header."""
        mock_get.return_value = make_response(
            links={API_LINK_REL: {"url": "https://example.com/?rest_route=/", "rel": API_LINK_REL}}
        )

        root = self.fetcher.discover_api_root("https://example.com")

        assert root == "https://example.com/?rest_route=/"
        mock_get.assert_called_once_with("https://example.com/", timeout=None)

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_from_link_tag(self, mock_get):
        """Test API root discovery from the HTML head."""
        html = """
        <html>
            <head>
                <link rel="stylesheet" href="/style.css">
                <link rel="https://api.w.org/" href="https://example.com/api/">
            </head>
            <body></body>
        </html>
        """
        mock_get.return_value = make_response(
            headers={"content-type": "text/html; charset=UTF-8"}, text=html
        )

        assert self.fetcher.discover_api_root("https://example.com") == "https://example.com/api/"

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_nothing_advertised(self, mock_get):
        mock_get.return_value = make_response(
            headers={"content-type": "text/html"},
            text="<html><head><link rel='icon' href='/favicon.ico'></head></html>",
        )

        assert self.fetcher.discover_api_root("https://example.com") is None

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_non_html(self, mock_get):
        mock_get.return_value = make_response(headers={"content-type": "application/json"})

        assert self.fetcher.discover_api_root("https://example.com") is None

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_network_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("timed out")

        with pytest.raises(NetworkError):
            self.fetcher.discover_api_root("https://example.com")

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_relative_link_tag(self, mock_get):
        """Test that a relative API root is resolved against the home page."""
        html = '<html><head><link rel="https://api.w.org/" href="/wp-json/"></head></html>'
        mock_get.return_value = make_response(headers={"content-type": "text/html"}, text=html)

        root = self.fetcher.discover_api_root("https://example.com/blog/")

        assert root == "https://example.com/wp-json/"

    @patch("wpjson_mapper.fetcher.requests.Session.get")
    def test_discover_relative_link_header(self, mock_get):
        mock_get.return_value = make_response(
            links={API_LINK_REL: {"url": "api/", "rel": API_LINK_REL}}
        )

        root = self.fetcher.discover_api_root("https://example.com/blog")

        assert root == "https://example.com/blog/api/"
