"""Unit tests for URL extraction and WSGI environ construction."""

import base64

import pytest

from urlparts.exceptions import InvalidUrlError
from urlparts.url import extract_urls, from_environ


class TestExtractUrls:
    """Test suite for extract_urls()."""

    def test_finds_urls_in_order(self, parser):
        text = (
            "Docs at https://docs.example.com/guide, code at "
            "http://www.example.co.uk/repo and nothing else."
        )
        urls = extract_urls(text, parser)

        assert [url.raw for url in urls] == [
            "https://docs.example.com/guide",
            "http://www.example.co.uk/repo",
        ]
        assert urls[1].registrable_domain == "example.co.uk"

    def test_results_are_unmaterialized(self, parser):
        urls = extract_urls("see http://example.com", parser)
        assert len(urls) == 1
        assert not urls[0].materialized
        assert urls[0].parser is parser

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("(see https://example.com/a)", "https://example.com/a"),
            ("https://example.com/wiki/Foo_(bar) end", "https://example.com/wiki/Foo_(bar)"),
            ("go to https://example.com/dir/.", "https://example.com/dir/"),
            ("HTTPS://EXAMPLE.COM/x!", "HTTPS://EXAMPLE.COM/x"),
            ("<http://example.com/q?a=1&b=2>", "http://example.com/q?a=1&b=2"),
        ],
    )
    def test_boundaries(self, text, expected):
        assert [url.raw for url in extract_urls(text)] == [expected]

    @pytest.mark.parametrize(
        "text", ["", None, "no links here", "ftp://example.com/file", "example.com"]
    )
    def test_no_urls(self, text):
        assert extract_urls(text) == []


class TestFromEnviron:
    """Test suite for from_environ()."""

    @pytest.fixture
    def environ(self):
        return {
            "HTTP_HOST": "www.example.co.uk",
            "SERVER_NAME": "backend.internal",
            "SERVER_PORT": "80",
            "REQUEST_URI": "/shop/cart?item=3",
            "wsgi.url_scheme": "http",
        }

    def test_basic_request(self, parser, environ):
        url = from_environ(environ, parser)

        assert url.materialized
        assert str(url) == "http://www.example.co.uk/shop/cart?item=3"
        assert url.port is None
        assert url.registrable_domain == "example.co.uk"
        assert url.subdomain == "www"
        assert url.resource == "/shop/cart?item=3"

    def test_https_flag(self, parser, environ):
        environ.update({"HTTPS": "on", "SERVER_PORT": "443"})
        url = from_environ(environ, parser)
        assert url.scheme == "https"
        assert url.port is None

    def test_https_off(self, parser, environ):
        environ["HTTPS"] = "off"
        assert from_environ(environ, parser).scheme == "http"

    def test_port_443_means_https(self, parser, environ):
        environ["SERVER_PORT"] = "443"
        assert from_environ(environ, parser).scheme == "https"

    def test_non_default_port_kept(self, parser, environ):
        environ["SERVER_PORT"] = "8080"
        url = from_environ(environ, parser)
        assert url.port == 8080
        assert str(url) == "http://www.example.co.uk:8080/shop/cart?item=3"

    def test_server_name_fallback(self, parser, environ):
        del environ["HTTP_HOST"]
        assert from_environ(environ, parser).host == "backend.internal"

    def test_path_info_fallback(self, parser, environ):
        del environ["REQUEST_URI"]
        environ.update(
            {"SCRIPT_NAME": "/app", "PATH_INFO": "/a b", "QUERY_STRING": "x=1"}
        )
        url = from_environ(environ, parser)
        assert url.path == "/app/a%20b"
        assert url.query == "x=1"

    def test_basic_auth(self, parser, environ):
        token = base64.b64encode(b"alice:s3cret").decode("ascii")
        environ["HTTP_AUTHORIZATION"] = f"Basic {token}"
        url = from_environ(environ, parser)
        assert url.user == "alice"
        assert url.password == "s3cret"

    def test_malformed_auth_ignored(self, parser, environ):
        environ["HTTP_AUTHORIZATION"] = "Basic !!!not-base64"
        environ["REMOTE_USER"] = "bob"
        url = from_environ(environ, parser)
        assert url.user == "bob"
        assert url.password is None

    def test_missing_host(self, parser):
        with pytest.raises(InvalidUrlError):
            from_environ({"REQUEST_URI": "/"}, parser)

    @pytest.mark.parametrize("port", ["http", "99999"])
    def test_bad_server_port(self, parser, environ, port):
        environ["SERVER_PORT"] = port
        with pytest.raises(InvalidUrlError, match="SERVER_PORT"):
            from_environ(environ, parser)
