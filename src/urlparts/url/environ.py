"""
Build a Url for the current request from a WSGI environ snapshot.
"""

import base64
import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

from urlparts.exceptions import InvalidUrlError

from .model import Url
from .parser import Parser

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}


def _request_scheme(environ: Mapping[str, Any]) -> str:
    https = str(environ.get("HTTPS", ""))
    if https and https.lower() != "off":
        return "https"
    if str(environ.get("SERVER_PORT", "")) == "443":
        return "https"
    return str(environ.get("wsgi.url_scheme") or "http").lower()


def _request_uri(environ: Mapping[str, Any]) -> str:
    request_uri = environ.get("REQUEST_URI")
    if request_uri:
        return str(request_uri)

    uri = quote(environ.get("SCRIPT_NAME", "")) + quote(environ.get("PATH_INFO", ""))
    query_string = environ.get("QUERY_STRING")
    if query_string:
        uri += f"?{query_string}"
    return uri


def _basic_credentials(environ: Mapping[str, Any]) -> tuple[Optional[str], Optional[str]]:
    header = environ.get("HTTP_AUTHORIZATION", "")
    scheme, _, token = str(header).partition(" ")
    if scheme.lower() != "basic" or not token:
        return environ.get("REMOTE_USER") or None, None

    try:
        decoded = base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except ValueError as e:
        logger.debug(f"Ignoring malformed Basic credentials: {e}")
        return environ.get("REMOTE_USER") or None, None

    user, _, password = decoded.partition(":")
    return user or None, password or None


def from_environ(environ: Mapping[str, Any], parser: Optional[Parser] = None) -> Url:
    """
    Create a Url for the request described by a WSGI environ.

    The port is only kept when it is not the default for the scheme.
    Derived parts are computed for the full request path.

    Args:
        environ: WSGI environ (or any mapping with the same keys)
        parser: Parser for the returned Url

    Returns:
        Materialized Url

    Raises:
        InvalidUrlError: If the environ names no host
    """
    host = environ.get("HTTP_HOST") or environ.get("SERVER_NAME")
    if not host:
        raise InvalidUrlError(None, "environ has no HTTP_HOST or SERVER_NAME")

    scheme = _request_scheme(environ)
    url = Url(f"{scheme}://{host}", parser)

    request_uri = _request_uri(environ)
    if request_uri:
        path, _, query = request_uri.partition("?")
        url.set("path", path)
        url.set("query", query)

    server_port = environ.get("SERVER_PORT")
    if server_port:
        try:
            port = int(server_port)
            if port != DEFAULT_PORTS.get(scheme):
                url.set("port", port)
        except ValueError as e:
            raise InvalidUrlError(None, f"bad SERVER_PORT {server_port!r}: {e}") from e

    user, password = _basic_credentials(environ)
    if user:
        url.set("user", user)
        if password:
            url.set("password", password)

    return url.refresh()
