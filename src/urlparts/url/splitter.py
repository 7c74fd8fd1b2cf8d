"""
Generic URI splitting.

Splits a string into scheme, authority (user, password, host, port), path,
query and fragment with ``urllib.parse``. No domain knowledge is involved;
empty components come back as None.
"""

import re
from typing import Any, Optional
from urllib.parse import urlsplit

from urlparts.exceptions import InvalidUrlError

# "scheme://" prefix per RFC 3986 scheme syntax
SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")

# Exactly one leading slash followed by a non-slash or end of string:
#   "/one/two" yes, "/" yes, "//" no, "//one/two" no, "" no
BARE_PATH_PATTERN = re.compile(r"^/([^/]|$)")

SPLIT_KEYS = ("scheme", "host", "port", "user", "password", "path", "query", "fragment")


def _empty_parts() -> dict[str, Any]:
    return dict.fromkeys(SPLIT_KEYS)


def _or_none(value: Optional[str]) -> Optional[str]:
    return value if value else None


def is_bare_path(url: str) -> bool:
    """Check whether ``url`` is an absolute path with no authority."""
    return BARE_PATH_PATTERN.match(url) is not None


def split_path(url: str) -> dict[str, Any]:
    """
    Split an absolute path into path, query and fragment.

    Args:
        url: String such as "/one/two?x=1#top"

    Returns:
        Parts dict with scheme and authority keys set to None
    """
    path, _, fragment = url.partition("#")
    path, _, query = path.partition("?")

    parts = _empty_parts()
    parts["path"] = _or_none(path)
    parts["query"] = _or_none(query)
    parts["fragment"] = _or_none(fragment)
    return parts


def split_uri(url: str) -> dict[str, Any]:
    """
    Split a full URL into its parts.

    Strings without a "scheme://" prefix are read authority-first, after one
    leading "//" is dropped: "example.COM/x" has host "example.com".

    Args:
        url: URL string

    Returns:
        Parts dict keyed by SPLIT_KEYS; host is lower-cased

    Raises:
        InvalidUrlError: If the string is empty, has an empty authority or
            an invalid port
    """
    if not url or not url.strip():
        raise InvalidUrlError(url, "empty url")

    source = url.strip()
    if SCHEME_PATTERN.match(source) is None:
        source = "//" + source.removeprefix("//")

    try:
        parsed = urlsplit(source)
        port = parsed.port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e

    host = parsed.hostname
    if not host:
        raise InvalidUrlError(url, "empty authority")

    parts = _empty_parts()
    parts["scheme"] = _or_none(parsed.scheme.lower())
    parts["host"] = host
    parts["port"] = port
    parts["user"] = _or_none(parsed.username)
    parts["password"] = _or_none(parsed.password)
    parts["path"] = _or_none(parsed.path)
    parts["query"] = _or_none(parsed.query)
    parts["fragment"] = _or_none(parsed.fragment)
    return parts
