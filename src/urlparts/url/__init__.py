"""
URL part model.

Splits URL strings, derives domain parts and renders URLs back to strings.
"""

from .environ import from_environ
from .extract import extract_urls
from .model import Url, parse
from .parser import Parser, get_default_parser, reset_default_parser
from .parts import Fragment, Part, Path, Query, UrlParts
from .splitter import is_bare_path, split_path, split_uri

__all__ = [
    "Url",
    "parse",
    "Parser",
    "get_default_parser",
    "reset_default_parser",
    "Part",
    "UrlParts",
    "Path",
    "Query",
    "Fragment",
    "split_uri",
    "split_path",
    "is_bare_path",
    "extract_urls",
    "from_environ",
]
