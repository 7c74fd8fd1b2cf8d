"""
urlparts: URL parsing with Public Suffix List domain decomposition.

Usage:
    from urlparts import parse

    url = parse("https://www.example.co.uk/a?b=1")
    url.registrable_domain  # "example.co.uk"
    url.subdomain           # "www"
"""

from urlparts.exceptions import (
    InvalidUrlError,
    MalformedRuleSetError,
    UnknownPartError,
    UrlPartsError,
)
from urlparts.psl import DomainParts, Matcher, RuleSet, load_rule_set
from urlparts.url import (
    Fragment,
    Parser,
    Part,
    Path,
    Query,
    Url,
    extract_urls,
    from_environ,
    get_default_parser,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "Url",
    "parse",
    "Parser",
    "Part",
    "Path",
    "Query",
    "Fragment",
    "RuleSet",
    "Matcher",
    "DomainParts",
    "load_rule_set",
    "get_default_parser",
    "extract_urls",
    "from_environ",
    "UrlPartsError",
    "InvalidUrlError",
    "MalformedRuleSetError",
    "UnknownPartError",
]
