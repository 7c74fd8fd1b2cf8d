"""
URL parser.

Turns a string into the full part map of a URL:
- Bare absolute paths ("/one/two") are split without any domain lookup
- Everything else is split as a URL and its host run through the public
  suffix matcher
- canonical and resource keys are derived from host, path and query
"""

from typing import Any, Optional

from urlparts.psl import Matcher, RuleSet, get_rule_set

from .splitter import is_bare_path, split_path, split_uri

DERIVED_KEYS = (
    "public_suffix",
    "registrable_domain",
    "subdomain",
    "canonical",
    "resource",
)


def build_resource(path: Optional[str], query: Optional[str]) -> str:
    """Path (or empty) followed by "?query" when a query is present."""
    resource = path or ""
    if query is not None:
        resource += f"?{query}"
    return resource


def build_canonical(host: str, path: Optional[str], query: Optional[str]) -> str:
    """
    Reversed-label host followed by the resource.

    One trailing dot on the host is dropped, as in Matcher.match.

    Example:
        >>> build_canonical("sub.domain.jwage.com", "/about", "param=value")
        'com.jwage.domain.sub/about?param=value'
    """
    if host.endswith("."):
        host = host[:-1]
    return ".".join(reversed(host.split("."))) + build_resource(path, query)


class Parser:
    """
    Parse URL strings into part maps.

    The rule set is passed in explicitly; every parser built from the same
    rule set gives the same answers.

    Usage:
        parser = Parser(rule_set)
        parts = parser.parse_url("https://www.example.co.uk/a?b=1")
        parts["registrable_domain"]  # "example.co.uk"
        parts["canonical"]           # "uk.co.example.www/a?b=1"
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set
        self.matcher = Matcher(rule_set)

    def parse_url(self, url: Any) -> dict[str, Any]:
        """
        Parse a URL into all of its parts.

        Args:
            url: URL string (other objects are converted with str())

        Returns:
            Dict with split keys and derived keys; missing parts are None

        Raises:
            InvalidUrlError: If the string cannot be decomposed
        """
        url = str(url)

        if is_bare_path(url):
            parts = split_path(url)
        else:
            parts = split_uri(url)

        parts.update(self.derive(parts["host"], parts["path"], parts["query"]))
        return parts

    def derive(
        self, host: Optional[str], path: Optional[str], query: Optional[str]
    ) -> dict[str, Optional[str]]:
        """
        Compute the derived parts for a host, path and query.

        All derived parts are None when there is no host.
        """
        derived = dict.fromkeys(DERIVED_KEYS)
        if not host:
            return derived

        domain = self.matcher.match(host)
        derived["public_suffix"] = domain.public_suffix
        derived["registrable_domain"] = domain.registrable_domain
        derived["subdomain"] = domain.subdomain
        derived["canonical"] = build_canonical(host, path, query)
        derived["resource"] = build_resource(path, query)
        return derived


# Global default parser instance
_default_parser: Optional[Parser] = None


def get_default_parser() -> Parser:
    """Get or create the parser bound to the process-wide rule set."""
    global _default_parser
    if _default_parser is None:
        _default_parser = Parser(get_rule_set())
    return _default_parser


def reset_default_parser() -> None:
    """Reset the global default parser (mainly for testing)."""
    global _default_parser
    _default_parser = None
