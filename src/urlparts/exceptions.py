"""
Exception hierarchy for urlparts.

The concrete errors also derive from the builtin they refine, so callers
that already catch ``ValueError`` / ``KeyError`` keep working.
"""

from typing import Optional


class UrlPartsError(Exception):
    """Base exception for all urlparts errors."""


class InvalidUrlError(UrlPartsError, ValueError):
    """Raised when a string cannot be decomposed into URL parts."""

    def __init__(self, url: Optional[str], reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"Invalid url {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedRuleSetError(UrlPartsError, ValueError):
    """Raised when Public Suffix List text yields no usable rules."""


class UnknownPartError(UrlPartsError, KeyError):
    """Raised when a URL part name is not recognized."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown URL part: {name!r}")

    def __str__(self) -> str:
        return self.args[0]
