"""
Find http(s) URLs in free text.
"""

import re
from typing import Optional

from .model import Url
from .parser import Parser

# A URL ends in a parenthesised word, a character that is neither
# punctuation nor whitespace, or a slash; trailing "." or "," are left out.
URL_PATTERN = re.compile(
    r"\bhttps?://[^\s()<>]+"
    r"(?:\(\w+\)|[^\s!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~]|/)",
    re.IGNORECASE,
)


def extract_urls(text: str, parser: Optional[Parser] = None) -> list[Url]:
    """
    Extract http and https URLs from text.

    Args:
        text: Free text
        parser: Parser for the returned Urls

    Returns:
        Unmaterialized Urls in order of appearance

    Example:
        >>> [u.raw for u in extract_urls("see https://example.com/a.")]
        ['https://example.com/a']
    """
    return [Url(match.group(0), parser) for match in URL_PATTERN.finditer(text or "")]
