"""
Stable 64-bit IDs for decomposed URLs.

- url_id: hash of the URL key (canonical form, so equivalent URLs collide)
- domain_id: hash of the registrable domain
- domain_prefix: leading hex chars of the domain hash, for partitioning
"""

from typing import Any, Mapping, Optional

import xxhash


def hash64(text: str) -> int:
    """xxh3_64 of ``text`` as a signed int64 (fits a Polars Int64 column)."""
    value = xxhash.xxh3_64(text.encode("utf-8")).intdigest()
    if value >= 2**63:
        value -= 2**64
    return value


def url_key(parts: Mapping[str, Any], rendered: str) -> str:
    """
    Key used for url_id.

    The canonical form when the URL has a host, else the rendered URL.
    Scheme and fragment are not part of the canonical form.
    """
    return parts.get("canonical") or rendered


class IDGenerator:
    """Generate IDs for URL keys and registrable domains."""

    def get_url_id(self, key: str) -> int:
        return hash64(key)

    def get_domain_id(self, domain: str) -> int:
        return hash64(domain)

    def get_domain_prefix(self, domain: str, prefix_chars: int = 2) -> str:
        """
        Partition prefix for a registrable domain.

        Args:
            domain: Registrable domain
            prefix_chars: Number of hex characters to keep

        Returns:
            Lower-case hex string, e.g. 'a7'
        """
        digest = xxhash.xxh3_64(domain.encode("utf-8")).hexdigest()
        return digest[:prefix_chars]

    def domain_fields(
        self, domain: Optional[str], prefix_chars: int = 2
    ) -> dict[str, Any]:
        """domain_id and domain_prefix for a record; both None without a domain."""
        if not domain:
            return {"domain_id": None, "domain_prefix": None}
        return {
            "domain_id": self.get_domain_id(domain),
            "domain_prefix": self.get_domain_prefix(domain, prefix_chars),
        }
