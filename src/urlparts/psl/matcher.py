"""
Public suffix matching.

Splits a host into public suffix, registrable domain and subdomain using the
Public Suffix List algorithm:
- The longest matching plain or wildcard rule wins
- A matching exception rule always wins and gives up its leftmost label
- With no matching rule the implicit "*" rule applies (last label only)

Hosts must use the same case and Unicode form as the rule set. The rule set
indexes both IDNA spellings and hosts are lower-cased here, so this holds for
lower/upper-case and Unicode/punycode variants.
"""

import ipaddress
from dataclasses import dataclass
from typing import Optional, Sequence

from .rules import RuleKind, RuleSet


@dataclass(frozen=True)
class DomainParts:
    """
    Domain components of a host.

    Attributes:
        public_suffix: e.g. "co.uk"
        registrable_domain: Public suffix plus one label, e.g. "example.co.uk"
        subdomain: Labels left of the registrable domain, e.g. "www"
    """

    public_suffix: Optional[str] = None
    registrable_domain: Optional[str] = None
    subdomain: Optional[str] = None


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


class Matcher:
    """
    Public suffix matcher bound to one rule set.

    Usage:
        matcher = Matcher(rule_set)
        parts = matcher.match("a.b.example.uk.com")
        parts.public_suffix       # "uk.com"
        parts.registrable_domain  # "example.uk.com"
        parts.subdomain           # "a.b"
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set

    def suffix_length(self, reversed_labels: Sequence[str]) -> int:
        """
        Number of labels forming the public suffix.

        Args:
            reversed_labels: Host labels, TLD first

        Returns:
            Label count of the prevailing rule (1 when no rule matches)
        """
        labels = tuple(reversed_labels)
        best = 0

        for length in range(1, len(labels) + 1):
            for rule in self.rule_set.find(labels[:length]):
                if rule.kind is RuleKind.EXCEPTION:
                    return length - 1
                if rule.kind is RuleKind.PLAIN:
                    best = max(best, length)
                elif length < len(labels):
                    # "*.x" claims one label beyond its fixed part
                    best = max(best, length + 1)

        return best or 1

    def match(self, host: Optional[str]) -> DomainParts:
        """
        Split a host into its domain parts.

        Single-label hosts, IP literals and hosts with empty labels have no
        domain parts.

        Args:
            host: Hostname (any case, one trailing dot allowed)

        Returns:
            DomainParts
        """
        if not host:
            return DomainParts()

        host = host.lower()
        if host.endswith("."):
            host = host[:-1]

        labels = host.split(".")
        if len(labels) < 2 or "" in labels or _is_ip_address(host):
            return DomainParts()

        length = self.suffix_length(labels[::-1])
        public_suffix = ".".join(labels[-length:])

        if length >= len(labels):
            return DomainParts(public_suffix=public_suffix)

        registrable_domain = ".".join(labels[-(length + 1):])
        subdomain = ".".join(labels[: -(length + 1)]) or None

        return DomainParts(
            public_suffix=public_suffix,
            registrable_domain=registrable_domain,
            subdomain=subdomain,
        )


def match(rule_set: RuleSet, host: Optional[str]) -> DomainParts:
    """Split ``host`` into domain parts using ``rule_set``."""
    return Matcher(rule_set).match(host)
