"""
Public Suffix List support.

Builds rule sets from PSL text and splits hosts into public suffix,
registrable domain and subdomain.
"""

from .loader import (
    bundled_psl_path,
    get_rule_set,
    load_rule_set,
    read_psl_text,
    reset_rule_set,
    set_rule_set,
    write_psl_cache,
)
from .matcher import DomainParts, Matcher, match
from .rules import RuleKind, RuleSet, SuffixRule

__all__ = [
    "RuleKind",
    "SuffixRule",
    "RuleSet",
    "DomainParts",
    "Matcher",
    "match",
    "bundled_psl_path",
    "read_psl_text",
    "write_psl_cache",
    "load_rule_set",
    "get_rule_set",
    "set_rule_set",
    "reset_rule_set",
]
