"""
Public Suffix List rule set.

Parses PSL text into an immutable index of suffix rules:
- Comment lines (//) and blank lines are skipped
- A leading "*." marks a wildcard rule, a leading "!" an exception rule
- Labels are lower-cased and stored reversed (TLD first) so lookups are
  anchored on the right-hand side of a host
- Every rule is also indexed under its alternate IDNA spelling, so hosts in
  Unicode and in punycode form match the same rules
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from urlparts.exceptions import MalformedRuleSetError

logger = logging.getLogger(__name__)

BEGIN_PRIVATE = "===BEGIN PRIVATE DOMAINS==="
END_PRIVATE = "===END PRIVATE DOMAINS==="

Labels = tuple[str, ...]


class RuleKind(str, Enum):
    """Kind of a PSL rule."""

    PLAIN = "plain"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class SuffixRule:
    """
    A single Public Suffix List rule.

    Attributes:
        labels: Reversed labels without the "*." or "!" marker
            ("*.kawasaki.jp" is stored as ("jp", "kawasaki"))
        kind: Rule kind
        private: True when the rule comes from the PRIVATE DOMAINS section
    """

    labels: Labels
    kind: RuleKind = RuleKind.PLAIN
    private: bool = False

    @property
    def top_label(self) -> str:
        return self.labels[0]

    @property
    def name(self) -> str:
        """Rule labels in reading order, without markers."""
        return ".".join(reversed(self.labels))

    def __str__(self) -> str:
        if self.kind is RuleKind.WILDCARD:
            return f"*.{self.name}"
        if self.kind is RuleKind.EXCEPTION:
            return f"!{self.name}"
        return self.name

    @classmethod
    def from_line(cls, line: str, private: bool = False) -> Optional["SuffixRule"]:
        """
        Parse one PSL line.

        Only the first whitespace-separated token is significant.

        Returns:
            The rule, or None if the line does not hold a usable rule
        """
        tokens = line.split()
        if not tokens or tokens[0].startswith("//"):
            return None

        token = tokens[0].lower()
        kind = RuleKind.PLAIN
        if token.startswith("!"):
            kind = RuleKind.EXCEPTION
            token = token[1:]
        elif token.startswith("*."):
            kind = RuleKind.WILDCARD
            token = token[2:]

        labels = token.split(".")
        if any(not label or "*" in label or "!" in label for label in labels):
            return None

        # An exception has to leave at least one label as the suffix
        if kind is RuleKind.EXCEPTION and len(labels) < 2:
            return None

        return cls(labels=tuple(reversed(labels)), kind=kind, private=private)


def _alternate_spelling(labels: Labels) -> Optional[Labels]:
    """
    Return the other IDNA spelling of a label sequence.

    Unicode labels are encoded to punycode, punycode labels decoded to
    Unicode. Returns None when the spelling would not change or a label
    cannot be converted.
    """
    converted = []
    try:
        for label in labels:
            if label.isascii():
                if label.startswith("xn--"):
                    label = label.encode("ascii").decode("idna")
            else:
                label = label.encode("idna").decode("ascii")
            converted.append(label.lower())
    except UnicodeError:
        return None

    result = tuple(converted)
    return result if result != labels else None


class RuleSet:
    """
    Immutable index of Public Suffix List rules.

    Rules are grouped by their top (rightmost) label, then keyed by their
    full reversed label tuple. A lookup for one candidate suffix is two
    dictionary probes, so matching a host costs O(number of host labels)
    regardless of list size.

    Usage:
        rules = RuleSet.build(psl_text)
        rules.find(("uk", "co"))  # (SuffixRule(labels=('uk', 'co'), ...),)
        "co.uk" in rules          # True
    """

    def __init__(self, rules: Iterable[SuffixRule]):
        self._rules: list[SuffixRule] = []
        self._index: dict[str, dict[Labels, tuple[SuffixRule, ...]]] = {}

        seen = set()
        for rule in rules:
            key = (rule.labels, rule.kind)
            if key in seen:
                continue
            seen.add(key)
            self._rules.append(rule)

            self._add(rule.labels, rule)
            alternate = _alternate_spelling(rule.labels)
            if alternate is not None:
                self._add(alternate, rule)

    def _add(self, labels: Labels, rule: SuffixRule) -> None:
        bucket = self._index.setdefault(labels[0], {})
        bucket[labels] = bucket.get(labels, ()) + (rule,)

    @classmethod
    def build(cls, text: str, include_private: bool = True) -> "RuleSet":
        """
        Build a rule set from raw PSL text.

        Malformed lines are skipped; they are never fatal on their own.

        Args:
            text: Raw Public Suffix List contents
            include_private: Keep rules from the PRIVATE DOMAINS section

        Returns:
            RuleSet

        Raises:
            MalformedRuleSetError: If no usable rule was found
        """
        rules = []
        private = False
        skipped = 0

        for line_no, raw_line in enumerate(text.splitlines(), 1):
            line = raw_line.strip()
            if not line:
                continue

            if line.startswith("//"):
                if BEGIN_PRIVATE in line:
                    private = True
                elif END_PRIVATE in line:
                    private = False
                continue

            if private and not include_private:
                continue

            rule = SuffixRule.from_line(line, private=private)
            if rule is None:
                skipped += 1
                logger.debug(f"Skipping malformed PSL line {line_no}: {line!r}")
                continue

            rules.append(rule)

        if not rules:
            raise MalformedRuleSetError("Public Suffix List contains no usable rules")

        rule_set = cls(rules)
        logger.debug(
            f"Built rule set with {len(rule_set)} rules ({skipped} lines skipped)"
        )
        return rule_set

    def find(self, labels: Labels) -> tuple[SuffixRule, ...]:
        """
        Get the rules whose reversed labels equal ``labels`` exactly.

        Args:
            labels: Reversed label tuple, TLD first

        Returns:
            Matching rules (empty tuple if none)
        """
        if not labels:
            return ()
        bucket = self._index.get(labels[0])
        if bucket is None:
            return ()
        return bucket.get(tuple(labels), ())

    def __contains__(self, rule_text: object) -> bool:
        if not isinstance(rule_text, str):
            return False
        rule = SuffixRule.from_line(rule_text)
        if rule is None:
            return False
        return any(r.kind is rule.kind for r in self.find(rule.labels))

    def __iter__(self) -> Iterator[SuffixRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(rules={len(self._rules)})"
