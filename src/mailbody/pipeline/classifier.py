"""Rule-based line classifier.

Assigns each line exactly one category by testing rule sets in a fixed
priority order, first match wins:
- QUOTE: Quoted replies, attributions, dividers, inline headers
- AUTO_SIGNATURE: Device taglines, app promotions, legal boilerplate
- MAILING_LIST_FOOTER: Unsubscribe and subscription-management text
- BODY: Everything else
"""

import re
from dataclasses import dataclass
from typing import Literal

from mailbody.patterns.footers import MAILING_LIST_PATTERNS
from mailbody.patterns.quotes import QUOTE_PATTERNS
from mailbody.patterns.rules import PatternRule, RuleSet
from mailbody.patterns.signatures import AUTO_SIGNATURE_PATTERNS

Category = Literal["BODY", "QUOTE", "AUTO_SIGNATURE", "MAILING_LIST_FOOTER"]

CATEGORIES: tuple[Category, ...] = ("BODY", "QUOTE", "AUTO_SIGNATURE", "MAILING_LIST_FOOTER")

# Whitespace plus U+FEFF (byte order mark), which str.strip() keeps
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def strip_line(line: str) -> str:
    """Remove surrounding whitespace and byte order marks from a line."""
    return _EDGE_WHITESPACE.sub("", line)


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line with its category and the rule that decided it.

    Attributes:
        text: Line text as given (not stripped).
        category: Assigned category.
        rule: The matching rule, or None for BODY lines.
    """

    text: str
    category: Category
    rule: PatternRule | None


class LineClassifier:
    """Classifies single lines against the quote, signature and footer rules.

    Rule sets are tried in order QUOTE, AUTO_SIGNATURE, MAILING_LIST_FOOTER.
    Footer rules are skipped entirely when detect_footers is False, so a
    footer-looking line then falls through to BODY.
    """

    def __init__(
        self,
        *,
        quote_rules: RuleSet | None = None,
        signature_rules: RuleSet | None = None,
        footer_rules: RuleSet | None = None,
        detect_footers: bool = True,
    ) -> None:
        """Initialize the classifier.

        Args:
            quote_rules: Replacement QUOTE rules (defaults to QUOTE_PATTERNS).
            signature_rules: Replacement AUTO_SIGNATURE rules.
            footer_rules: Replacement MAILING_LIST_FOOTER rules.
            detect_footers: If False, never assign MAILING_LIST_FOOTER.
        """
        self._tiers: tuple[tuple[Category, RuleSet], ...] = (
            ("QUOTE", quote_rules if quote_rules is not None else QUOTE_PATTERNS),
            ("AUTO_SIGNATURE", signature_rules if signature_rules is not None else AUTO_SIGNATURE_PATTERNS),
            ("MAILING_LIST_FOOTER", footer_rules if footer_rules is not None else MAILING_LIST_PATTERNS),
        )
        self._detect_footers = detect_footers

    @property
    def detect_footers(self) -> bool:
        """Whether footer rules take part in classification."""
        return self._detect_footers

    def explain(self, line: str) -> ClassifiedLine:
        """Classify a line and report the rule that fired.

        Args:
            line: A single line; surrounding whitespace is ignored.

        Returns:
            ClassifiedLine with category and matching rule.
        """
        stripped = strip_line(line)

        for category, rules in self._tiers:
            if category == "MAILING_LIST_FOOTER" and not self._detect_footers:
                continue
            rule = rules.first_match(stripped)
            if rule is not None:
                return ClassifiedLine(text=line, category=category, rule=rule)

        return ClassifiedLine(text=line, category="BODY", rule=None)

    def classify(self, line: str) -> Category:
        """Return the category of a single line."""
        return self.explain(line).category

    def classify_lines(self, lines: tuple[str, ...] | list[str]) -> tuple[ClassifiedLine, ...]:
        """Classify every line in order."""
        return tuple(self.explain(line) for line in lines)
