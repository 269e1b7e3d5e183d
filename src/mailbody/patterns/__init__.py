"""Pattern databases for email line classification."""

from mailbody.patterns.artifacts import ARTIFACT_PATTERNS, strip_artifacts
from mailbody.patterns.footers import MAILING_LIST_PATTERNS
from mailbody.patterns.loader import load_rule_set, rule_set_from_mapping
from mailbody.patterns.quotes import QUOTE_PATTERNS
from mailbody.patterns.rules import PatternRule, RuleSet
from mailbody.patterns.signatures import AUTO_SIGNATURE_PATTERNS

__all__ = [
    "ARTIFACT_PATTERNS",
    "AUTO_SIGNATURE_PATTERNS",
    "MAILING_LIST_PATTERNS",
    "PatternRule",
    "QUOTE_PATTERNS",
    "RuleSet",
    "load_rule_set",
    "rule_set_from_mapping",
    "strip_artifacts",
]
