"""Inline placeholders left behind by HTML-to-text conversion.

These are removed from the text before it is split into lines. They never
decide where a message is truncated.
"""

import re

from mailbody.patterns.rules import PatternRule, RuleSet

ARTIFACT_PATTERNS = RuleSet(
    name="artifacts",
    rules=(
        PatternRule(
            re.compile(r"\[image:[^\]]*\]", re.IGNORECASE),
            "Inline image reference",
            "[image: photo.jpg]",
        ),
        PatternRule(
            re.compile(r"\[Image\]", re.IGNORECASE),
            "Generic image tag",
            "[Image]",
        ),
        PatternRule(
            re.compile(r"\[cid:[^\]]*\]", re.IGNORECASE),
            "Content-ID reference",
            "[cid:img001@domain.com]",
        ),
    ),
)


def strip_artifacts(text: str, rules: RuleSet = ARTIFACT_PATTERNS) -> str:
    """Remove every inline placeholder from text.

    Args:
        text: Raw text, possibly spanning many lines.
        rules: Placeholder patterns, applied in order.

    Returns:
        Text with each match replaced by the empty string. Line breaks are
        never touched, so a line may end up blank but lines do not merge.
    """
    for rule in rules:
        text = rule.pattern.sub("", text)
    return text
