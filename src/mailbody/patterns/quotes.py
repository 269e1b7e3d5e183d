"""Quoted reply detection.

Lines that introduce or belong to text reproduced from an earlier message:
quote prefixes, reply attributions, dividers and inline header blocks.
"""

import re

from mailbody.patterns.rules import PatternRule, RuleSet

QUOTE_PATTERNS = RuleSet(
    name="quotes",
    rules=(
        PatternRule(
            re.compile(r"^>+"),
            "Traditional quote prefix",
            "> previous message text",
        ),
        PatternRule(
            re.compile(r"^On\s.+\swrote:$", re.IGNORECASE),
            "Reply attribution line",
            "On March 17, 2025, John Smith wrote:",
        ),
        PatternRule(
            re.compile(r"^-+\s*Original Message\s*-+", re.IGNORECASE),
            "Forwarded message header",
            "--- Original Message ---",
        ),
        PatternRule(
            re.compile(r"^From:.+Sent:.+$", re.IGNORECASE),
            "Email metadata header",
            "From: sender@mail.com Sent: Monday 3:00 PM",
        ),
        # Unanchored: compressed Outlook exports glue the headers onto other text.
        # Can over-match prose that mentions all four words in order.
        PatternRule(
            re.compile(r"From:.+Date:.+To:.+Subject:", re.IGNORECASE),
            "Concatenated email headers",
            "From: a@b.comDate: Jan 1To: c@d.comSubject: Hi",
        ),
        PatternRule(
            re.compile(r"^_{8,}$"),
            "Underscore divider",
            "________________",
        ),
        # Zero-width (U+200B-U+200F) and bidi embedding (U+202A-U+202E) controls
        PatternRule(
            re.compile("^[\u200b-\u200f\u202a-\u202e]"),
            "Unicode control character divider",
            "(invisible characters)",
        ),
    ),
)
