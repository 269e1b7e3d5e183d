"""Auto-generated signature detection.

Targets machine-appended taglines and legal boilerplate. Human sign-offs
("Best, Jane") deliberately match nothing here and stay in the body.
"""

import re

from mailbody.patterns.rules import PatternRule, RuleSet

AUTO_SIGNATURE_PATTERNS = RuleSet(
    name="signatures",
    rules=(
        PatternRule(
            re.compile(r"^--$"),
            "RFC signature delimiter",
            "--",
        ),
        PatternRule(
            re.compile(r"^Sent from my\s", re.IGNORECASE),
            "Mobile device tagline",
            "Sent from my iPhone",
        ),
        PatternRule(
            re.compile(r"^Get Outlook for\s", re.IGNORECASE),
            "Email client promotion",
            "Get Outlook for Android",
        ),
        PatternRule(
            re.compile(r"^Sent (via|with)\s", re.IGNORECASE),
            "Third-party app tagline",
            "Sent via Superhuman",
        ),
        PatternRule(
            re.compile(r"BOOK A MEETING", re.IGNORECASE),
            "Calendar booking link",
            "BOOK A MEETING: https://...",
        ),
        PatternRule(
            re.compile(r"^=+$"),
            "Equals sign divider",
            "========",
        ),
        PatternRule(
            re.compile(r"^(CONFIDENTIAL|DISCLAIMER|NOTICE):", re.IGNORECASE),
            "Legal notice header",
            "CONFIDENTIAL: This email...",
        ),
        PatternRule(
            re.compile(r"confidential.*intended.*recipient", re.IGNORECASE),
            "Legal boilerplate text",
            "...confidential and intended solely for the recipient...",
        ),
    ),
)
