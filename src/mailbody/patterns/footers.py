"""Mailing list and newsletter footer detection."""

import re

from mailbody.patterns.rules import PatternRule, RuleSet

MAILING_LIST_PATTERNS = RuleSet(
    name="footers",
    rules=(
        PatternRule(
            re.compile(r"^You received this (message|email) because", re.IGNORECASE),
            "Mailing list attribution",
            "You received this message because you are subscribed...",
        ),
        PatternRule(
            re.compile(r"^To (unsubscribe|stop receiving)", re.IGNORECASE),
            "Unsubscribe instruction",
            "To unsubscribe, click here",
        ),
        PatternRule(
            re.compile(r"^To view this (discussion|thread)", re.IGNORECASE),
            "Web view link",
            "To view this discussion online...",
        ),
        PatternRule(
            re.compile(r"^(Manage|Update) your (subscription|preferences)", re.IGNORECASE),
            "Preferences link",
            "Manage your subscription settings",
        ),
        PatternRule(
            re.compile(r"^This email was sent to\s", re.IGNORECASE),
            "Recipient notice",
            "This email was sent to user@example.com",
        ),
        PatternRule(
            re.compile(r"^(Click|Tap) here to unsubscribe", re.IGNORECASE),
            "Unsubscribe CTA",
            "Click here to unsubscribe",
        ),
        PatternRule(
            re.compile(r"^If you (no longer|don't) (wish|want) to receive", re.IGNORECASE),
            "Opt-out notice",
            "If you no longer wish to receive these emails...",
        ),
    ),
)
