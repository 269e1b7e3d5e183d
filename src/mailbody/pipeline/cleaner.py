"""Truncating cleaner: keep everything above the first automated line.

Scans lines top to bottom and cuts the text at the first line that is not
BODY. A signature delimiter ("--") directly above a mailing-list footer is
cut along with the footer. Human sign-offs and contact details above the
cut are kept verbatim.
"""

import logging

from mailbody.patterns.rules import RuleSet
from mailbody.pipeline.classifier import LineClassifier, strip_line
from mailbody.pipeline.normalizer import Normalizer

logger = logging.getLogger(__name__)

SIGNATURE_DELIMITER = "--"


class TextCleaner:
    """Removes quoted replies, auto-signatures and list footers.

    Footer detection is always on in this mode. Line endings are not
    normalized: kept lines come back exactly as they were given.

    Example:
        cleaner = TextCleaner()
        cleaner.clean("Thanks!\\n\\n> earlier message")  # "Thanks!"
    """

    def __init__(
        self,
        *,
        quote_rules: RuleSet | None = None,
        signature_rules: RuleSet | None = None,
        footer_rules: RuleSet | None = None,
    ) -> None:
        """Initialize the cleaner.

        Args:
            quote_rules: Replacement QUOTE rules (None keeps the defaults).
            signature_rules: Replacement AUTO_SIGNATURE rules.
            footer_rules: Replacement MAILING_LIST_FOOTER rules.
        """
        self._normalizer = Normalizer(normalize_line_endings=False)
        self._classifier = LineClassifier(
            quote_rules=quote_rules,
            signature_rules=signature_rules,
            footer_rules=footer_rules,
            detect_footers=True,
        )

    def clean(self, text: object) -> str:
        """Return the human-written prefix of an email body.

        Args:
            text: Raw body text. Empty or non-text input gives "".

        Returns:
            Lines above the first automated line, with trailing blank
            lines removed, joined with LF.
        """
        normalized = self._normalizer.normalize(text)
        if not normalized.lines:
            return ""

        lines = normalized.lines
        cut = self.find_truncation_point(lines)
        if cut < len(lines):
            logger.debug("Truncating at line %d of %d", cut, len(lines))

        return "\n".join(_trim_trailing_blank_lines(lines[:cut]))

    def find_truncation_point(self, lines: tuple[str, ...] | list[str]) -> int:
        """Find where automated content starts.

        Args:
            lines: Body lines in document order.

        Returns:
            Index of the first line to drop, or len(lines) if nothing is
            automated.
        """
        for idx, line in enumerate(lines):
            category = self._classifier.classify(line)
            if category == "BODY":
                continue

            previous = strip_line(lines[idx - 1]) if idx > 0 else None
            if category == "MAILING_LIST_FOOTER" and previous == SIGNATURE_DELIMITER:
                return idx - 1
            return idx

        return len(lines)


def _trim_trailing_blank_lines(lines: tuple[str, ...] | list[str]) -> list[str]:
    """Drop whitespace-only lines from the end."""
    result = list(lines)
    while result and not strip_line(result[-1]):
        result.pop()
    return result


_default_cleaner = TextCleaner()


def clean_text(text: object) -> str:
    """Clean an email body with the default rule sets.

    Args:
        text: Raw body text. Empty or non-text input gives "".

    Returns:
        The body with quotes, auto-signatures and list footers cut off.
    """
    return _default_cleaner.clean(text)
