"""EmailBodyParser - Fragment-based public interface.

Provides three entry points:
- parse(): Full ParsedEmail with typed fragments
- extract_visible_text(): Only the human-written text
- extract_quoted_text(): Only the quoted reply text
"""

from dataclasses import dataclass, replace

from mailbody.patterns.rules import RuleSet
from mailbody.pipeline.classifier import LineClassifier
from mailbody.pipeline.segmenter import ParsedEmail, Segmenter


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Configuration for EmailBodyParser.

    Attributes:
        keep_signatures: Reserved. Auto-signature lines always get their own
            fragment regardless of this flag.
        remove_disclaimers: Reserved. Disclaimer text is already covered by
            the auto-signature rules.
        remove_mailing_list_footers: If False, footer rules are skipped and
            footer lines stay in the visible text.
        quote_rules: Replacement QUOTE rules, or None for the defaults.
        signature_rules: Replacement AUTO_SIGNATURE rules, or None.
        footer_rules: Replacement MAILING_LIST_FOOTER rules, or None.
    """

    keep_signatures: bool = True
    remove_disclaimers: bool = True
    remove_mailing_list_footers: bool = True
    quote_rules: RuleSet | None = None
    signature_rules: RuleSet | None = None
    footer_rules: RuleSet | None = None


class EmailBodyParser:
    """Splits email bodies into body, quote, signature and footer fragments.

    Human sign-offs ("Best, John") are body content; machine taglines
    ("Sent from my iPhone") are hidden signature fragments.

    Example:
        parser = EmailBodyParser(remove_mailing_list_footers=False)

        email = parser.parse(body_text)
        for fragment in email.fragments:
            print(fragment.category, fragment.content)

        reply = parser.extract_visible_text(body_text)
        quoted = parser.extract_quoted_text(body_text)
    """

    def __init__(self, options: ParserOptions | None = None, **overrides: object) -> None:
        """Initialize the parser.

        Args:
            options: Base options. Defaults to ParserOptions().
            **overrides: Individual ParserOptions fields to replace.

        Raises:
            TypeError: If an override is not a ParserOptions field.
        """
        options = options or ParserOptions()
        if overrides:
            options = replace(options, **overrides)
        self._options = options

        classifier = LineClassifier(
            quote_rules=options.quote_rules,
            signature_rules=options.signature_rules,
            footer_rules=options.footer_rules,
            detect_footers=options.remove_mailing_list_footers,
        )
        self._segmenter = Segmenter(classifier)

    @property
    def options(self) -> ParserOptions:
        """The effective parser options."""
        return self._options

    def parse(self, text: object) -> ParsedEmail:
        """Parse email text into categorized fragments.

        Args:
            text: Raw body text. Empty or non-text input gives no fragments.

        Returns:
            ParsedEmail with fragments and visible/quoted projections.
        """
        return self._segmenter.segment(text)

    def extract_visible_text(self, text: object) -> str:
        """Parse and return only the visible (body) text."""
        return self.parse(text).visible_text

    def extract_quoted_text(self, text: object) -> str:
        """Parse and return only the quoted text."""
        return self.parse(text).quoted_text

    # Names used by earlier releases
    parse_reply = extract_visible_text
    parse_replied = extract_quoted_text
