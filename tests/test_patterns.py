"""Tests for the default pattern tables and rule types."""

import re

from mailbody.patterns import (
    ARTIFACT_PATTERNS,
    AUTO_SIGNATURE_PATTERNS,
    MAILING_LIST_PATTERNS,
    QUOTE_PATTERNS,
    PatternRule,
    RuleSet,
    strip_artifacts,
)


class TestPatternRule:
    """Tests for single rules."""

    def test_matches_uses_search(self) -> None:
        """Unanchored patterns match anywhere in the line."""
        rule = PatternRule(re.compile(r"BOOK A MEETING", re.IGNORECASE), "Booking")

        assert rule.matches("Jane Doe book a meetinghttps://example.com")
        assert not rule.matches("Let's meet tomorrow")

    def test_to_mapping_reports_flags(self) -> None:
        """Serialized rules list their non-default flags."""
        rule = PatternRule(re.compile(r"^Sent from my\s", re.IGNORECASE), "Mobile", "Sent from my iPhone")

        assert rule.to_mapping() == {
            "pattern": r"^Sent from my\s",
            "description": "Mobile",
            "example": "Sent from my iPhone",
            "flags": ["IGNORECASE"],
        }

    def test_to_mapping_without_flags(self) -> None:
        """Rules without flags omit the flags key."""
        rule = PatternRule(re.compile(r"^--$"), "Delimiter", "--")

        assert "flags" not in rule.to_mapping()


class TestRuleSet:
    """Tests for ordered rule sets."""

    def test_first_match_respects_order(self) -> None:
        """The earliest matching rule wins."""
        first = PatternRule(re.compile(r"^>"), "First")
        second = PatternRule(re.compile(r"quoted"), "Second")
        rules = RuleSet(name="test", rules=(first, second))

        assert rules.first_match("> quoted text") is first
        assert rules.first_match("quoted text") is second
        assert rules.first_match("plain") is None

    def test_iteration_and_length(self) -> None:
        """Rule sets behave like read-only sequences."""
        assert len(QUOTE_PATTERNS) == 7
        assert len(AUTO_SIGNATURE_PATTERNS) == 8
        assert len(MAILING_LIST_PATTERNS) == 7
        assert [rule.description for rule in ARTIFACT_PATTERNS] == [
            "Inline image reference",
            "Generic image tag",
            "Content-ID reference",
        ]

    def test_extend_returns_new_set(self) -> None:
        """Extending leaves the original set untouched."""
        extra = PatternRule(re.compile(r"^Sent from Mail for Windows"), "Windows Mail")
        extended = AUTO_SIGNATURE_PATTERNS.extend(extra)

        assert len(extended) == len(AUTO_SIGNATURE_PATTERNS) + 1
        assert extended.rules[-1] is extra
        assert extended.name == "signatures"
        assert not AUTO_SIGNATURE_PATTERNS.matches("Sent from Mail for Windows")
        assert extended.matches("Sent from Mail for Windows")

    def test_every_example_matches_its_own_rule(self) -> None:
        """Documentation examples are caught by the rule they describe."""
        for rule_set in (QUOTE_PATTERNS, AUTO_SIGNATURE_PATTERNS, MAILING_LIST_PATTERNS, ARTIFACT_PATTERNS):
            for rule in rule_set:
                if rule.description == "Unicode control character divider":
                    continue
                assert rule.matches(rule.example), rule.description


class TestQuotePatterns:
    """Tests for quoted reply detection."""

    def test_quote_prefix(self) -> None:
        """Lines starting with > are quotes."""
        assert QUOTE_PATTERNS.matches("> quoted")
        assert QUOTE_PATTERNS.matches(">>> deeply nested")
        assert not QUOTE_PATTERNS.matches("a > b")

    def test_attribution_must_end_with_wrote(self) -> None:
        """Attribution lines are anchored at the end."""
        assert QUOTE_PATTERNS.matches("On Mon, Mar 17, 2025 at 1:29 PM John Doe <john@example.com> wrote:")
        assert QUOTE_PATTERNS.matches("on tuesday jane WROTE:")
        assert not QUOTE_PATTERNS.matches("On Monday John wrote: see below")

    def test_original_message_divider(self) -> None:
        """Original Message dividers need dashes on both sides."""
        assert QUOTE_PATTERNS.matches("-----Original Message-----")
        assert QUOTE_PATTERNS.matches("--- original message ---")
        assert not QUOTE_PATTERNS.matches("Original Message")

    def test_header_pair(self) -> None:
        """From/Sent header pairs on one line are quotes."""
        assert QUOTE_PATTERNS.matches("From: sender@mail.com Sent: Monday 3:00 PM")
        assert not QUOTE_PATTERNS.matches("From: sender@mail.com")

    def test_concatenated_headers_are_unanchored(self) -> None:
        """Glued header runs match anywhere in the line."""
        line = "Ravenna From: a@b.comDate: Thursday To: Tom Subject: Lost Password"

        assert QUOTE_PATTERNS.first_match(line).description == "Concatenated email headers"

    def test_underscore_divider_length(self) -> None:
        """Eight or more underscores form a divider."""
        assert QUOTE_PATTERNS.matches("________")
        assert not QUOTE_PATTERNS.matches("_______")
        assert not QUOTE_PATTERNS.matches("________ text")

    def test_invisible_control_prefix(self) -> None:
        """Zero-width and bidi controls at line start are quote markers."""
        assert QUOTE_PATTERNS.matches("\u200bquoted")
        assert QUOTE_PATTERNS.matches("\u202aquoted")
        assert QUOTE_PATTERNS.matches("\u200f")
        assert not QUOTE_PATTERNS.matches("text\u200b")


class TestSignaturePatterns:
    """Tests for auto-signature detection."""

    def test_delimiter_is_exact(self) -> None:
        """Only a bare -- is the RFC delimiter."""
        assert AUTO_SIGNATURE_PATTERNS.matches("--")
        assert not AUTO_SIGNATURE_PATTERNS.matches("---")
        assert not AUTO_SIGNATURE_PATTERNS.matches("-- John")

    def test_client_taglines(self) -> None:
        """Device and app taglines are detected case-insensitively."""
        assert AUTO_SIGNATURE_PATTERNS.matches("Sent from my Samsung Galaxy")
        assert AUTO_SIGNATURE_PATTERNS.matches("sent from my iPad")
        assert AUTO_SIGNATURE_PATTERNS.matches("Get Outlook for iOS")
        assert AUTO_SIGNATURE_PATTERNS.matches("Sent via Superhuman")
        assert AUTO_SIGNATURE_PATTERNS.matches("Sent with Spark")
        assert not AUTO_SIGNATURE_PATTERNS.matches("I sent from my laptop")

    def test_equals_divider(self) -> None:
        """Lines made only of = are dividers."""
        assert AUTO_SIGNATURE_PATTERNS.matches("=")
        assert AUTO_SIGNATURE_PATTERNS.matches("==========")
        assert not AUTO_SIGNATURE_PATTERNS.matches("a = b")

    def test_legal_notices(self) -> None:
        """Legal headers and boilerplate sentences are detected."""
        assert AUTO_SIGNATURE_PATTERNS.matches("DISCLAIMER: This email is private")
        assert AUTO_SIGNATURE_PATTERNS.matches("notice: do not forward")
        assert AUTO_SIGNATURE_PATTERNS.matches(
            "This message is confidential and intended solely for the named recipient."
        )
        assert not AUTO_SIGNATURE_PATTERNS.matches("The intended recipient is confidential.")

    def test_human_sign_off_not_matched(self) -> None:
        """Human sign-offs are not signatures."""
        assert not AUTO_SIGNATURE_PATTERNS.matches("Best regards,")
        assert not AUTO_SIGNATURE_PATTERNS.matches("Jane Smith")
        assert not AUTO_SIGNATURE_PATTERNS.matches("Product Manager")


class TestFooterPatterns:
    """Tests for mailing list footer detection."""

    def test_google_groups_footer(self) -> None:
        """Google Groups footer lines are detected."""
        assert MAILING_LIST_PATTERNS.matches(
            'You received this message because you are subscribed to the Google Groups "eng" group.'
        )
        assert MAILING_LIST_PATTERNS.matches("To unsubscribe from this group and stop receiving emails from it")
        assert MAILING_LIST_PATTERNS.matches("To view this discussion visit https://groups.google.com/")

    def test_marketing_footer(self) -> None:
        """Marketing footer lines are detected."""
        assert MAILING_LIST_PATTERNS.matches("This email was sent to john@example.com")
        assert MAILING_LIST_PATTERNS.matches("Update your preferences")
        assert MAILING_LIST_PATTERNS.matches("Tap here to unsubscribe")
        assert MAILING_LIST_PATTERNS.matches("If you don't want to receive these emails")
        assert MAILING_LIST_PATTERNS.matches("If you no longer wish to receive our newsletter")

    def test_footer_rules_are_start_anchored(self) -> None:
        """Footer phrases in the middle of a sentence are not footers."""
        assert not MAILING_LIST_PATTERNS.matches("Please click here to unsubscribe me")
        assert not MAILING_LIST_PATTERNS.matches("To resolve this issue, please contact support")


class TestStripArtifacts:
    """Tests for inline placeholder removal."""

    def test_image_reference(self) -> None:
        """[image: ...] is removed up to the first closing bracket."""
        assert strip_artifacts("See [image: a.png] here") == "See  here"
        assert strip_artifacts("[IMAGE: x][y]") == "[y]"

    def test_generic_and_cid(self) -> None:
        """[Image] and [cid:...] are removed case-insensitively."""
        assert strip_artifacts("a[image]b[cid:img001@domain.com]c") == "abc"

    def test_newlines_untouched(self) -> None:
        """Stripping never merges lines."""
        assert strip_artifacts("one\n[Image]\ntwo") == "one\n\ntwo"

    def test_no_artifacts_is_noop(self) -> None:
        """Text without placeholders is returned unchanged."""
        text = "Plain [note] text\n"
        assert strip_artifacts(text) == text
