"""Segmentation of an email body into typed fragments.

Consecutive lines with the same category are grouped into one Fragment.
Fragments come out in document order and are never merged or reordered
afterwards, so together they cover the whole (normalized) input.
"""

import logging
from dataclasses import dataclass, field

from mailbody.patterns.rules import RuleSet
from mailbody.pipeline.classifier import Category, LineClassifier
from mailbody.pipeline.normalizer import Normalizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Fragment:
    """A maximal run of lines sharing one category.

    Attributes:
        content: Lines joined with LF, leading and trailing newlines removed.
        category: Category shared by every line in the run.
    """

    content: str
    category: Category

    @property
    def is_hidden(self) -> bool:
        """True for anything that is not human-written body text."""
        return self.category != "BODY"

    @property
    def is_signature(self) -> bool:
        return self.category == "AUTO_SIGNATURE"

    @property
    def is_quoted(self) -> bool:
        return self.category == "QUOTE"

    def __str__(self) -> str:
        return self.content


def _join_fragments(fragments: tuple[Fragment, ...]) -> str:
    # Trailing "~" runs are leftovers of upstream truncation markers
    return "\n".join(fragment.content for fragment in fragments).rstrip("~")


@dataclass(frozen=True, slots=True)
class ParsedEmail:
    """Fragments of one email body plus text projections.

    Attributes:
        fragments: Fragments in document order.
    """

    fragments: tuple[Fragment, ...]

    @property
    def visible_text(self) -> str:
        """Content of non-hidden fragments joined with LF."""
        return _join_fragments(tuple(f for f in self.fragments if not f.is_hidden))

    @property
    def quoted_text(self) -> str:
        """Content of quoted fragments joined with LF."""
        return _join_fragments(tuple(f for f in self.fragments if f.is_quoted))

    def get_fragments(self) -> tuple[Fragment, ...]:
        return self.fragments

    def get_visible_text(self) -> str:
        return self.visible_text

    def get_quoted_text(self) -> str:
        return self.quoted_text


@dataclass(slots=True)
class _FragmentBuffer:
    """Scan state: lines collected for the fragment being built."""

    category: Category = "BODY"
    lines: list[str] = field(default_factory=list)

    def flush(self) -> Fragment:
        fragment = Fragment(content="\n".join(self.lines).strip("\n"), category=self.category)
        self.lines = []
        return fragment


class Segmenter:
    """Splits body text into ordered, typed fragments.

    CRLF is normalized to LF and inline artifacts are stripped before the
    text is split into lines. Each line is classified on its stripped text
    but stored verbatim.
    """

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        """Initialize the segmenter.

        Args:
            classifier: Line classifier to use. Defaults to the standard rules
                with footer detection on.
        """
        self._normalizer = Normalizer(normalize_line_endings=True)
        self._classifier = classifier or LineClassifier()

    @classmethod
    def from_rules(
        cls,
        *,
        quote_rules: RuleSet | None = None,
        signature_rules: RuleSet | None = None,
        footer_rules: RuleSet | None = None,
        detect_footers: bool = True,
    ) -> "Segmenter":
        """Build a segmenter around a classifier with the given rule sets."""
        return cls(
            LineClassifier(
                quote_rules=quote_rules,
                signature_rules=signature_rules,
                footer_rules=footer_rules,
                detect_footers=detect_footers,
            )
        )

    def segment(self, text: object) -> ParsedEmail:
        """Partition body text into fragments.

        Args:
            text: Raw body text. Empty or non-text input gives no fragments.

        Returns:
            ParsedEmail with fragments in document order.
        """
        normalized = self._normalizer.normalize(text)
        fragments: list[Fragment] = []
        buffer = _FragmentBuffer()

        for line in normalized.lines:
            category = self._classifier.classify(line)

            if category != buffer.category and buffer.lines:
                fragments.append(buffer.flush())

            buffer.category = category
            buffer.lines.append(line)

        if buffer.lines:
            fragments.append(buffer.flush())

        logger.debug("Segmented %d lines into %d fragments", len(normalized.lines), len(fragments))
        return ParsedEmail(fragments=tuple(fragments))
