"""Text normalization ahead of line classification.

Handles:
- Coercion of non-text input to the empty string
- Line ending normalization (CRLF to LF, optional)
- Inline artifact stripping ([image: ...], [Image], [cid:...])
"""

import logging
from dataclasses import dataclass

from mailbody.patterns.artifacts import ARTIFACT_PATTERNS, strip_artifacts
from mailbody.patterns.rules import RuleSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """Result of normalizing an email body.

    Attributes:
        lines: Lines split on LF, without line endings. Empty for empty input.
        text: Full normalized text.
    """

    lines: tuple[str, ...]
    text: str


class Normalizer:
    """Prepares raw body text for line-by-line classification.

    Applies the following transformations:
    1. Non-text input becomes ""
    2. CRLF to LF (only when normalize_line_endings is set)
    3. Artifact stripping
    4. Split on LF
    """

    def __init__(
        self,
        *,
        normalize_line_endings: bool = True,
        artifact_rules: RuleSet = ARTIFACT_PATTERNS,
    ) -> None:
        """Initialize the normalizer.

        Args:
            normalize_line_endings: If True, convert CRLF to LF before splitting.
                Bare CR is left alone.
            artifact_rules: Inline placeholder patterns to remove.
        """
        self._normalize_line_endings = normalize_line_endings
        self._artifact_rules = artifact_rules

    @staticmethod
    def coerce(value: object) -> str:
        """Return value if it is a string, otherwise the empty string."""
        if isinstance(value, str):
            return value
        if value is not None:
            logger.warning("Non-text input of type %s treated as empty", type(value).__name__)
        return ""

    def strip_artifacts(self, text: str) -> str:
        """Remove inline placeholders without touching line breaks."""
        return strip_artifacts(text, self._artifact_rules)

    def normalize(self, value: object) -> NormalizedText:
        """Normalize body text.

        Args:
            value: Raw body text. Anything that is not a str counts as empty.

        Returns:
            NormalizedText with the processed text and its lines.
        """
        text = self.coerce(value)
        if not text:
            return NormalizedText(lines=(), text="")

        if self._normalize_line_endings:
            text = text.replace("\r\n", "\n")

        text = self.strip_artifacts(text)

        return NormalizedText(lines=tuple(text.split("\n")), text=text)
