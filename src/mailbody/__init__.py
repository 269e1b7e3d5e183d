"""mailbody - Extract the human-written part of plain-text email bodies."""

from mailbody.exceptions import MailbodyError, RuleSetError
from mailbody.parser import EmailBodyParser, ParserOptions
from mailbody.patterns import (
    ARTIFACT_PATTERNS,
    AUTO_SIGNATURE_PATTERNS,
    MAILING_LIST_PATTERNS,
    QUOTE_PATTERNS,
    PatternRule,
    RuleSet,
    load_rule_set,
    rule_set_from_mapping,
)
from mailbody.pipeline import (
    CATEGORIES,
    Category,
    ClassifiedLine,
    Fragment,
    LineClassifier,
    NormalizedText,
    Normalizer,
    ParsedEmail,
    Segmenter,
    TextCleaner,
    clean_text,
)

__version__ = "0.1.0"

__all__ = [
    "ARTIFACT_PATTERNS",
    "AUTO_SIGNATURE_PATTERNS",
    "CATEGORIES",
    "Category",
    "ClassifiedLine",
    "EmailBodyParser",
    "Fragment",
    "LineClassifier",
    "MAILING_LIST_PATTERNS",
    "MailbodyError",
    "NormalizedText",
    "Normalizer",
    "ParsedEmail",
    "ParserOptions",
    "PatternRule",
    "QUOTE_PATTERNS",
    "RuleSet",
    "RuleSetError",
    "Segmenter",
    "TextCleaner",
    "clean_text",
    "load_rule_set",
    "rule_set_from_mapping",
]
