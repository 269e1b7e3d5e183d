"""Pipeline components for email body cleaning and segmentation."""

from mailbody.pipeline.classifier import CATEGORIES, Category, ClassifiedLine, LineClassifier
from mailbody.pipeline.cleaner import TextCleaner, clean_text
from mailbody.pipeline.normalizer import NormalizedText, Normalizer
from mailbody.pipeline.segmenter import Fragment, ParsedEmail, Segmenter

__all__ = [
    "CATEGORIES",
    "Category",
    "ClassifiedLine",
    "Fragment",
    "LineClassifier",
    "NormalizedText",
    "Normalizer",
    "ParsedEmail",
    "Segmenter",
    "TextCleaner",
    "clean_text",
]
