#!/usr/bin/env python3
"""Evaluate body extraction against a labelled corpus.

Each JSONL record needs `email_text` and `expected_body`; `metadata` is
optional. Both clean_text() and EmailBodyParser.extract_visible_text()
are scored.

Usage:
    python scripts/evaluate.py data/test.jsonl
    python scripts/evaluate.py data/test.jsonl --no-footers
    python scripts/evaluate.py data/test.jsonl --verbose --limit 100
"""

import argparse
import json
import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailbody import CATEGORIES, EmailBodyParser, LineClassifier, Normalizer, clean_text


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace for content comparison."""
    lines = [line.strip() for line in text.strip().split("\n")]
    return "\n".join(line for line in lines if line)


@dataclass
class MethodScore:
    """Match counts for one extraction method."""

    exact_matches: int = 0
    content_matches: int = 0
    failures: list[dict] = field(default_factory=list)

    def rate(self, count: int, total: int) -> float:
        return count / total if total > 0 else 0.0


@dataclass
class EvaluationResults:
    """Aggregated evaluation results."""

    total: int = 0
    cleaner: MethodScore = field(default_factory=MethodScore)
    parser: MethodScore = field(default_factory=MethodScore)
    line_categories: Counter = field(default_factory=Counter)
    rule_hits: Counter = field(default_factory=Counter)


def load_test_data(path: Path) -> list[dict]:
    """Load test data from JSONL file."""
    examples = []
    with open(path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                print(f"Warning: Skipping invalid JSON at line {line_num}: {e}")
                continue
            if "email_text" not in data or "expected_body" not in data:
                print(f"Warning: Skipping line {line_num}: needs email_text and expected_body")
                continue
            examples.append(data)
    return examples


def score(method: MethodScore, example: dict, extracted: str) -> bool:
    """Record one extraction result. Returns True on a content match."""
    expected = example["expected_body"]

    if extracted.strip() == expected.strip():
        method.exact_matches += 1
    content_match = normalize_whitespace(extracted) == normalize_whitespace(expected)
    if content_match:
        method.content_matches += 1
    else:
        method.failures.append({**example, "extracted": extracted})
    return content_match


def evaluate_single(
    example: dict,
    parser: EmailBodyParser,
    classifier: LineClassifier,
    results: EvaluationResults,
    verbose: bool = False,
) -> None:
    """Evaluate both extraction methods on a single example."""
    text = example["email_text"]

    for classified in classifier.classify_lines(Normalizer().normalize(text).lines):
        results.line_categories[classified.category] += 1
        if classified.rule is not None:
            results.rule_hits[classified.rule.description] += 1

    cleaned = clean_text(text)
    visible = parser.extract_visible_text(text)

    cleaner_ok = score(results.cleaner, example, cleaned)
    parser_ok = score(results.parser, example, visible)

    if verbose and not (cleaner_ok and parser_ok):
        template_type = example.get("metadata", {}).get("template_type", "unknown")
        print(f"\n--- Mismatch ({template_type}) ---")
        print(f"Expected ({len(example['expected_body'])} chars):")
        print(example["expected_body"][:200])
        if not cleaner_ok:
            print(f"\nclean_text ({len(cleaned)} chars):")
            print(cleaned[:200])
        if not parser_ok:
            print(f"\nvisible text ({len(visible)} chars):")
            print(visible[:200])


def print_method(name: str, method: MethodScore, total: int) -> None:
    """Print scores for one method."""
    print(f"\n--- {name} ---")
    print(f"Content match rate:  {100 * method.rate(method.content_matches, total):.2f}% "
          f"({method.content_matches}/{total})")
    print(f"Exact match rate:    {100 * method.rate(method.exact_matches, total):.2f}% "
          f"({method.exact_matches}/{total})")

    if method.failures:
        failure_types = Counter(f.get("metadata", {}).get("template_type", "unknown") for f in method.failures)
        print("Failures by template type:")
        for template_type, count in failure_types.most_common():
            print(f"  {template_type}: {count}")


def print_results(results: EvaluationResults):
    """Print evaluation results summary."""
    print("\n" + "=" * 60)
    print("EVALUATION RESULTS")
    print("=" * 60)
    print(f"\nTotal examples:      {results.total}")

    print_method("clean_text", results.cleaner, results.total)
    print_method("EmailBodyParser.extract_visible_text", results.parser, results.total)

    print("\n--- Line Categories ---")
    for category in CATEGORIES:
        print(f"{category:<20} {results.line_categories[category]:>8}")

    if results.rule_hits:
        print("\n--- Rule Hits ---")
        for description, count in results.rule_hits.most_common():
            print(f"  {description:<36} {count:>8}")

    print("\n" + "=" * 60)


def main():
    parser = argparse.ArgumentParser(description="Evaluate email body extraction")
    parser.add_argument("test_data", type=Path, help="Path to JSONL test data file")
    parser.add_argument("--no-footers", action="store_true", help="Keep mailing list footers in parser output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print details for each mismatch")
    parser.add_argument("--limit", "-n", type=int, default=None, help="Limit number of examples to evaluate")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.test_data.exists():
        print(f"Error: Test data file not found: {args.test_data}")
        sys.exit(1)

    print(f"Loading test data from {args.test_data}...")
    examples = load_test_data(args.test_data)
    print(f"Loaded {len(examples)} test examples")

    if args.limit:
        examples = examples[:args.limit]
        print(f"Limiting to {len(examples)} examples")

    email_parser = EmailBodyParser(remove_mailing_list_footers=not args.no_footers)
    classifier = LineClassifier(detect_footers=not args.no_footers)

    print("Evaluating...")
    results = EvaluationResults()

    for i, example in enumerate(examples):
        results.total += 1
        evaluate_single(example, email_parser, classifier, results, verbose=args.verbose)

        if (i + 1) % 500 == 0:
            print(f"  Processed {i + 1}/{len(examples)}")

    print_results(results)


if __name__ == "__main__":
    main()
