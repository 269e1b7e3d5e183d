#!/usr/bin/env python
"""Inspect how an email body is classified, line by line.

Usage:
    python scripts/inspect_example.py message.txt                     # Plain text file
    python scripts/inspect_example.py data/test.jsonl --jsonl -i 12   # Example 12 of a JSONL file
    python scripts/inspect_example.py message.txt --no-footers        # Footer rules off
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mailbody import EmailBodyParser, LineClassifier, Normalizer, TextCleaner, load_rule_set

SHORT_NAMES = {
    "BODY": "BODY",
    "QUOTE": "QUOTE",
    "AUTO_SIGNATURE": "SIG",
    "MAILING_LIST_FOOTER": "FOOTER",
}


def load_example(path: Path, index: int) -> dict:
    """Load example at index from JSONL file."""
    with open(path, encoding="utf-8") as f:
        for i, line in enumerate(f):
            if i == index:
                return json.loads(line)
    raise ValueError(f"Index {index} not found")


def print_line_table(text: str, classifier: LineClassifier) -> None:
    """Print one row per line with category and matching rule."""
    lines = Normalizer().normalize(text).lines

    print(f"{'#':>4}  {'Category':<8}  {'Rule':<34}  Text")
    print("-" * 100)
    for idx, result in enumerate(classifier.classify_lines(lines)):
        rule = result.rule.description if result.rule else ""
        shown = result.text if len(result.text) <= 50 else result.text[:47] + "..."
        print(f"{idx:>4}  {SHORT_NAMES[result.category]:<8}  {rule:<34}  {shown!r}")


def print_fragments(text: str, parser: EmailBodyParser) -> None:
    """Print the fragment list produced by the parser."""
    email = parser.parse(text)

    print(f"\n--- Fragments ({len(email.fragments)}) ---")
    for idx, fragment in enumerate(email.fragments):
        flags = []
        if fragment.is_hidden:
            flags.append("hidden")
        if fragment.is_quoted:
            flags.append("quoted")
        if fragment.is_signature:
            flags.append("signature")
        print(f"[{idx}] {fragment.category} ({', '.join(flags) or 'visible'})")
        for line in fragment.content.split("\n"):
            print(f"    | {line}")


def main():
    parser = argparse.ArgumentParser(description="Show line categories for an email body")
    parser.add_argument("source", type=Path, help="Text file, or JSONL file with --jsonl")
    parser.add_argument("--index", "-i", type=int, default=0, help="Example index (with --jsonl)")
    parser.add_argument("--jsonl", action="store_true", help="Read email_text from a JSONL example")
    parser.add_argument("--no-footers", action="store_true", help="Disable mailing list footer rules")
    parser.add_argument("--quote-rules", type=Path, help="YAML file replacing the quote rules")
    parser.add_argument("--signature-rules", type=Path, help="YAML file replacing the signature rules")
    parser.add_argument("--footer-rules", type=Path, help="YAML file replacing the footer rules")

    args = parser.parse_args()

    if not args.source.exists():
        print(f"Error: File not found: {args.source}")
        sys.exit(1)

    if args.jsonl:
        text = load_example(args.source, args.index)["email_text"]
    else:
        text = args.source.read_text(encoding="utf-8")

    quote_rules = load_rule_set(args.quote_rules) if args.quote_rules else None
    signature_rules = load_rule_set(args.signature_rules) if args.signature_rules else None
    footer_rules = load_rule_set(args.footer_rules) if args.footer_rules else None

    classifier = LineClassifier(
        quote_rules=quote_rules,
        signature_rules=signature_rules,
        footer_rules=footer_rules,
        detect_footers=not args.no_footers,
    )
    email_parser = EmailBodyParser(
        remove_mailing_list_footers=not args.no_footers,
        quote_rules=quote_rules,
        signature_rules=signature_rules,
        footer_rules=footer_rules,
    )

    cleaner = TextCleaner(
        quote_rules=quote_rules,
        signature_rules=signature_rules,
        footer_rules=footer_rules,
    )

    print_line_table(text, classifier)
    print_fragments(text, email_parser)

    print("\n--- clean_text ---")
    print(cleaner.clean(text))


if __name__ == "__main__":
    main()
