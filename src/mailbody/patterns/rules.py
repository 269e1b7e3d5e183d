"""Rule types shared by every pattern table.

A PatternRule tests a single stripped line. A RuleSet is an ordered,
immutable group of rules for one line category; the first matching rule
wins, so declaration order is part of the contract.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

# Flags that can be named in rule files, in the order they are reported back
FLAG_NAMES: tuple[str, ...] = ("ASCII", "DOTALL", "IGNORECASE", "MULTILINE", "UNICODE", "VERBOSE")


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A single line detector.

    Attributes:
        pattern: Compiled regex, tested with search(); anchors live in the regex.
        description: Human-readable label for the rule.
        example: Sample text the rule is meant to catch (documentation only).
    """

    pattern: re.Pattern[str]
    description: str
    example: str = ""

    def matches(self, line: str) -> bool:
        """Check whether the rule fires on a line.

        Args:
            line: A single line, normally already stripped.

        Returns:
            True if the pattern is found anywhere its anchors allow.
        """
        return self.pattern.search(line) is not None

    def to_mapping(self) -> dict[str, object]:
        """Serialize to the structure accepted by the rule loader."""
        data: dict[str, object] = {
            "pattern": self.pattern.pattern,
            "description": self.description,
            "example": self.example,
        }
        flags = [name for name in FLAG_NAMES if name != "UNICODE" and self.pattern.flags & getattr(re, name)]
        if flags:
            data["flags"] = flags
        return data


@dataclass(frozen=True, slots=True)
class RuleSet:
    """An ordered, read-only sequence of rules for one category.

    Attributes:
        name: Identifier used in logs and rule files.
        rules: Rules in evaluation order.
    """

    name: str
    rules: tuple[PatternRule, ...]

    def __iter__(self) -> Iterator[PatternRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def first_match(self, line: str) -> PatternRule | None:
        """Return the first rule that matches the line, or None."""
        for rule in self.rules:
            if rule.matches(line):
                return rule
        return None

    def matches(self, line: str) -> bool:
        """Check whether any rule in the set matches the line."""
        return self.first_match(line) is not None

    def extend(self, *rules: PatternRule, name: str | None = None) -> "RuleSet":
        """Build a new set with extra rules appended after the existing ones."""
        return RuleSet(name=name or self.name, rules=self.rules + tuple(rules))

    def to_mapping(self) -> dict[str, object]:
        """Serialize to the structure accepted by the rule loader."""
        return {"name": self.name, "rules": [rule.to_mapping() for rule in self.rules]}
