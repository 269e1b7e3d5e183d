"""Load rule sets from YAML files.

File format:

    name: quotes
    rules:
      - pattern: "^>+"
        description: Traditional quote prefix
        example: "> previous message text"
        flags: [IGNORECASE]

`name` defaults to the file stem; `description`, `example` and `flags` are
optional per rule.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path

import yaml

from mailbody.exceptions import RuleSetError
from mailbody.patterns.rules import FLAG_NAMES, PatternRule, RuleSet

logger = logging.getLogger(__name__)


def load_rule_set(path: Path | str) -> RuleSet:
    """Load a rule set from a YAML file.

    Args:
        path: Path to the rule file.

    Returns:
        RuleSet with rules in file order.

    Raises:
        RuleSetError: If the file cannot be read, parsed, or compiled.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise RuleSetError(message=f"Cannot read rule file: {exc.strerror}", source=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise RuleSetError(message="Rule file is not valid UTF-8", source=str(path)) from exc
    except yaml.YAMLError as exc:
        raise RuleSetError(message="Invalid YAML in rule file", source=str(path)) from exc

    if data is None:
        data = {}
    if isinstance(data, Mapping) and "name" not in data:
        data = {**data, "name": path.stem}

    rule_set = rule_set_from_mapping(data, source=str(path))
    logger.info("Loaded %d rules for %s from %s", len(rule_set), rule_set.name, path)
    return rule_set


def rule_set_from_mapping(data: object, source: str | None = None) -> RuleSet:
    """Build a rule set from already-parsed data.

    Args:
        data: Mapping with `name` and `rules` keys (see module docstring).
        source: Where the data came from, for error messages.

    Returns:
        RuleSet with rules in the given order.

    Raises:
        RuleSetError: If the structure is wrong or a pattern does not compile.
    """
    if not isinstance(data, Mapping):
        raise RuleSetError(message="Rule data must be a mapping", source=source)

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise RuleSetError(message="Rule set needs a non-empty 'name'", source=source)

    raw_rules = data.get("rules", [])
    if not isinstance(raw_rules, list):
        raise RuleSetError(message="'rules' must be a list", source=source)

    rules = tuple(_build_rule(entry, idx, source) for idx, entry in enumerate(raw_rules))
    return RuleSet(name=name, rules=rules)


def _build_rule(entry: object, idx: int, source: str | None) -> PatternRule:
    """Build one rule from a mapping entry."""
    if not isinstance(entry, Mapping):
        raise RuleSetError(message=f"Rule {idx} must be a mapping", source=source)

    pattern = entry.get("pattern")
    if not isinstance(pattern, str) or not pattern:
        raise RuleSetError(message=f"Rule {idx} is missing 'pattern'", source=source)

    flag_names = entry.get("flags")
    if flag_names is None:
        flag_names = []
    if isinstance(flag_names, str):
        flag_names = [flag_names]
    if not isinstance(flag_names, list):
        raise RuleSetError(message=f"Rule {idx} 'flags' must be a list", source=source)

    flags = 0
    for flag_name in flag_names:
        if flag_name not in FLAG_NAMES:
            raise RuleSetError(message=f"Rule {idx} has unknown flag '{flag_name}'", source=source)
        flags |= getattr(re, flag_name)

    try:
        compiled = re.compile(pattern, flags)
    except (re.error, ValueError) as exc:
        raise RuleSetError(message=f"Rule {idx} pattern does not compile: {exc}", source=source) from exc

    return PatternRule(
        pattern=compiled,
        description=str(entry.get("description") or pattern),
        example=str(entry.get("example") or ""),
    )
