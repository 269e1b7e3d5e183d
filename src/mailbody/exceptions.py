"""Exceptions for mailbody configuration errors.

Text operations never raise: any input, including empty or non-text
values, produces a result. Only rule-set configuration can fail.
"""

from dataclasses import dataclass


class MailbodyError(Exception):
    """Base exception for all mailbody errors."""

    pass


@dataclass
class RuleSetError(MailbodyError):
    """A rule set could not be loaded or built.

    Raised when:
    - The rule file cannot be read or is not valid YAML
    - A rule is missing its pattern or uses an unknown regex flag
    - A pattern fails to compile

    Attributes:
        message: Description of the error.
        source: File path or other origin of the rule data, if known.
    """

    message: str
    source: str | None = None

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} ({self.source})"
        return self.message
