# happy_thoughts/validation.py
"""
Message validation for new thoughts.

``validate_message`` is a pure function: it never touches the store and
returns the list of violated rules (empty when the message is valid).
"""

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

MIN_LENGTH = 5
MAX_LENGTH = 140


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    kind: str  # required | minlength | maxlength
    message: str
    length: Optional[int] = None

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data.pop("field")
        return data


def validate_message(value: Optional[str]) -> List[ValidationIssue]:
    if value is None or value == "":
        return [ValidationIssue("message", "required", "Message is required")]

    length = len(value)
    issues: List[ValidationIssue] = []

    if length < MIN_LENGTH:
        issues.append(
            ValidationIssue(
                "message",
                "minlength",
                f"Message must be at least {MIN_LENGTH} characters. "
                f"Your message has {length} characters.",
                length,
            )
        )
    if length > MAX_LENGTH:
        issues.append(
            ValidationIssue(
                "message",
                "maxlength",
                f"The maximum length of a message is {MAX_LENGTH} characters. "
                f"Your message has {length} characters.",
                length,
            )
        )

    return issues


def issues_by_field(issues: List[ValidationIssue]) -> Dict[str, Dict[str, object]]:
    """
    Key issues by field name, first issue wins per field.
    """
    out: Dict[str, Dict[str, object]] = {}
    for issue in issues:
        out.setdefault(issue.field, issue.to_dict())
    return out
