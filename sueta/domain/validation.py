"""
Field validation rules.

Each rule takes a value and returns a reason string or ``None``. Rules for a
field run in order and the first failure wins. Every rule except
``required`` treats a missing or empty value as valid, so optional fields
are only checked when present.
"""

import re
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from sueta.domain.errors import ValidationErrors, ValidationFailed

Rule = Callable[[Any], Optional[str]]

_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
_ASCII = re.compile(r"[\x00-\x7f]+")


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def required(value: Any) -> Optional[str]:
    if _is_empty(value):
        return "cannot be blank"
    return None


def length(min_length: int, max_length: int) -> Rule:
    def rule(value: Any) -> Optional[str]:
        if _is_empty(value):
            return None
        if not min_length <= len(value) <= max_length:
            return f"the length must be between {min_length} and {max_length}"
        return None

    return rule


def alphanumeric(value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    if not _ALPHANUMERIC.fullmatch(value):
        return "must contain English letters and digits only"
    return None


def ascii_only(value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    if not _ASCII.fullmatch(value):
        return "must contain ASCII characters only"
    return None


def email(value: Any) -> Optional[str]:
    if _is_empty(value):
        return None
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return "must be a valid email address"
    return None


def collect_errors(fields: Iterable[Tuple[str, Any, Iterable[Rule]]]) -> ValidationErrors:
    """Run the rules of every ``(name, value, rules)`` entry."""
    errors = ValidationErrors()
    for name, value, rules in fields:
        for rule in rules:
            reason = rule(value)
            if reason is not None:
                errors[name] = reason
                break
    return errors


def raise_for_errors(errors: Mapping[str, str]) -> None:
    if errors:
        raise ValidationFailed(errors)
