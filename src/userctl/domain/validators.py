"""Field validators for user records.

Pure predicates over raw strings. They accept ``None`` and never raise.

The password rule is intentionally weaker than what the generator
produces: only a minimum length is enforced, no character classes.
"""

from __future__ import annotations

import re

MIN_PASSWORD_LENGTH = 6

# local@label.label[.label...]; no whitespace, no second '@', no empty labels.
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"[^@\s]+@[^@\s.]+(?:\.[^@\s.]+)+")

FIELDS: tuple[str, str, str] = ("name", "password", "email")


def is_valid_name(value: str | None) -> bool:
    """True iff *value* contains at least one non-whitespace character.

    Examples:
        >>> is_valid_name(" John ")
        True
        >>> is_valid_name("\\t\\n")
        False
    """
    return value is not None and bool(value.strip())


def is_valid_password(value: str | None) -> bool:
    """True iff the trimmed *value* is at least ``MIN_PASSWORD_LENGTH`` long."""
    return value is not None and len(value.strip()) >= MIN_PASSWORD_LENGTH


def is_valid_email(value: str | None) -> bool:
    """True iff *value* has the ``local@domain.tld`` shape.

    Examples:
        >>> is_valid_email("user+tag@mail.co.uk")
        True
        >>> is_valid_email("user@.com")
        False
    """
    if value is None:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_user(name: str | None, password: str | None, email: str | None) -> list[str]:
    """Return the names of the fields that fail validation, in field order."""
    checks = (is_valid_name(name), is_valid_password(password), is_valid_email(email))
    return [field for field, ok in zip(FIELDS, checks, strict=True) if not ok]
