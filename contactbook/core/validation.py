"""Field rules for contact drafts.

Rules run in field order and stop at the first failure, so a draft with
several problems reports only the earliest one.
"""

import re
from typing import Callable, Mapping

from contactbook.core.errors import ValidationError
from contactbook.domain.models.contact import CONTACT_FIELDS, ContactDraft

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 15

EMAIL_PATTERN = re.compile(r"^[^@]+@[^@]+\.[^@]+$")


def _check_first_name(value: str) -> str | None:
    if not value:
        return "First name is required"
    if len(value) > NAME_MAX_LENGTH:
        return "First name is too long"
    return None


def _check_last_name(value: str) -> str | None:
    if not value:
        return "Last name is required"
    if len(value) > NAME_MAX_LENGTH:
        return "Last name is too long"
    return None


def _check_email(value: str) -> str | None:
    # Length first: an overlong address fails on length whatever its shape
    if len(value) > EMAIL_MAX_LENGTH:
        return "Email is too long"
    if not EMAIL_PATTERN.match(value):
        return "Please enter a valid email address"
    return None


def _check_phone_number(value: str) -> str | None:
    # Counts characters as typed, punctuation included
    if len(value) < PHONE_MIN_LENGTH:
        return "Phone number should be at least 10 characters"
    if len(value) > PHONE_MAX_LENGTH:
        return "Phone number is too long"
    return None


RULES: dict[str, Callable[[str], str | None]] = {
    "first_name": _check_first_name,
    "last_name": _check_last_name,
    "email": _check_email,
    "phone_number": _check_phone_number,
}


def validate_fields(fields: Mapping[str, str]) -> None:
    """Validate the given subset of contact fields.

    Only fields present in ``fields`` are checked, which lets partial
    updates validate just what they change.

    Raises:
        ValidationError: With the message of the first failing rule
    """
    for name in CONTACT_FIELDS:
        if name not in fields:
            continue
        message = RULES[name](fields[name])
        if message is not None:
            raise ValidationError(message)


def validate_draft(draft: ContactDraft) -> None:
    """Validate every field of a draft.

    Raises:
        ValidationError: With the message of the first failing rule
    """
    validate_fields(draft.fields())
