"""
eidinfo Field Validators

Predicates over raw card values. Each predicate is a plain function taking
the raw value and returning a bool; tags reference them directly.

All predicates are pure and never raise.
"""
from __future__ import annotations

import re
from typing import Any, Callable

__all__ = [
    'Validator',
    'PERSONAL_NUMBER_PATTERN',
    'always_valid',
    'always_invalid',
    'is_personal_number',
]

Validator = Callable[[Any], bool]

# 13 ASCII digits, nothing else. [0-9] rather than \d so that Unicode
# digits are rejected; fullmatch so that a trailing newline is rejected.
PERSONAL_NUMBER_PATTERN = re.compile(r'[0-9]{13}')


def always_valid(value: Any) -> bool:
    """Accept any value."""
    return True


def always_invalid(value: Any) -> bool:
    """Reject any value."""
    return False


def is_personal_number(value: Any) -> bool:
    """
    Check whether a value is formatted as a personal number (JMBG).

    Only the format is checked. The last digit is a mod 11 checksum, but
    numbers with an incorrect checksum have been issued and are in use,
    so the checksum is deliberately not verified.

    Args:
        value: Raw value read from the card

    Returns:
        True if value is a string of exactly 13 ASCII digits
    """
    if not isinstance(value, str):
        return False
    return PERSONAL_NUMBER_PATTERN.fullmatch(value) is not None
