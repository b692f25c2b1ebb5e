"""Phone number normalization used to match citizens to their submissions."""

import re

CANONICAL_LENGTH = 10

_NON_DIGITS = re.compile(r"\D")


def canonical_phone(raw: str | None) -> str:
    """
    Reduce a phone number to its comparison key.

    All non-digit characters are dropped and only the last 10 digits are kept,
    so "+91 98765-43210" and "9876543210" share the key "9876543210". Shorter
    numbers keep every digit, without padding.
    """
    if not raw:
        return ""
    digits = _NON_DIGITS.sub("", str(raw))
    return digits[-CANONICAL_LENGTH:]


def same_phone(a: str | None, b: str | None) -> bool:
    """True when both numbers have the same, non-empty canonical key."""
    key = canonical_phone(a)
    return bool(key) and key == canonical_phone(b)
