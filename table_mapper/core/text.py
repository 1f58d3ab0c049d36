"""Text scanning helpers."""

from __future__ import annotations

# Code points above this value count as extended; 256 itself does not.
EXTENDED_CHARACTER_THRESHOLD = 256


def has_extended_characters(text: str | None) -> bool:
    """Check whether a string contains extended characters.

    Returns True on the first character whose code point exceeds 256.
    None and the empty string return False.
    """
    if not text:
        return False
    return any(ord(char) > EXTENDED_CHARACTER_THRESHOLD for char in text)
