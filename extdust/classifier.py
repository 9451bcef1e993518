"""
Extension classification.

Suffixes that look like versions or hashes ("file.1", "blob.8f3a9c") are folded
into a single NO_EXTENSION bucket so the report doesn't grow one row per file.
"""
from __future__ import annotations

import os

NO_EXTENSION = "no extension"
MAX_EXTENSION_LENGTH = 4


def is_standard_extension(ext: str) -> bool:
    """True for 1-4 letters/digits with at least one letter."""
    if not ext or len(ext) > MAX_EXTENSION_LENGTH:
        return False
    has_letter = False
    for ch in ext:
        if not ch.isalpha() and not ch.isdecimal():
            return False
        if ch.isalpha():
            has_letter = True
    return has_letter


def classify_extension(path: str) -> str:
    """Return the lower-cased extension key for ``path`` or NO_EXTENSION."""
    name = os.path.basename(path)
    _, dot, suffix = name.rpartition(".")
    if not dot:
        return NO_EXTENSION
    suffix = suffix.lower()
    if not is_standard_extension(suffix):
        return NO_EXTENSION
    return suffix
