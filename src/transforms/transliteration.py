"""Unicode-to-ASCII sanitization transform.

This module transliterates human-readable strings into ASCII
approximations so downstream catalogs never see ambiguous glyphs.
"""

from __future__ import annotations

from unidecode import unidecode


def sanitize(text: str) -> str:
    """Transliterate text into its closest ASCII approximation.

    Cyrillic, accented Latin, CJK, and other scripts map character by
    character; code points without an approximation are dropped.

    Args:
        text: Arbitrary Unicode text.

    Returns:
        ASCII-only text, unchanged when the input is already ASCII.
    """
    return unidecode(text, errors="ignore")
