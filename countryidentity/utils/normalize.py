"""Shared text normalization utilities.

This module provides the unicode-aware text helpers used by the country
lookup core and the record validators.
"""

import unicodedata


def fold_case(s: str) -> str:
    """Unicode-aware case folding for comparisons.

    Transformations:
      1. Unicode normalization (NFC), so composed and decomposed forms compare equal
      2. Full case folding (str.casefold, not ASCII-only lowering)

    Args:
        s: Raw text

    Returns:
        Folded string suitable for equality and prefix comparison

    Examples:
        >>> fold_case("Åland Islands")
        'åland islands'

        >>> fold_case("CÔTE D'IVOIRE") == fold_case("Côte d'Ivoire")
        True
    """
    if not s:
        return ""

    return unicodedata.normalize("NFC", s).casefold()


def split_multi_value(s: str, sep: str = "|") -> list[str]:
    """Split a `sep`-joined table cell into its non-empty parts.

    Examples:
        >>> split_multi_value("NAD|ZAR")
        ['NAD', 'ZAR']

        >>> split_multi_value("")
        []
    """
    if not s:
        return []

    return [part.strip() for part in s.split(sep) if part.strip()]


__all__ = [
    "fold_case",
    "split_multi_value",
]
