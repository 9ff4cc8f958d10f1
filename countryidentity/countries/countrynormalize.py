"""
Country Key Normalization Functions
-----------------------------------

  1. fold_country_key: Unicode case folding used by every lookup comparison
  2. canonicalize_country_name: Light normalization for storage (trim)
  3. canonicalize_code: Upper-case an alpha2/alpha3/currency code
  4. pad_numeric: Zero-pad a numeric code to three digits

Examples:
  >>> fold_country_key("CÔTE D'IVOIRE")
  "côte d'ivoire"

  >>> canonicalize_country_name("  Viet Nam ")
  'Viet Nam'

  >>> canonicalize_code("us")
  'US'

  >>> pad_numeric("4")
  '004'
"""

from countryidentity.utils.normalize import fold_case as _fold_case


def fold_country_key(s: str) -> str:
    """Fold a stored or queried key value for comparison.

    Both sides of every lookup go through this function, so stored values
    and queries that differ only in case or unicode composition compare equal.
    """
    return _fold_case(s)


def canonicalize_country_name(s: str) -> str:
    if not s:
        return ""

    return s.strip()


def canonicalize_code(s: str) -> str:
    return s.strip().upper()


def pad_numeric(s: str) -> str:
    return f"{int(s):03d}"


__all__ = [
    "fold_country_key",
    "canonicalize_country_name",
    "canonicalize_code",
    "pad_numeric",
]
