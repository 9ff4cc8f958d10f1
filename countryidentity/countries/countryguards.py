"""
Country Key Guards
------------------

Pure validation predicates for the three ISO 3166-1 identifier shapes and
for country names. Guards never normalize: case folding happens at lookup
time. Each guard returns its input unchanged when it passes.

  guard_alpha2("us")     -> 'us'
  guard_alpha2("USA")    -> MalformedKeyError
  guard_numeric("004")   -> '004'
  guard_numeric(4)       -> InvalidInputError
  guard_name("   ")      -> EmptyNameError
"""

import re
from typing import Any

from countryidentity.countries.countryerrors import (
    EmptyNameError,
    InvalidInputError,
    MalformedKeyError,
)

KEY_ALPHA2 = "alpha2"
KEY_ALPHA3 = "alpha3"
KEY_NUMERIC = "numeric"
KEY_NAME = "name"

# Order matters: it is the order the validators report missing fields in.
KEYS = (KEY_NAME, KEY_ALPHA2, KEY_ALPHA3, KEY_NUMERIC)

ALPHA2_RE = re.compile(r"^[a-zA-Z]{2}$")
ALPHA3_RE = re.compile(r"^[a-zA-Z]{3}$")
NUMERIC_RE = re.compile(r"^[0-9]{3}$")


def guard_string(value: Any, param: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(param, value)
    return value


def _guard_shape(value: Any, key: str, pattern: re.Pattern) -> str:
    guard_string(value, key)
    # fullmatch rejects a trailing newline that "$" would let through
    if pattern.fullmatch(value) is None:
        raise MalformedKeyError(key, value)
    return value


def guard_alpha2(value: Any) -> str:
    """Assert that value looks like an alpha2 key (two ASCII letters, any case)."""
    return _guard_shape(value, KEY_ALPHA2, ALPHA2_RE)


def guard_alpha3(value: Any) -> str:
    """Assert that value looks like an alpha3 key (three ASCII letters, any case)."""
    return _guard_shape(value, KEY_ALPHA3, ALPHA3_RE)


def guard_numeric(value: Any) -> str:
    """Assert that value looks like a numeric key.

    Exactly three ASCII digits in string form; "12" and "1234" are rejected
    and leading zeros are required ("004").
    """
    return _guard_shape(value, KEY_NUMERIC, NUMERIC_RE)


def guard_name(value: Any) -> str:
    """Assert that value is a string with non-whitespace content."""
    guard_string(value, KEY_NAME)
    if value.strip() == "":
        raise EmptyNameError(value)
    return value


def is_alpha2(value: Any) -> bool:
    return isinstance(value, str) and ALPHA2_RE.fullmatch(value) is not None


def is_alpha3(value: Any) -> bool:
    return isinstance(value, str) and ALPHA3_RE.fullmatch(value) is not None


def is_numeric(value: Any) -> bool:
    return isinstance(value, str) and NUMERIC_RE.fullmatch(value) is not None


# Field name -> guard, in reporting order
KEY_GUARDS = {
    KEY_NAME: guard_name,
    KEY_ALPHA2: guard_alpha2,
    KEY_ALPHA3: guard_alpha3,
    KEY_NUMERIC: guard_numeric,
}


__all__ = [
    "KEY_ALPHA2",
    "KEY_ALPHA3",
    "KEY_NUMERIC",
    "KEY_NAME",
    "KEYS",
    "KEY_GUARDS",
    "guard_string",
    "guard_alpha2",
    "guard_alpha3",
    "guard_numeric",
    "guard_name",
    "is_alpha2",
    "is_alpha3",
    "is_numeric",
]
