"""
Country Data Validators
-----------------------

Gate checks for caller-supplied replacement datasets. The whole collection
is checked in order and the first bad entry aborts validation; there is no
partial result.

Two variants:
  DataValidator      validate-only, returns the input unchanged (default)
  CountryValidator   validate-and-normalize: upper-cases codes and currencies,
                     zero-pads numeric codes, trims names

Required fields are checked in a fixed order: name, alpha2, alpha3, numeric.
Guard failures propagate unchanged (InvalidInputError, MalformedKeyError,
EmptyNameError).

Examples:
  >>> DataValidator().validate([{"alpha3": "FOO", "numeric": "001", "name": "Foo"}])
  MissingKeyError: Each data entry must have a alpha2 key (entry 0).

  >>> CountryValidator().validate_one(
  ...     {"name": " Foo ", "alpha2": "fo", "alpha3": "foo", "numeric": "001", "currency": "eur"})
  {'name': 'Foo', 'alpha2': 'FO', 'alpha3': 'FOO', 'numeric': '001', 'currency': ['EUR']}
"""

from __future__ import annotations
from collections.abc import Iterable, Mapping
from typing import Any

from countryidentity.countries.countryerrors import (
    InvalidInputError,
    MalformedKeyError,
    MissingKeyError,
)
from countryidentity.countries.countryguards import (
    ALPHA3_RE,
    KEY_ALPHA2,
    KEY_ALPHA3,
    KEY_GUARDS,
    KEY_NAME,
    KEY_NUMERIC,
    guard_string,
)
from countryidentity.countries.countrynormalize import (
    canonicalize_code,
    canonicalize_country_name,
    pad_numeric,
)

KEY_CURRENCY = "currency"


def _guard_entry(entry: Any, index: int) -> Mapping:
    if not isinstance(entry, Mapping):
        raise InvalidInputError(f"entry {index}", entry, expected="mapping")

    for key, guard in KEY_GUARDS.items():
        if entry.get(key) is None:
            raise MissingKeyError(key, index)
        guard(entry[key])

    return entry


class DataValidator:
    """Validate-only gate: every entry must carry well-formed identifiers.

    Currency and descriptive attributes are treated as opaque.
    """

    def validate(self, data: Iterable[Mapping]) -> list[Mapping]:
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise InvalidInputError("data", data, expected="iterable")

        data = list(data)
        for index, entry in enumerate(data):
            _guard_entry(entry, index)

        return data


class CountryValidator:
    """Validate-and-normalize gate.

    Returns new record dicts; the input is never modified. Descriptive
    attributes (adjectival, demonym, ...) are carried through unchanged.
    """

    def validate(self, data: Iterable[Mapping]) -> list[dict]:
        return self.validate_many(data)

    def validate_many(self, countries: Iterable[Mapping]) -> list[dict]:
        if isinstance(countries, (str, bytes)) or not isinstance(countries, Iterable):
            raise InvalidInputError("countries", countries, expected="iterable")

        return [self.validate_one(country, index) for index, country in enumerate(countries)]

    def validate_one(self, country: Mapping, index: int = 0) -> dict:
        _guard_entry(country, index)

        normalized = dict(country)
        normalized[KEY_NAME] = canonicalize_country_name(country[KEY_NAME])
        normalized[KEY_ALPHA2] = canonicalize_code(country[KEY_ALPHA2])
        normalized[KEY_ALPHA3] = canonicalize_code(country[KEY_ALPHA3])
        normalized[KEY_NUMERIC] = pad_numeric(country[KEY_NUMERIC])
        normalized[KEY_CURRENCY] = self.validate_currencies(country.get(KEY_CURRENCY))
        return normalized

    def validate_currencies(self, currencies: Any) -> list[str]:
        """Validate ISO 4217 alpha codes; a single code becomes a one-item list."""
        if currencies is None:
            return []
        if isinstance(currencies, str):
            return [self.validate_currency(currencies)]
        if not isinstance(currencies, Iterable):
            raise InvalidInputError(KEY_CURRENCY, currencies, expected="str or list")

        return [self.validate_currency(c) for c in currencies]

    def validate_currency(self, currency: Any) -> str:
        guard_string(currency, KEY_CURRENCY)
        if ALPHA3_RE.fullmatch(currency) is None:
            raise MalformedKeyError(KEY_CURRENCY, currency)
        return canonicalize_code(currency)


__all__ = [
    "DataValidator",
    "CountryValidator",
    "KEY_CURRENCY",
]
