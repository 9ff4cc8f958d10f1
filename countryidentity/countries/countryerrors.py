"""Exceptions raised by the country lookup core.

Each error derives from CountryIdentityError and from the closest builtin,
so callers may catch either the package base or the builtin category
(TypeError, ValueError, LookupError).
"""

from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence


class CountryIdentityError(Exception):
    """Base class for all country lookup errors."""


class InvalidInputError(CountryIdentityError, TypeError):
    """Raised when a non-string is passed where a string identifier is required."""

    def __init__(self, param: str, value: Any, expected: str = "str"):
        self.param = param
        self.value = value
        super().__init__(
            f"Expected {param} to be of type {expected}, got: {type(value).__name__}"
        )


class MalformedKeyError(CountryIdentityError, ValueError):
    """Raised when a string does not have the alpha2, alpha3 or numeric shape."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Not a valid {key} key: {value}")


class EmptyNameError(CountryIdentityError, ValueError):
    def __init__(self, value: str = ""):
        self.value = value
        super().__init__("Expected non-empty name, got empty string")


class MissingKeyError(CountryIdentityError, ValueError):
    """Raised when a data entry lacks a required field."""

    def __init__(self, key: str, index: Optional[int] = None):
        self.key = key
        self.index = index
        where = "" if index is None else f" (entry {index})"
        super().__init__(f"Each data entry must have a {key} key{where}.")


class MissingAlpha3Error(MissingKeyError):
    def __init__(self, index: Optional[int] = None):
        super().__init__("alpha3", index)


class ForbiddenKeyError(CountryIdentityError, ValueError):
    """Raised when a Localizer is asked to overwrite an identifier field."""

    def __init__(self, key: str, forbidden: Iterable[str]):
        self.key = key
        self.forbidden = tuple(forbidden)
        super().__init__(
            f'Invalid value for key, got "{key}", key can not be: {", ".join(self.forbidden)}'
        )


class InvalidKeyError(CountryIdentityError, ValueError):
    def __init__(self, key: Any, allowed: Sequence[str]):
        self.key = key
        self.allowed = tuple(allowed)
        super().__init__(
            f'Invalid value for key, got "{key}", expected one of: {", ".join(self.allowed)}'
        )


class CountryNotFoundError(CountryIdentityError, LookupError):
    """Raised when a well-formed identifier matches no record.

    Attributes:
        key: Field searched (first field for combined lookups)
        value: Original, unfolded query value
        attempts: Every (key, value) pair that was tried, in order
    """

    def __init__(self, key: str, value: str, attempts: Optional[Sequence[tuple[str, str]]] = None):
        self.key = key
        self.value = value
        self.attempts = tuple(attempts) if attempts else ((key, value),)
        keys = " or ".join(f'"{k}"' for k, _ in self.attempts)
        super().__init__(f"No {keys} key found matching: {value}")


__all__ = [
    "CountryIdentityError",
    "InvalidInputError",
    "MalformedKeyError",
    "EmptyNameError",
    "MissingKeyError",
    "MissingAlpha3Error",
    "ForbiddenKeyError",
    "InvalidKeyError",
    "CountryNotFoundError",
]
