"""
Country Dataset and Lookup Algorithm
------------------------------------

An ordered, read-only collection of country records with key-based lookup:
  1) Unicode case folding of the query (NFC + casefold)
  2) Exact pass: first record whose folded key value equals the query
  3) Prefix pass: first record whose folded key value, truncated to the
     query's length, equals the query
  4) CountryNotFoundError carrying the key and the original query

Records are plain dicts with at least name, alpha2, alpha3 and numeric.
Callers always receive copies; the stored records are never handed out.

API:
  Dataset                      (protocol: lookup, all, __iter__, __len__)
  ArrayDataset(records)
  ArrayDataset.lookup(key, value, exact=False) -> dict
  ArrayDataset.all() -> list[dict]

Examples:
  >>> ds = ArrayDataset([{"name": "France", "alpha2": "FR", "alpha3": "FRA", "numeric": "250"}])
  >>> ds.lookup("alpha2", "fr")["name"]
  'France'

  >>> ds.lookup("name", "FRANC")["alpha3"]     # prefix tolerance
  'FRA'

  >>> ds.lookup("name", "FRANC", exact=True)
  CountryNotFoundError: No "name" key found matching: FRANC
"""

from __future__ import annotations
import copy
from typing import Iterable, Iterator, Mapping, Optional, Protocol, runtime_checkable

from countryidentity.countries.countryerrors import CountryNotFoundError, InvalidKeyError
from countryidentity.countries.countryguards import KEYS
from countryidentity.countries.countrynormalize import fold_country_key


@runtime_checkable
class Dataset(Protocol):
    """Anything that can count, iterate, look up and list country records.

    The lookup facade only depends on this protocol, so alternative storage
    or query strategies can be swapped in without touching it.
    """

    def lookup(self, key: str, value: str) -> dict:
        """Return the first record whose key matches value exactly or by prefix."""
        ...

    def all(self) -> list[dict]:
        ...

    def __iter__(self) -> Iterator[dict]:
        ...

    def __len__(self) -> int:
        ...


def _copy_record(record: Mapping) -> dict:
    # Deep copy: currency and descriptive lists must not leak out mutable
    return copy.deepcopy(dict(record))


def match_record(
    folded: Iterable[str],
    needle: str,
    *,
    exact: bool = False,
) -> Optional[int]:
    """
    Return the position of the first record matching an already-folded needle.

    Args:
        folded: Folded key value of each record, in dataset order
        needle: Folded query
        exact: If True, skip the prefix pass

    Returns:
        Index of the matching record, or None
    """
    folded = list(folded)

    for i, candidate in enumerate(folded):
        if candidate == needle:
            return i

    if exact or not needle:
        return None

    width = len(needle)
    for i, candidate in enumerate(folded):
        if candidate[:width] == needle:
            return i

    return None


class ArrayDataset:
    """Dataset backed by an in-memory sequence of record mappings.

    Insertion order is preserved and drives iteration and first-match
    semantics. Records are copied on the way in and on the way out.
    """

    def __init__(self, records: Iterable[Mapping]):
        self._records = tuple(_copy_record(r) for r in records)
        # Folded key columns, built once
        self._folded = {
            key: tuple(fold_country_key(str(r.get(key, ""))) for r in self._records)
            for key in KEYS
        }

    def lookup(self, key: str, value: str, exact: bool = False) -> dict:
        if key not in self._folded:
            raise InvalidKeyError(key, KEYS)

        idx = match_record(self._folded[key], fold_country_key(value), exact=exact)
        if idx is None:
            raise CountryNotFoundError(key, value)

        return _copy_record(self._records[idx])

    def all(self) -> list[dict]:
        return [_copy_record(r) for r in self._records]

    def __iter__(self) -> Iterator[dict]:
        for record in self._records:
            yield _copy_record(record)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._records)} records)"


__all__ = [
    "Dataset",
    "ArrayDataset",
    "match_record",
]
