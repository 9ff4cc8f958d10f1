"""Country lookup API.

Public API for ISO 3166-1 country lookup: the default country table, the
ISO3166 lookup facade, and module-level helpers for resolving any country
identifier (alpha2, alpha3, numeric or name) to its record or one of its codes.
"""

from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Protocol, Union

import pandas as pd

from countryidentity.countries.countryerrors import (
    CountryNotFoundError,
    InvalidKeyError,
    MalformedKeyError,
)
from countryidentity.countries.countryguards import (
    KEY_ALPHA2,
    KEY_ALPHA3,
    KEY_NAME,
    KEY_NUMERIC,
    KEYS,
    guard_alpha2,
    guard_alpha3,
    guard_name,
    guard_numeric,
    guard_string,
    is_alpha2,
    is_alpha3,
    is_numeric,
)
from countryidentity.countries.countryidentity import ArrayDataset, Dataset
from countryidentity.countries.countrynormalize import fold_country_key
from countryidentity.countries.countryrecord import Country
from countryidentity.countries.countryvalidator import DataValidator
from countryidentity.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_parquet_or_csv,
)
from countryidentity.utils.normalize import split_multi_value

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "COUNTRYIDENTITY_DATA_PATH"

# Table columns holding "|"-joined lists
LIST_COLUMNS = ("currency", "adjectival", "demonym")


@lru_cache(maxsize=1)
def load_countries(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load the country table into memory.

    Uses LRU cache to load the table once and reuse it. Every column is
    text; list-valued columns (currency, adjectival, demonym) are "|"-joined.

    Loading priority:
    1. Explicit path if provided
    2. COUNTRYIDENTITY_DATA_PATH environment variable
    3. Package data (countries/data/countries.csv)

    Args:
        path: Optional path to a countries .csv or .parquet file

    Returns:
        DataFrame with columns name, alpha2, alpha3, numeric, currency,
        adjectival, demonym

    Raises:
        FileNotFoundError: If no table is available

    Examples:
        >>> df = load_countries()
        >>> df[['name', 'alpha2', 'numeric']].head(1)
                  name alpha2 numeric
        0  Afghanistan     AF     004
    """
    env_path = os.environ.get(DATA_PATH_ENV)

    found_path = None
    if path is not None:
        found_path = Path(path) if Path(path).exists() else None
    elif env_path:
        found_path = Path(env_path) if Path(env_path).exists() else None
    else:
        found_path = find_data_file(__file__, ["countries.parquet", "countries.csv"])

    if found_path is None:
        error_msg = format_not_found_error(
            subdirectory="countries",
            searched_locations=[
                ("Explicit path", path if path else "Not provided"),
                ("Environment variable", env_path or "Not set"),
                ("Package data", Path(__file__).parent / "data"),
            ],
            fix_instructions=[
                f"Set {DATA_PATH_ENV} to an existing countries .csv or .parquet file",
                "Or reinstall countryidentity so countries/data/countries.csv is present",
            ],
        )
        raise FileNotFoundError(error_msg)

    df = load_parquet_or_csv(found_path)
    logger.info(f"Loaded {len(df)} countries from {found_path}")
    return df


def records_from_frame(df: pd.DataFrame) -> List[dict]:
    """Convert a country table into record dicts, splitting list columns."""
    records = []
    for row in df.to_dict(orient="records"):
        for col in LIST_COLUMNS:
            if col in row:
                row[col] = split_multi_value(row[col])
        records.append(row)
    return records


@lru_cache(maxsize=1)
def default_dataset() -> ArrayDataset:
    """Default dataset built once from load_countries()."""
    records = records_from_frame(load_countries())
    return ArrayDataset(DataValidator().validate(records))


def _reject_validator(validator: Any, source: str):
    if validator is not None:
        raise ValueError(f"validator= applies to records or a DataFrame, not to {source}")


class CountryProvider(Protocol):
    """Lookup capability shared by ISO3166 and its decorators."""

    def name(self, name: str) -> dict:
        ...

    def alpha2(self, alpha2: str) -> dict:
        ...

    def alpha3(self, alpha3: str) -> dict:
        ...

    def alpha(self, alpha: str) -> dict:
        ...

    def numeric(self, numeric: str) -> dict:
        ...

    def exact_name(self, name: str) -> dict:
        ...

    def all(self) -> list:
        ...

    def iterator(self, key: str = KEY_ALPHA2) -> Iterator[tuple[str, dict]]:
        ...

    def count(self) -> int:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[dict]:
        ...


class ISO3166:
    """ISO 3166-1 lookup facade.

    Every identifier-accepting method guards its input, then delegates to
    the backing dataset. Lookups are unicode case-insensitive and tolerate
    prefixes (an exact match always wins over a prefix match).

    Construction:
        ISO3166()                       default dataset
        ISO3166([{...}, {...}])         validated caller records
        ISO3166(records, validator=CountryValidator())
        ISO3166(pandas_frame)           table in load_countries() layout
        ISO3166(dataset)                any object satisfying Dataset

    validator= only applies to records and DataFrames; passing one with the
    default dataset or a Dataset raises ValueError.

    Examples:
        >>> iso = ISO3166()
        >>> iso.alpha2("us")["name"]
        'United States of America'

        >>> iso.numeric("004")["alpha3"]
        'AFG'

        >>> iso.alpha("DEU")["alpha2"]
        'DE'

        >>> dict(iso.iterator("alpha3"))["FRA"]["name"]
        'France'
    """

    KEY_ALPHA2 = KEY_ALPHA2
    KEY_ALPHA3 = KEY_ALPHA3
    KEY_NUMERIC = KEY_NUMERIC
    KEY_NAME = KEY_NAME
    KEYS = KEYS

    def __init__(self, countries: Any = None, *, validator: Any = None):
        if countries is None:
            _reject_validator(validator, "the default dataset")
            self._dataset = default_dataset()
        elif isinstance(countries, pd.DataFrame):
            validator = validator or DataValidator()
            self._dataset = ArrayDataset(validator.validate(records_from_frame(countries)))
        elif isinstance(countries, Dataset):
            _reject_validator(validator, "a Dataset")
            self._dataset = countries
        else:
            validator = validator or DataValidator()
            self._dataset = ArrayDataset(validator.validate(countries))

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def name(self, name: str) -> dict:
        """Lookup by country name (prefix tolerant)."""
        guard_name(name)
        return self._lookup(KEY_NAME, name)

    def exact_name(self, name: str) -> dict:
        """Lookup by country name, case-insensitive equality only."""
        guard_name(name)
        return self._lookup_exact(KEY_NAME, name)

    def alpha2(self, alpha2: str) -> dict:
        guard_alpha2(alpha2)
        return self._lookup(KEY_ALPHA2, alpha2)

    def alpha3(self, alpha3: str) -> dict:
        guard_alpha3(alpha3)
        return self._lookup(KEY_ALPHA3, alpha3)

    def alpha(self, alpha: str) -> dict:
        """Lookup by either an alpha2 or an alpha3 code.

        The alpha2 field is tried first, then alpha3. Both attempts are
        exact: codes have fixed widths, so a prefix hit across widths
        ("UK" -> "UKR") would be spurious.

        Raises:
            MalformedKeyError: value has neither the alpha2 nor the alpha3 shape
            CountryNotFoundError: neither field matched; lists both attempts
        """
        guard_string(alpha, "alpha")
        if not (is_alpha2(alpha) or is_alpha3(alpha)):
            raise MalformedKeyError("alpha", alpha)

        attempts = []
        for key in (KEY_ALPHA2, KEY_ALPHA3):
            try:
                return self._lookup_exact(key, alpha)
            except CountryNotFoundError:
                attempts.append((key, alpha))

        raise CountryNotFoundError(KEY_ALPHA2, alpha, attempts)

    def numeric(self, numeric: str) -> dict:
        guard_numeric(numeric)
        return self._lookup(KEY_NUMERIC, numeric)

    def all(self) -> list:
        return self._dataset.all()

    def iterator(self, key: str = KEY_ALPHA2) -> Iterator[tuple[str, dict]]:
        """Lazily yield (record[key], record) pairs in dataset order.

        The key is checked immediately; each call returns a fresh generator.

        Raises:
            InvalidKeyError: key is not one of name, alpha2, alpha3, numeric
        """
        if key not in KEYS:
            raise InvalidKeyError(key, KEYS)
        return self._iterate(key)

    def count(self) -> int:
        return len(self._dataset)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[dict]:
        return iter(self._dataset)

    def _iterate(self, key: str) -> Iterator[tuple[str, dict]]:
        for country in self._dataset:
            yield country[key], self._make(country)

    def _lookup(self, key: str, value: str):
        return self._make(self._dataset.lookup(key, value))

    def _lookup_exact(self, key: str, value: str):
        # ArrayDataset has an exact mode; other datasets are scanned in order
        if isinstance(self._dataset, ArrayDataset):
            return self._make(self._dataset.lookup(key, value, exact=True))

        needle = fold_country_key(value)
        for country in self._dataset:
            if fold_country_key(str(country.get(key, ""))) == needle:
                return self._make(country)
        raise CountryNotFoundError(key, value)

    def _make(self, record: dict):
        return record


class ISO3166Objects(ISO3166):
    """ISO3166 facade returning Country value objects instead of dicts.

    Examples:
        >>> ISO3166Objects().alpha2("fr").alpha3
        'FRA'
    """

    def all(self) -> list:
        return [self._make(record) for record in super().all()]

    def __iter__(self) -> Iterator[Country]:
        for record in super().__iter__():
            yield self._make(record)

    def _make(self, record: dict) -> Country:
        return Country.from_record(record)


def list_countries(currency: Optional[str] = None) -> pd.DataFrame:
    """List countries, optionally filtered by ISO 4217 currency code.

    Args:
        currency: Optional currency code (case-insensitive), e.g. "EUR"

    Returns:
        Filtered copy of the table, in load_countries() layout

    Examples:
        >>> list_countries(currency="chf")['alpha2'].tolist()
        ['LI', 'CH']
    """
    df = load_countries()

    if currency is not None:
        code = currency.strip().upper()
        mask = df["currency"].apply(lambda cell: code in split_multi_value(cell))
        df = df[mask]

    return df.copy()


@lru_cache(maxsize=1)
def _default_provider():
    from countryidentity.countries.countryaliases import ISO3166WithAliases

    return ISO3166WithAliases(ISO3166())


def resolve_country(value: Any) -> Optional[dict]:
    """Resolve any country identifier to its record, or None.

    Resolution strategy:
      1. Three digits -> numeric code
      2. Two or three letters -> alpha2, then alpha3 (exact)
      3. Otherwise, or if the code lookup failed -> name, with common aliases

    Examples:
        >>> resolve_country("840")["alpha2"]
        'US'

        >>> resolve_country("UK")["alpha3"]
        'GBR'

        >>> resolve_country("Ivory Coast")["alpha3"]
        'CIV'

        >>> resolve_country("Atlantis") is None
        True
    """
    if not isinstance(value, str) or not value.strip():
        return None

    query = value.strip()
    provider = _default_provider()

    try:
        if is_numeric(query):
            return provider.numeric(query)
        if is_alpha2(query) or is_alpha3(query):
            try:
                return provider.alpha(query)
            except CountryNotFoundError:
                pass
        return provider.name(query)
    except CountryNotFoundError:
        return None


def country_identifier(value: Any, to: str = KEY_ALPHA2) -> Optional[str]:
    """Get an ISO 3166-1 identifier for any country name or code.

    Args:
        value: Country name or code in any format (e.g., "USA", "United States", "840")
        to: Field to return: 'alpha2' (default), 'alpha3', 'numeric' or 'name'

    Returns:
        The requested identifier, or None if the value is not recognized

    Raises:
        InvalidKeyError: to is not one of the four identifier fields

    Examples:
        >>> country_identifier("United States")
        'US'

        >>> country_identifier("Viet Nam", to="alpha3")
        'VNM'

        >>> country_identifier("de", to="name")
        'Germany'
    """
    if to not in KEYS:
        raise InvalidKeyError(to, KEYS)

    record = resolve_country(value)
    if record is None:
        return None
    return record[to]


def country_identifiers(values: Iterable[Any], to: str = KEY_ALPHA2) -> List[Optional[str]]:
    """Batch form of country_identifier.

    Examples:
        >>> country_identifiers(["USA", "Holland", "Czech Republic"])
        ['US', 'NL', 'CZ']
    """
    return [country_identifier(v, to=to) for v in values]


def clear_cache():
    """Clear the cached country table, default dataset and default provider.

    Useful for testing or after changing COUNTRYIDENTITY_DATA_PATH.
    """
    load_countries.cache_clear()
    default_dataset.cache_clear()
    _default_provider.cache_clear()
    logger.info("Cleared countries loader cache")


__all__ = [
    "DATA_PATH_ENV",
    "load_countries",
    "records_from_frame",
    "default_dataset",
    "list_countries",
    "CountryProvider",
    "ISO3166",
    "ISO3166Objects",
    "resolve_country",
    "country_identifier",
    "country_identifiers",
    "clear_cache",
]
