"""
Country Name Localization
-------------------------

Decorates country records with a locale-appropriate display name.

  DataLocalizer(key="name", locale="")   lazily copies each record and sets
                                         record[key] to the localized name
  BabelDisplayService                    locale-display service backed by
                                         Babel territory names (CLDR), with
                                         pycountry mapping alpha3 -> alpha2

Per-record behavior:
  - alpha3 must be present (MissingAlpha3Error) and well-formed (MalformedKeyError)
  - unknown alpha3 -> the raw alpha3 string is used as the display name
  - empty locale -> COUNTRYIDENTITY_LOCALE, then the process locale, then "en"
  - unknown locale -> the default locale

Examples:
  >>> localizer = DataLocalizer("local_name", "fr")
  >>> next(localizer([{"alpha3": "SEN", "name": "Senegal"}]))["local_name"]
  'Sénégal'

  >>> next(localizer([{"alpha3": "FOO"}]))["local_name"]
  'FOO'
"""

from __future__ import annotations
import logging
import os
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any, Iterator, Optional, Protocol

try:
    from babel import Locale, UnknownLocaleError, default_locale
except ImportError as e:
    raise ImportError("Babel not installed. pip install Babel") from e

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from countryidentity.countries.countryerrors import (
    ForbiddenKeyError,
    InvalidInputError,
    MissingAlpha3Error,
)
from countryidentity.countries.countryguards import (
    KEY_ALPHA2,
    KEY_ALPHA3,
    KEY_NAME,
    KEY_NUMERIC,
    guard_alpha3,
    guard_string,
)
from countryidentity.countries.countryrecord import Country

logger = logging.getLogger(__name__)

LOCALE_ENV = "COUNTRYIDENTITY_LOCALE"
FALLBACK_LOCALE = "en"

# Identifier fields a localizer may never overwrite
FORBIDDEN_KEYS = (KEY_ALPHA2, KEY_ALPHA3, KEY_NUMERIC)


def default_locale_identifier() -> str:
    """Resolve the process default locale identifier."""
    return os.environ.get(LOCALE_ENV) or default_locale() or FALLBACK_LOCALE


@lru_cache(maxsize=64)
def _parse_locale(identifier: str) -> Optional[Locale]:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return None


def resolve_locale(identifier: str) -> Locale:
    """Parse a locale identifier, falling back to the default locale."""
    locale = _parse_locale(identifier) if identifier else None
    if locale is not None:
        return locale

    default = default_locale_identifier()
    logger.debug(f"Unknown locale {identifier!r}, using default locale {default!r}")
    return _parse_locale(default) or Locale.parse(FALLBACK_LOCALE)


@lru_cache(maxsize=512)
def region_to_alpha2(region: str) -> Optional[str]:
    """Map an alpha2 or alpha3 region subtag to the CLDR territory code."""
    region = region.upper()
    if len(region) == 2:
        return region
    try:
        country = pycountry.countries.get(alpha_3=region)
    except (KeyError, LookupError):
        country = None
    return getattr(country, "alpha_2", None)


class LocaleDisplayService(Protocol):
    def display_name(self, region: str, locale: str) -> str:
        """Return the localized name of region, or region itself if unknown."""
        ...


class BabelDisplayService:
    """Locale-display service backed by Babel's CLDR territory names."""

    def display_name(self, region: str, locale: str) -> str:
        alpha2 = region_to_alpha2(region)
        if alpha2 is None:
            logger.debug(f"No territory for region {region!r}, keeping raw code")
            return region

        name = resolve_locale(locale).territories.get(alpha2)
        if not name:
            logger.debug(f"No {locale!r} display name for {alpha2!r}, keeping raw code")
            return region
        return name


class LocalizeData(Protocol):
    def __call__(self, iterable: Iterable) -> Iterator:
        ...


class DataLocalizer:
    """Lazily add a localized display name to each country record.

    Records are copied; the input is never modified. Items may be record
    mappings, Country objects, or (key, record) pairs such as those from
    ISO3166.iterator(), in which case the pairs are yielded back with the
    localized record. Output records are always dicts.

    Args:
        key: Field to set on each record (default "name"); may not be
            alpha2, alpha3 or numeric
        locale: Locale identifier (e.g. "fr", "pt_BR", "de-CH"); empty
            means the process default locale
        display_service: Optional LocaleDisplayService; Babel by default
    """

    def __init__(
        self,
        key: str = KEY_NAME,
        locale: str = "",
        display_service: Optional[LocaleDisplayService] = None,
    ):
        guard_string(key, "key")
        if key in FORBIDDEN_KEYS:
            raise ForbiddenKeyError(key, FORBIDDEN_KEYS)
        guard_string(locale, "locale")

        self.key = key
        self.locale = locale.strip() or default_locale_identifier()
        self.display_service = display_service or BabelDisplayService()

    def __call__(self, iterable: Iterable) -> Iterator:
        return self.localize(iterable)

    def localize(self, iterable: Iterable) -> Iterator:
        """Return a generator over localized copies of the input records.

        Raises:
            InvalidInputError: iterable is not iterable (raised immediately)
        """
        if isinstance(iterable, (str, bytes)) or not isinstance(iterable, Iterable):
            raise InvalidInputError("iterable", iterable, expected="iterable")
        return self._localize(iterable)

    def _localize(self, iterable: Iterable) -> Iterator:
        for index, entry in enumerate(iterable):
            if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[1], (Mapping, Country)):
                yield entry[0], self.localize_entry(entry[1], index)
            else:
                yield self.localize_entry(entry, index)

    def localize_entry(self, entry: Any, index: Optional[int] = None) -> dict:
        """Return a localized dict copy of a record mapping or Country."""
        if isinstance(entry, Country):
            entry = entry.to_dict()
        if not isinstance(entry, Mapping):
            raise InvalidInputError("entry", entry, expected="mapping")

        alpha3 = entry.get(KEY_ALPHA3)
        if alpha3 is None:
            raise MissingAlpha3Error(index)
        guard_alpha3(alpha3)

        localized = dict(entry)
        display = self.display_service.display_name(alpha3, self.locale)
        localized[self.key] = display or alpha3
        return localized


__all__ = [
    "LOCALE_ENV",
    "FORBIDDEN_KEYS",
    "default_locale_identifier",
    "resolve_locale",
    "region_to_alpha2",
    "LocaleDisplayService",
    "BabelDisplayService",
    "LocalizeData",
    "DataLocalizer",
]
