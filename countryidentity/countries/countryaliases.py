"""Alias-aware country lookup.

Decorates any CountryProvider so that informal country names ("USA",
"Russia", "Ivory Coast") are rewritten to the dataset's canonical name
before a name lookup. Every other operation passes straight through.
"""

from __future__ import annotations
from typing import Any, Iterator, Mapping, Optional

from countryidentity.countries.countryapi import CountryProvider
from countryidentity.countries.countryguards import KEY_ALPHA2
from countryidentity.countries.countrynormalize import fold_country_key

# Alias -> canonical dataset name. Keys compare case-insensitively.
COUNTRY_ALIASES: dict[str, str] = {
    "Bolivia": "Bolivia (Plurinational State of)",
    "Bolivia, Plurinational State of": "Bolivia (Plurinational State of)",
    "Congo-Kinshasa": "Congo (Democratic Republic of the)",
    "Congo, Democratic Republic of the": "Congo (Democratic Republic of the)",
    "Czech Republic": "Czechia",
    "Iran": "Iran (Islamic Republic of)",
    "North Korea": "Korea (Democratic People's Republic of)",
    "South Korea": "Korea (Republic of)",
    "Laos": "Lao People's Democratic Republic",
    "Micronesia": "Micronesia (Federated States of)",
    "Moldova": "Moldova (Republic of)",
    "Palestine": "Palestine, State of",
    "Russia": "Russian Federation",
    "Saint Martin": "Saint Martin (French part)",
    "Sint Maarten": "Sint Maarten (Dutch part)",
    "Taiwan": "Taiwan (Province of China)",
    "Tanzania": "Tanzania, United Republic of",
    "United Kingdom": "United Kingdom of Great Britain and Northern Ireland",
    "UK": "United Kingdom of Great Britain and Northern Ireland",
    "Great Britain": "United Kingdom of Great Britain and Northern Ireland",
    "United States": "United States of America",
    "USA": "United States of America",
    "Venezuela": "Venezuela (Bolivarian Republic of)",
    "Vietnam": "Viet Nam",
    # Common colloquialisms
    "Holland": "Netherlands",
    "Ivory Coast": "Côte d'Ivoire",
    "Cote d'Ivoire": "Côte d'Ivoire",
    "Cape Verde": "Cabo Verde",
    "Vatican": "Holy See",
    "Burma": "Myanmar",
    "Syria": "Syrian Arab Republic",
    "Brunei": "Brunei Darussalam",
    "UAE": "United Arab Emirates",
    "Swaziland": "Eswatini",
    "Macedonia": "North Macedonia",
    "East Timor": "Timor-Leste",
}


class ISO3166WithAliases:
    """CountryProvider decorator adding alias resolution to name().

    Interchangeable with the wrapped provider: alpha2, alpha3, alpha,
    numeric, exact_name and the enumeration methods are forwarded as-is.

    Examples:
        >>> iso = ISO3166WithAliases(ISO3166())
        >>> iso.name("USA")["name"]
        'United States of America'

        >>> iso.name("czech republic")["alpha2"]
        'CZ'

        >>> iso.name("France")["alpha2"]    # no alias, forwarded unchanged
        'FR'
    """

    def __init__(self, source: CountryProvider, aliases: Optional[Mapping[str, str]] = None):
        self._source = source
        self._aliases = {
            fold_country_key(alias): canonical
            for alias, canonical in (aliases if aliases is not None else COUNTRY_ALIASES).items()
        }

    @property
    def source(self) -> CountryProvider:
        return self._source

    def canonical_name(self, name: str) -> str:
        """Return the canonical name for an alias, or the input unchanged."""
        if not isinstance(name, str):
            return name
        return self._aliases.get(fold_country_key(name), name)

    def name(self, name: str) -> Any:
        return self._source.name(self.canonical_name(name))

    def exact_name(self, name: str) -> Any:
        return self._source.exact_name(name)

    def alpha2(self, alpha2: str) -> Any:
        return self._source.alpha2(alpha2)

    def alpha3(self, alpha3: str) -> Any:
        return self._source.alpha3(alpha3)

    def alpha(self, alpha: str) -> Any:
        return self._source.alpha(alpha)

    def numeric(self, numeric: str) -> Any:
        return self._source.numeric(numeric)

    def all(self) -> list:
        return self._source.all()

    def iterator(self, key: str = KEY_ALPHA2) -> Iterator:
        return self._source.iterator(key)

    def count(self) -> int:
        return self._source.count()

    def __len__(self) -> int:
        return self._source.count()

    def __iter__(self) -> Iterator:
        return iter(self._source)


__all__ = [
    "COUNTRY_ALIASES",
    "ISO3166WithAliases",
]
