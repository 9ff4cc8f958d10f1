"""Country lookup and identification (ISO 3166-1)."""

from countryidentity.countries.countryapi import (
    load_countries,
    list_countries,
    default_dataset,
    ISO3166,
    ISO3166Objects,
    resolve_country,
    country_identifier,
    country_identifiers,
)
from countryidentity.countries.countryaliases import ISO3166WithAliases
from countryidentity.countries.countrylocalizer import DataLocalizer

__all__ = [
    "load_countries",
    "list_countries",
    "default_dataset",
    "ISO3166",
    "ISO3166Objects",
    "ISO3166WithAliases",
    "DataLocalizer",
    "resolve_country",
    "country_identifier",
    "country_identifiers",
]
