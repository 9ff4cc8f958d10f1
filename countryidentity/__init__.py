"""Country Identity - ISO 3166-1 country lookup

Public API for resolving ISO 3166-1 country identifiers: alpha-2, alpha-3,
numeric codes and English short names, with alias resolution and
locale-aware display names.

Usage:
    from countryidentity import ISO3166, ISO3166WithAliases, DataLocalizer
    from countryidentity import country_identifier

    # Lookup facade over the default dataset
    iso = ISO3166()
    iso.alpha2("fr")          # Returns: {'name': 'France', 'alpha2': 'FR', ...}
    iso.alpha("DEU")          # alpha2 or alpha3
    iso.numeric("004")        # Returns: {'name': 'Afghanistan', ...}

    # Informal names
    ISO3166WithAliases(iso).name("USA")   # Returns: {'name': 'United States of America', ...}

    # Any identifier -> code
    country_identifier("Ivory Coast")     # Returns: 'CI'

    # Localized display names
    localizer = DataLocalizer("local_name", "fr")
    next(localizer([iso.alpha2("SN")]))["local_name"]   # Returns: 'Sénégal'
"""

__version__ = "0.1.0"

# ============================================================================
# Lookup API
# ============================================================================

from .countries.countryapi import (
    ISO3166,                 # Lookup facade (dict records)
    ISO3166Objects,          # Lookup facade (Country objects)
    load_countries,          # Load the default country table
    list_countries,          # List/filter countries
    default_dataset,         # Cached default dataset
    resolve_country,         # Any identifier -> record
    country_identifier,      # Primary API - any identifier -> ISO code
    country_identifiers,     # Batch resolution
    clear_cache,             # Drop cached table and dataset
)

from .countries.countryaliases import (
    ISO3166WithAliases,      # Alias-aware name lookup
    COUNTRY_ALIASES,         # Alias -> canonical name table
)

from .countries.countryidentity import (
    Dataset,                 # Dataset protocol
    ArrayDataset,            # In-memory dataset
)

from .countries.countryvalidator import (
    DataValidator,           # Validate-only gate
    CountryValidator,        # Validate-and-normalize gate
)

from .countries.countryrecord import Country

# ============================================================================
# Localization API
# ============================================================================

from .countries.countrylocalizer import (
    DataLocalizer,           # Add localized display names to records
    BabelDisplayService,     # Default locale-display service
)

# ============================================================================
# Errors
# ============================================================================

from .countries.countryerrors import (
    CountryIdentityError,
    InvalidInputError,
    MalformedKeyError,
    EmptyNameError,
    MissingKeyError,
    MissingAlpha3Error,
    ForbiddenKeyError,
    InvalidKeyError,
    CountryNotFoundError,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "ISO3166",              # Lookup facade
    "country_identifier",   # Resolve any identifier -> ISO code

    # ========================================================================
    # Lookup
    # ========================================================================
    "ISO3166Objects",
    "ISO3166WithAliases",
    "COUNTRY_ALIASES",
    "load_countries",
    "list_countries",
    "default_dataset",
    "resolve_country",
    "country_identifiers",
    "clear_cache",
    "Dataset",
    "ArrayDataset",
    "DataValidator",
    "CountryValidator",
    "Country",

    # ========================================================================
    # Localization
    # ========================================================================
    "DataLocalizer",
    "BabelDisplayService",

    # ========================================================================
    # Errors
    # ========================================================================
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
