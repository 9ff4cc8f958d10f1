"""Shared utilities for CountryIdentity package."""

from countryidentity.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from countryidentity.utils.normalize import (
    fold_case,
    split_multi_value,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
    # Normalization
    "fold_case",
    "split_multi_value",
]
