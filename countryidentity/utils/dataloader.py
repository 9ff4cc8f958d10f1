"""Shared data loading utilities.

This module provides module-local data file discovery, string-typed table
loading and the not-found error message used by the country loader.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd


def find_data_file(module_file: str, filenames: List[str]) -> Optional[Path]:
    """Find the first existing data file next to a module.

    Candidates are tried in order in {module_dir}/data/, so a parquet build
    of a table can shadow its CSV source.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames in priority order (e.g., ['countries.parquet', 'countries.csv'])

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From countries/countryapi.py (data is in countries/data/)
        >>> path = find_data_file(__file__, ['countries.parquet', 'countries.csv'])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_parquet_or_csv(file_path: Union[str, Path]) -> pd.DataFrame:
    """Load a string-typed DataFrame from a parquet or CSV file.

    Every column is read as text and NA detection is disabled: codes such
    as "NA" (Namibia) and "004" (Afghanistan) must survive untouched.

    Args:
        file_path: Path to parquet or CSV file

    Returns:
        Loaded DataFrame with empty strings in place of missing cells

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    file_path = Path(file_path)
    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path).fillna("").astype(str)
    elif file_path.suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False, encoding="utf-8")
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Union[str, Path]]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
]
