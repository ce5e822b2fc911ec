"""Question table loading utilities."""

from pathlib import Path

import pandas as pd

SUPPORTED_SUFFIXES = (".xlsx", ".xls", ".csv", ".tsv")


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a questions table (Excel, CSV or TSV) based on file extension.

    Cells are kept as text; empty cells stay NaN so callers can tell "no tags" apart
    from an empty string.

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path, dtype=str)
    elif suffix == ".csv":
        return pd.read_csv(path, dtype=str)
    elif suffix == ".tsv":
        return pd.read_csv(path, sep="\t", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: {', '.join(SUPPORTED_SUFFIXES)}")


def split_tag_cell(value: object, delimiter: str = ";") -> list[str]:
    """
    Split a delimited tag cell ("alg-1; alg-2") into ids, dropping blanks and duplicates.

    NaN / None cells give an empty list.
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return []
    ids = [part.strip() for part in str(value).split(delimiter)]
    return list(dict.fromkeys(i for i in ids if i))
