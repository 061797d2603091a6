"""Decode transaction exports (CSV or Excel) into raw records.

This is deliberately thin: it only reads the file into a DataFrame and hands
it to the normalizer. Code columns are read as text so leading zeros in
outlet or invoice codes survive; numbers elsewhere are left to the reader's
type inference, which keeps serial invoice dates numeric.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from sales_core.exceptions import LoadError
from sales_core.transactions.normalize import normalize_frame
from sales_core.transactions.schema import TEXT_FIELDS

logger = logging.getLogger(__name__)

CSV_SUFFIXES = {".csv", ".txt"}
EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


def read_source(path: Union[str, Path], sheet: Union[int, str] = 0) -> pd.DataFrame:
    """Read a transaction export without normalizing it.

    Args:
        path: CSV/TXT (comma separated, header row) or Excel workbook.
        sheet: Worksheet name or index for Excel files (default: first sheet).

    Returns:
        DataFrame as decoded, one row per transaction line.

    Raises:
        LoadError: If the file is missing, has an unsupported extension, or
            the reader fails.
    """
    path = Path(path)
    if not path.exists():
        raise LoadError(f"Transaction file not found: {path}")

    suffix = path.suffix.lower()
    text_dtypes = {col: str for col in TEXT_FIELDS}

    try:
        if suffix in CSV_SUFFIXES:
            df = pd.read_csv(
                path,
                dtype=text_dtypes,
                skip_blank_lines=True,
                encoding="utf-8-sig",
                low_memory=False,
            )
        elif suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=sheet, dtype=object)
        else:
            raise LoadError(
                f"Unsupported file type '{suffix}' for {path.name}. "
                f"Expected one of: {', '.join(sorted(CSV_SUFFIXES | EXCEL_SUFFIXES))}"
            )
    except LoadError:
        raise
    except UnicodeDecodeError as e:
        raise LoadError(f"Error parsing CSV {path.name}: file is not UTF-8 encoded ({e})") from e
    except Exception as e:
        kind = "CSV" if suffix in CSV_SUFFIXES else "Excel file"
        raise LoadError(f"Failed to process {kind} {path.name}: {e}") from e

    # Drop fully empty lines left by spreadsheet exports
    df = df.dropna(how="all").reset_index(drop=True)
    logger.info("Read %d row(s) from %s", len(df), path)
    return df


def load_transactions(path: Union[str, Path], sheet: Union[int, str] = 0) -> pd.DataFrame:
    """Read a transaction export and return the normalized row set.

    Examples:
        >>> rows = load_transactions("exports/daily_sales.xlsx")
        >>> rows["Line_Value"].dtype
        dtype('float64')
    """
    return normalize_frame(read_source(path, sheet=sheet))
