"""Row normalizer: raw decoded records -> transaction row set.

Spreadsheet and delimited-text decoders hand over loosely typed values:
numbers as strings, blank cells, stray text in amount columns. This module
turns them into a DataFrame with a fixed column layout where every numeric
field is a float and every code field is a string.

Coercion rules:
- Numeric fields: parse as a number; blank, unparsable or non-finite -> 0.0.
- Text fields: strings pass through unchanged, other scalars are rendered
  with ``str()`` (integral floats lose their ``.0``), missing -> "".
- ``Invoice_Date`` is kept exactly as decoded (missing -> None) because the
  date resolver needs to tell serial numbers from strings.

No row is ever rejected. Examples:
    >>> to_number("12.5")
    12.5
    >>> to_number("n/a")
    0.0
    >>> to_text(1001.0)
    '1001'
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Union

import numpy as np
import pandas as pd

from sales_core.transactions.schema import ALL_FIELDS, INVOICE_DATE, NUMERIC_FIELDS, TEXT_FIELDS

logger = logging.getLogger(__name__)

Records = Union[pd.DataFrame, Iterable[Mapping[str, Any]]]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_number(value: Any) -> float:
    """Coerce a raw cell to a float, defaulting to 0.0.

    Args:
        value: Decoded cell value of any type.

    Returns:
        The numeric value, or 0.0 when the value is missing, unparsable,
        NaN or infinite. Booleans count as 1/0.

    Examples:
        >>> to_number(" 7 ")
        7.0
        >>> to_number("1,234")
        0.0
        >>> to_number(float("inf"))
        0.0
    """
    if _is_missing(value):
        return 0.0
    if isinstance(value, (bool, np.bool_)):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float, np.number)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        # float() accepts "1_000", decoders never mean that
        if "_" in text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    return number if math.isfinite(number) else 0.0


def to_text(value: Any) -> str:
    """Render a raw code cell as a string ("" when missing).

    Examples:
        >>> to_text(None)
        ''
        >>> to_text(42.0)
        '42'
        >>> to_text("BR-01")
        'BR-01'
    """
    if _is_missing(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def normalize_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """Return a normalized copy of a decoded DataFrame.

    Missing columns are added with their defaults, known columns are coerced
    and any extra columns are kept untouched. The input is not modified.

    Args:
        frame: DataFrame straight from a decoder.

    Returns:
        New DataFrame with every column of ``ALL_FIELDS`` present and a fresh
        RangeIndex.
    """
    out = frame.copy()
    out = out.reset_index(drop=True)

    for col in NUMERIC_FIELDS:
        if col not in out.columns:
            out[col] = 0.0
            continue
        raw = out[col]
        parsed = raw.map(to_number).astype(float)
        blank = raw.map(
            lambda v: _is_missing(v) or (isinstance(v, str) and not v.strip())
        ).astype(bool)
        zeroed = int(((parsed == 0) & ~blank & (pd.to_numeric(raw, errors="coerce") != 0)).sum())
        if zeroed:
            logger.debug("Coerced %d non-numeric value(s) in %s to 0", zeroed, col)
        out[col] = parsed

    for col in TEXT_FIELDS:
        if col not in out.columns:
            # object, not the string dtype newer pandas infers for ""
            out[col] = pd.Series([""] * len(out), index=out.index, dtype=object)
            continue
        out[col] = out[col].map(to_text).astype(object)

    if INVOICE_DATE not in out.columns:
        out[INVOICE_DATE] = None
    else:
        dates = out[INVOICE_DATE].astype(object)
        out[INVOICE_DATE] = dates.where(~dates.map(_is_missing).astype(bool), None)

    ordered = ALL_FIELDS + [c for c in out.columns if c not in ALL_FIELDS]
    return out[ordered]


def normalize_records(records: Records) -> pd.DataFrame:
    """Build the transaction row set from decoded records.

    Args:
        records: A DataFrame, or any iterable of mappings keyed by field name
            (e.g. rows from ``csv.DictReader`` or a JSON array).

    Returns:
        Normalized DataFrame, see ``normalize_frame``.

    Examples:
        >>> rows = normalize_records([{"Line_Value": "100", "Status": "I"}])
        >>> float(rows.loc[0, "Line_Value"])
        100.0
    """
    if isinstance(records, pd.DataFrame):
        frame = records
    else:
        frame = pd.DataFrame.from_records(list(records))

    result = normalize_frame(frame)
    logger.debug("Normalized %d transaction row(s)", len(result))
    return result
