"""Invoice date resolution.

Invoice dates reach the engine in whatever shape the decoder produced:
spreadsheet serial numbers, ``datetime`` objects from Excel cells, or
strings in assorted formats. ``resolve_invoice_date`` maps all of them to a
midnight ``pd.Timestamp`` (time of day and time zone dropped) or ``pd.NaT``.

Resolution order:
1. Numbers and purely numeric strings are spreadsheet serial dates
   (days since 1899-12-30).
2. ``datetime`` / ``date`` / ``Timestamp`` values are used as-is.
3. Year-first strings (``2023-01-15``, ``2023/01/15 08:30``) go through the
   generic parser.
4. Strings shaped ``a/b/c`` or ``a-b-c`` are read positionally as
   day/month/year (month/day/year when ``day_first=False``). Two-digit
   years are read as 19xx.
5. Anything else, including positional strings that are not a real date
   in the configured order, is tried with the generic parser.

Positional strings are read before any generic parsing, so ``01/02/2023``
is 1 February by default. Browser ``Date`` parsing would read it as
2 January; pass ``day_first=False`` for month-first exports.

Days outside the range a ``Timestamp`` can hold (roughly 1677 to 2262)
resolve to ``NaT`` like any other unusable value.

Examples:
    >>> resolve_invoice_date(44927)
    Timestamp('2023-01-01 00:00:00')
    >>> resolve_invoice_date("15/01/2023 10:30")
    Timestamp('2023-01-15 00:00:00')
    >>> resolve_invoice_date("not a date")
    NaT
"""

from __future__ import annotations

import math
import re
import warnings
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd

from sales_core.config import SERIAL_EPOCH_OFFSET

_UNIX_EPOCH = pd.Timestamp("1970-01-01")

# Whole days a nanosecond Timestamp can hold
_FIRST_DAY = pd.Timestamp.min.ceil("D")
_LAST_DAY = pd.Timestamp.max.floor("D")

# Plain number, as CSV decoders leave serial date cells
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

# 2023-01-15, 2023/1/5, optionally followed by a time part
_YEAR_FIRST_RE = re.compile(r"^\d{4}[-/]\d{1,2}[-/]\d{1,2}(?:$|[ T])")

# 15/01/2023, 1-2-23, 15/01/2023 10:30 (trailing text after the year ignored)
_POSITIONAL_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{1,4})(?!\d)")


def serial_to_timestamp(serial: float) -> pd.Timestamp:
    """Convert a spreadsheet serial day number to a naive Timestamp.

    Examples:
        >>> serial_to_timestamp(44927.5)
        Timestamp('2023-01-01 12:00:00')
    """
    return _UNIX_EPOCH + pd.to_timedelta(serial - SERIAL_EPOCH_OFFSET, unit="D")


def _midnight(ts: pd.Timestamp) -> pd.Timestamp:
    if pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    ts = ts.normalize()
    if not _FIRST_DAY <= ts <= _LAST_DAY:
        return pd.NaT
    return ts


def _positional(first: str, second: str, year: str, day_first: bool) -> pd.Timestamp:
    day, month = (int(first), int(second)) if day_first else (int(second), int(first))
    y = int(year)
    if y < 100:
        y += 1900
    return pd.Timestamp(year=y, month=month, day=day)


def _parse_text(text: str, day_first: bool) -> pd.Timestamp:
    if not text:
        return pd.NaT

    if _NUMERIC_RE.match(text):
        return serial_to_timestamp(float(text))

    if _YEAR_FIRST_RE.match(text):
        ts = pd.to_datetime(text, errors="coerce")
        if not pd.isna(ts):
            return ts

    match = _POSITIONAL_RE.match(text)
    if match:
        try:
            return _positional(*match.groups(), day_first=day_first)
        except ValueError:
            # e.g. 1/15/2023 with day_first: let the generic parser swap fields
            pass

    # pandas warns per value when the guessed format contradicts dayfirst
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        return pd.to_datetime(text, errors="coerce", dayfirst=day_first)


def resolve_invoice_date(value: Any, *, day_first: bool = True) -> pd.Timestamp:
    """Resolve a raw ``Invoice_Date`` cell to its calendar day.

    Args:
        value: Raw cell value (number, string, datetime or missing).
        day_first: Ordering for positional ``a/b/c`` strings.

    Returns:
        Midnight Timestamp of the invoice day, or ``pd.NaT`` when the value
        cannot be resolved. Never raises.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return pd.NaT

    try:
        if isinstance(value, (int, float, np.number)):
            number = float(value)
            if not math.isfinite(number):
                return pd.NaT
            return _midnight(serial_to_timestamp(number))

        if isinstance(value, (datetime, date, np.datetime64)):
            return _midnight(pd.Timestamp(value))

        if isinstance(value, str):
            return _midnight(_parse_text(value.strip(), day_first))
    except (ValueError, OverflowError):
        return pd.NaT

    return pd.NaT
