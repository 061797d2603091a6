"""Daily net revenue series."""

from __future__ import annotations

import logging

import pandas as pd

from sales_core.transactions.dates import resolve_invoice_date
from sales_core.transactions.schema import INVOICE_DATE
from sales_core.transactions.values import net_value

logger = logging.getLogger(__name__)

DAILY_COLUMNS = ["label", "timestamp", "omset"]


def _empty_daily() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "label": pd.Series(dtype=object),
            "timestamp": pd.Series(dtype="datetime64[ns]"),
            "omset": pd.Series(dtype=float),
        }
    )


def daily_omset(frame: pd.DataFrame, *, day_first: bool = True) -> pd.DataFrame:
    """Sum net revenue per calendar day.

    Rows whose invoice date cannot be resolved are left out of the series
    only; they still count everywhere else.

    Args:
        frame: Normalized (filtered) row set.
        day_first: Ordering for positional ``a/b/c`` date strings.

    Returns:
        DataFrame with columns:
        - label: ``DD/MM`` of the day
        - timestamp: midnight Timestamp of the day
        - omset: net revenue of the day
        One row per day present, ascending by timestamp.
    """
    days = pd.to_datetime(
        frame[INVOICE_DATE].map(lambda v: resolve_invoice_date(v, day_first=day_first))
    )
    resolved = days.notna()

    unresolved = int((~resolved).sum())
    if unresolved:
        logger.warning(
            "%d row(s) with unresolvable Invoice_Date left out of the daily series", unresolved
        )

    if not resolved.any():
        return _empty_daily()

    per_day = net_value(frame)[resolved].groupby(days[resolved]).sum().sort_index()

    return pd.DataFrame(
        {
            "label": [f"{day.day:02d}/{day.month:02d}" for day in per_day.index],
            "timestamp": per_day.index,
            "omset": per_day.to_numpy(dtype=float),
        }
    )
