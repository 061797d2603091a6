"""Net-value resolver: the single signed-value convention.

Return rows (``Status == "R"``) subtract from revenue and quantity, every
other row adds. All aggregators go through these helpers so KPI totals and
per-group totals always agree.
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np
import pandas as pd

from sales_core.config import RETURN_STATUS
from sales_core.transactions.normalize import to_number
from sales_core.transactions.schema import (
    INVOICE_DATE,
    INVOICE_NO,
    INVOICE_QTY,
    LINE_VALUE,
    RETAILER_CODE,
    SKU_CODE,
    SKU_PRICE,
    STATUS,
    USER_CODE,
)


def status_sign(frame: pd.DataFrame) -> pd.Series:
    """Return -1.0 for return rows and 1.0 for every other row."""
    is_return = frame[STATUS] == RETURN_STATUS
    return pd.Series(np.where(is_return, -1.0, 1.0), index=frame.index)


def net_value(frame: pd.DataFrame) -> pd.Series:
    """Signed ``Line_Value`` per row."""
    return frame[LINE_VALUE] * status_sign(frame)


def net_quantity(frame: pd.DataFrame) -> pd.Series:
    """Signed ``Invoice_Qty`` per row."""
    return frame[INVOICE_QTY] * status_sign(frame)


def _row_sign(row: Mapping[str, Any]) -> float:
    return -1.0 if row.get(STATUS) == RETURN_STATUS else 1.0


def row_net_value(row: Mapping[str, Any]) -> float:
    """Signed line value of a single row (a mapping or a DataFrame row).

    Examples:
        >>> row_net_value({"Status": "R", "Line_Value": 30})
        -30.0
        >>> row_net_value({"Status": "I", "Line_Value": "100"})
        100.0
    """
    return _row_sign(row) * to_number(row.get(LINE_VALUE))


def row_net_quantity(row: Mapping[str, Any]) -> float:
    """Signed invoice quantity of a single row."""
    return _row_sign(row) * to_number(row.get(INVOICE_QTY))


def transaction_details(frame: pd.DataFrame) -> pd.DataFrame:
    """Build the transaction detail view with signed quantity and value.

    One row per transaction, in input order, with human-readable headers
    and the status spelled out as "Invoice" or "Return".

    Args:
        frame: Normalized (usually filtered) row set.

    Returns:
        DataFrame with columns Date, No Inv, Status, Sales, Outlet, Product,
        Price, Qty, Value.
    """
    is_return = frame[STATUS] == RETURN_STATUS
    return pd.DataFrame(
        {
            "Date": frame[INVOICE_DATE],
            "No Inv": frame[INVOICE_NO],
            "Status": np.where(is_return, "Return", "Invoice"),
            "Sales": frame[USER_CODE],
            "Outlet": frame[RETAILER_CODE],
            "Product": frame[SKU_CODE],
            "Price": frame[SKU_PRICE],
            "Qty": net_quantity(frame),
            "Value": net_value(frame),
        },
        index=frame.index,
    ).reset_index(drop=True)
