"""Sales-team performance per representative (User_Code)."""

from __future__ import annotations

import logging

import pandas as pd

from sales_core.config import INVOICE_STATUS
from sales_core.metrics.products import rank_descending
from sales_core.transactions.schema import INVOICE_NO, RETAILER_CODE, STATUS, USER_CODE
from sales_core.transactions.values import net_quantity, net_value

logger = logging.getLogger(__name__)

TEAM_COLUMNS = ["user_code", "omset", "invoice", "qty", "oa", "total_sku", "avg_sku_inv"]


def sales_team_performance(frame: pd.DataFrame) -> pd.DataFrame:
    """Aggregate the row set per sales representative.

    Per representative:
    - omset: net revenue
    - invoice: distinct invoice numbers on invoice rows
    - qty: net quantity
    - oa: distinct outlets over invoice and return rows
    - total_sku: number of invoice rows
    - avg_sku_inv: total_sku / invoice (0 when there are no invoices)

    Args:
        frame: Normalized (filtered) row set.

    Returns:
        DataFrame with TEAM_COLUMNS sorted by omset descending; ties keep
        first-seen order. The user_code column is the representative roster.
    """
    is_invoice = frame[STATUS] == INVOICE_STATUS
    work = pd.DataFrame(
        {
            "user_code": frame[USER_CODE],
            "omset": net_value(frame),
            "qty": net_quantity(frame),
            # Return rows never contribute an invoice number
            "invoice_no": frame[INVOICE_NO].where(is_invoice),
            "is_invoice": is_invoice.astype(int),
            "retailer_code": frame[RETAILER_CODE],
        }
    )

    grouped = (
        work.groupby("user_code", sort=False, dropna=False)
        .agg(
            omset=("omset", "sum"),
            invoice=("invoice_no", "nunique"),
            qty=("qty", "sum"),
            oa=("retailer_code", "nunique"),
            total_sku=("is_invoice", "sum"),
        )
        .reset_index()
    )
    grouped = grouped.astype(
        {"omset": float, "qty": float, "invoice": int, "oa": int, "total_sku": int}
    )
    grouped["avg_sku_inv"] = (
        grouped["total_sku"] / grouped["invoice"].where(grouped["invoice"] > 0)
    ).fillna(0.0)

    result = rank_descending(grouped[TEAM_COLUMNS], "omset")
    logger.debug("Sales team table: %d representative(s)", len(result))
    return result


def sales_roster(team: pd.DataFrame) -> list[str]:
    """Representative codes in sales-team table order."""
    return team["user_code"].tolist()
