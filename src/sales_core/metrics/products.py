"""Product ranking and contribution tables."""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from sales_core.config import TOP_CONTRIBUTORS, TOP_PRODUCTS
from sales_core.transactions.schema import SKU_CODE
from sales_core.transactions.values import net_quantity, net_value

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = ["sku_code", "total_qty", "total_omset"]
CONTRIBUTOR_COLUMNS = ["rank", "code", "omset", "contribution_pct"]


def rank_descending(table: pd.DataFrame, column: str) -> pd.DataFrame:
    """Stable descending sort; equal values keep their current order."""
    return table.sort_values(column, ascending=False, kind="stable").reset_index(drop=True)


def product_performance(frame: pd.DataFrame, limit: int = TOP_PRODUCTS) -> pd.DataFrame:
    """Rank products by net revenue.

    Groups are formed in first-seen order, so products with equal revenue
    keep the order in which they first appear in the row set.

    Args:
        frame: Normalized (filtered) row set.
        limit: Number of products to keep (default: 15).

    Returns:
        DataFrame with columns sku_code, total_qty, total_omset, sorted by
        total_omset descending and truncated to ``limit`` rows.
    """
    work = pd.DataFrame(
        {
            "sku_code": frame[SKU_CODE],
            "total_qty": net_quantity(frame),
            "total_omset": net_value(frame),
        }
    )
    grouped = work.groupby("sku_code", sort=False, dropna=False)[["total_qty", "total_omset"]].sum()
    table = grouped.reset_index()[PRODUCT_COLUMNS]
    ranked = rank_descending(table, "total_omset").head(limit)
    logger.debug("Ranked %d product(s), keeping %d", len(table), len(ranked))
    return ranked


def top_contributors(
    frame: pd.DataFrame,
    key: str,
    limit: int = TOP_CONTRIBUTORS,
    total_omset: Optional[float] = None,
) -> pd.DataFrame:
    """Top codes of ``key`` by net revenue with their share of the total.

    Blank codes are grouped under "Unknown". The share divides by the total
    net revenue of ``frame`` (or ``total_omset`` when given), using 1 when
    that total is zero.

    Args:
        frame: Normalized (filtered) row set.
        key: Column to group by, e.g. ``SKU_Code`` or ``Retailer_Code``.
        limit: Number of rows to keep (default: 30).
        total_omset: Optional precomputed net revenue total.

    Returns:
        DataFrame with columns rank (1-based), code, omset, contribution_pct.

    Examples:
        >>> top_contributors(rows, "Retailer_Code", limit=5)
    """
    values = net_value(frame)
    if total_omset is None:
        total_omset = float(values.sum())
    divisor = total_omset or 1.0

    codes = frame[key].astype(str).where(frame[key].astype(str) != "", "Unknown")
    table = (
        pd.DataFrame({"code": codes, "omset": values})
        .groupby("code", sort=False)["omset"]
        .sum()
        .reset_index()
    )
    ranked = rank_descending(table, "omset").head(limit).copy()
    ranked.insert(0, "rank", range(1, len(ranked) + 1))
    ranked["contribution_pct"] = ranked["omset"] / divisor * 100
    return ranked[CONTRIBUTOR_COLUMNS]
