"""Outlet Pareto (80/20) table."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from sales_core.config import PARETO_THRESHOLD
from sales_core.metrics.products import rank_descending
from sales_core.transactions.schema import RETAILER_CODE
from sales_core.transactions.values import net_value

logger = logging.getLogger(__name__)

PARETO_COLUMNS = [
    "retailer_code",
    "omset",
    "cumulative_omset",
    "cumulative_percentage",
    "is_top80",
]


def outlet_pareto(frame: pd.DataFrame, threshold: float = PARETO_THRESHOLD) -> pd.DataFrame:
    """Rank outlets by net revenue and mark the top cumulative band.

    The grand total is floored at zero so a net-negative row set yields 0%
    everywhere instead of meaningless percentages.

    Args:
        frame: Normalized (filtered) row set.
        threshold: Cumulative percentage bounding the top band (default: 80).

    Returns:
        DataFrame with PARETO_COLUMNS:
        - cumulative_omset: running sum in ranked order
        - cumulative_percentage: cumulative_omset / total * 100 (0 if total is 0)
        - is_top80: cumulative_percentage <= threshold

    Examples:
        >>> outlet_pareto(rows)["cumulative_percentage"].tolist()
        [50.0, 75.0, 90.0, 100.0]
    """
    table = (
        pd.DataFrame({"retailer_code": frame[RETAILER_CODE], "omset": net_value(frame)})
        .groupby("retailer_code", sort=False, dropna=False)["omset"]
        .sum()
        .astype(float)
        .reset_index()
    )
    table = rank_descending(table, "omset")

    total = max(0.0, float(table["omset"].sum()))
    table["cumulative_omset"] = table["omset"].cumsum()
    if total == 0:
        table["cumulative_percentage"] = np.zeros(len(table))
    else:
        table["cumulative_percentage"] = table["cumulative_omset"] / total * 100
    table["is_top80"] = table["cumulative_percentage"] <= threshold

    logger.debug(
        "Pareto over %d outlet(s), %d in the top band",
        len(table),
        int(table["is_top80"].sum()),
    )
    return table[PARETO_COLUMNS]
