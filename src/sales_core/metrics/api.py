"""Public API: compute every dashboard view from one row set.

``build_dashboard`` runs normalize -> filter -> aggregators with a single
``DashboardConfig`` and returns everything the rendering and export layers
consume. It is a pure function: same rows and config, same result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pandas as pd

from sales_core.config import DashboardConfig
from sales_core.metrics.daily import daily_omset
from sales_core.metrics.focus import FocusAchievementMatrix
from sales_core.metrics.kpi import KPIStats, compute_kpis
from sales_core.metrics.pareto import outlet_pareto
from sales_core.metrics.products import product_performance
from sales_core.metrics.team import sales_roster, sales_team_performance
from sales_core.transactions.filters import filter_rows, list_branches, list_skus
from sales_core.transactions.normalize import Records, normalize_records

logger = logging.getLogger(__name__)


@dataclass
class DashboardResult:
    """All derived views for one row set and configuration.

    Attributes:
        rows: Normalized row set (unfiltered).
        filtered: Rows left after the search and branch filters.
        branches: Branch choices, from all rows.
        skus: Focus-product choices, from all rows.
        kpis: KPI snapshot of the filtered rows.
        daily: Daily series (label, timestamp, omset).
        products: Top products (sku_code, total_qty, total_omset).
        sales_team: Sales-team table, descending omset.
        roster: Representative codes in sales-team order.
        pareto: Outlet Pareto table.
        focus: Achievement matrix of the filtered rows.
        focus_codes: The configured focus slots.
        focus_table: Wide focus table for the roster and slots.
    """

    rows: pd.DataFrame
    filtered: pd.DataFrame
    branches: List[str]
    skus: List[str]
    kpis: KPIStats
    daily: pd.DataFrame
    products: pd.DataFrame
    sales_team: pd.DataFrame
    roster: List[str]
    pareto: pd.DataFrame
    focus: FocusAchievementMatrix
    focus_codes: Tuple[str, ...] = field(default_factory=tuple)
    focus_table: Optional[pd.DataFrame] = None


def build_dashboard(
    records: Records,
    config: Optional[DashboardConfig] = None,
) -> DashboardResult:
    """Compute all dashboard views.

    Args:
        records: Decoded records (iterable of mappings) or a DataFrame. It is
            normalized first; an already normalized frame passes unchanged.
        config: Filter and focus configuration. Defaults to no filtering and
            no focus products.

    Returns:
        DashboardResult. An empty input yields zero KPIs and empty tables.

    Examples:
        >>> from sales_core import DashboardConfig, build_dashboard
        >>> cfg = DashboardConfig.from_options(branch="JKT", focus_codes=["SKU-001"])
        >>> result = build_dashboard(records, cfg)
        >>> result.kpis.total_omset
        1250000.0
    """
    if config is None:
        config = DashboardConfig()

    rows = normalize_records(records)
    filtered = filter_rows(rows, config.search_term, config.branch)

    logger.info(
        "Building dashboard over %d of %d row(s) (search=%r, branch=%r)",
        len(filtered),
        len(rows),
        config.search_term,
        config.branch,
    )

    sales_team = sales_team_performance(filtered)
    roster = sales_roster(sales_team)
    focus = FocusAchievementMatrix.from_frame(filtered)

    return DashboardResult(
        rows=rows,
        filtered=filtered,
        branches=list_branches(rows),
        skus=list_skus(rows),
        kpis=compute_kpis(filtered),
        daily=daily_omset(filtered, day_first=config.day_first),
        products=product_performance(filtered),
        sales_team=sales_team,
        roster=roster,
        pareto=outlet_pareto(filtered),
        focus=focus,
        focus_codes=config.focus_codes,
        focus_table=focus.to_frame(roster, config.focus_codes),
    )
