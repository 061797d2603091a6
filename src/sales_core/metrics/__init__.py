"""Aggregation engine: KPIs, daily series, rankings, Pareto and focus matrix.

Every function here takes a normalized (usually filtered) row set and
returns a new object; none of them mutates its input, so they can be run
independently or in parallel over the same frame.

Views:
    compute_kpis: KPIStats snapshot
    daily_omset: net revenue per calendar day
    product_performance: top 15 products by net revenue
    sales_team_performance: per-representative table (the roster order)
    outlet_pareto: outlets ranked with cumulative share and the 80% band
    FocusAchievementMatrix: distinct outlets per (representative, product)
    build_dashboard: all of the above in one call

Example:
    >>> from sales_core.metrics import build_dashboard
    >>> result = build_dashboard(records)
    >>> result.pareto.head()
"""

from sales_core.metrics.api import DashboardResult, build_dashboard
from sales_core.metrics.daily import daily_omset
from sales_core.metrics.focus import FocusAchievementMatrix, FocusCell
from sales_core.metrics.kpi import KPIStats, compute_kpis
from sales_core.metrics.pareto import outlet_pareto
from sales_core.metrics.products import product_performance, top_contributors
from sales_core.metrics.team import sales_roster, sales_team_performance

__all__ = [
    "DashboardResult",
    "FocusAchievementMatrix",
    "FocusCell",
    "KPIStats",
    "build_dashboard",
    "compute_kpis",
    "daily_omset",
    "outlet_pareto",
    "product_performance",
    "sales_roster",
    "sales_team_performance",
    "top_contributors",
]
