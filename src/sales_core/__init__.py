"""Sales Core - daily sales tracking metrics for distributor exports.

This package turns a flat list of sales-transaction rows (invoice and
return lines from a spreadsheet or CSV export) into the figures a sales
dashboard shows:

- **KPIs**: net omset, invoices, net quantity, active outlets (OA),
  line count and average SKU lines per invoice
- **Daily series**: net omset per calendar day
- **Rankings**: top products, sales-team table, outlet Pareto (80/20)
- **Product focus**: distinct outlets per sales representative for up to
  eight focus SKUs

Module Structure:
    sales_core.transactions: Row normalization, filtering, signing, dates, loading
    sales_core.metrics: Aggregators and the build_dashboard entry point
    sales_core.formatters: Indonesian number formatting and console output
    sales_core.config: DashboardConfig and shared constants
    sales_core.cli: ``sales-dashboard`` command

Quick Start:
    >>> from sales_core import DashboardConfig, build_dashboard, load_transactions
    >>>
    >>> rows = load_transactions("exports/daily_sales.xlsx")
    >>> config = DashboardConfig.from_options(branch="JKT", focus_codes=["SKU-001"])
    >>> result = build_dashboard(rows, config)
    >>> result.kpis.total_omset
    >>> result.pareto[result.pareto["is_top80"]]

Sign convention:
    Rows with Status "R" (return) subtract their Line_Value and Invoice_Qty;
    every other row adds them.
"""

__version__ = "0.1.0"

from sales_core.config import DashboardConfig
from sales_core.exceptions import ConfigError, DataQualityError, LoadError, SalesCoreError
from sales_core.metrics.api import DashboardResult, build_dashboard
from sales_core.transactions.load import load_transactions

__all__ = [
    "ConfigError",
    "DashboardConfig",
    "DashboardResult",
    "DataQualityError",
    "LoadError",
    "SalesCoreError",
    "__version__",
    "build_dashboard",
    "load_transactions",
]
