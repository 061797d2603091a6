"""Console output formatting for dashboard results."""

from __future__ import annotations

import re

from sales_core.formatters.numbers import format_number, format_shorthand
from sales_core.metrics.api import DashboardResult

# Rows shown per table in the console summary
MAX_TABLE_ROWS = 10


def sanitize_for_console(text: str) -> str:
    """Remove non-ASCII characters so cp1252 consoles do not choke."""
    return re.sub(r"[^\x00-\x7F]+", "", text)


def format_dashboard_for_console(result: DashboardResult, max_rows: int = MAX_TABLE_ROWS) -> str:
    """Build a human-readable summary of a dashboard result.

    Args:
        result: Output of ``build_dashboard``.
        max_rows: Maximum rows printed per ranking table.

    Returns:
        Multi-line text for console output.
    """
    if result.filtered.empty:
        return "No transactions match the current filters."

    kpis = result.kpis
    lines = []
    lines.append("Daily Sales Tracking")
    lines.append("=" * 60)
    lines.append(f"Rows: {len(result.filtered)} of {len(result.rows)}")
    lines.append("")

    lines.append("Ringkasan Performa:")
    lines.append(f"  Total Net Omset:     Rp {format_number(kpis.total_omset)}")
    lines.append(f"  Total Invoices:      {format_number(kpis.total_invoice)}")
    lines.append(f"  Total Quantity:      {format_number(kpis.total_quantity)}")
    lines.append(f"  Outlet Active (OA):  {format_number(kpis.outlet_active)}")
    lines.append(f"  Total Line Sold:     {format_number(kpis.total_line_sold)}")
    lines.append(f"  Avg SKU / Invoice:   {kpis.avg_sku_per_invoice:.2f}")
    lines.append("")

    lines.append("Sales Performance (Net Omset):")
    lines.append(f"  {'User':<12}{'Omset':>12}{'Inv':>6}{'Qty':>10}{'OA':>6}{'SKU':>6}{'Avg':>7}")
    for _, row in result.sales_team.head(max_rows).iterrows():
        lines.append(
            f"  {str(row['user_code']):<12}"
            f"{format_shorthand(row['omset']):>12}"
            f"{int(row['invoice']):>6}"
            f"{format_number(row['qty']):>10}"
            f"{int(row['oa']):>6}"
            f"{int(row['total_sku']):>6}"
            f"{row['avg_sku_inv']:>7.2f}"
        )
    lines.append("")

    lines.append("Top Products:")
    for idx, row in result.products.head(max_rows).iterrows():
        lines.append(
            f"  {idx + 1:>2}. {row['sku_code']}: Rp {format_shorthand(row['total_omset'])} "
            f"(qty {format_number(row['total_qty'])})"
        )
    lines.append("")

    top_band = result.pareto[result.pareto["is_top80"]]
    lines.append(
        f"Pareto Outlets: {len(top_band)} of {len(result.pareto)} outlet(s) "
        f"make up the top 80% of omset"
    )
    for _, row in top_band.head(max_rows).iterrows():
        lines.append(
            f"  {row['retailer_code']}: Rp {format_shorthand(row['omset'])} "
            f"({row['cumulative_percentage']:.1f}%)"
        )
    lines.append("")

    if not result.daily.empty:
        lines.append("Daily Omset:")
        for _, row in result.daily.iterrows():
            lines.append(f"  {row['label']}: Rp {format_shorthand(row['omset'])}")
        lines.append("")

    if any(result.focus_codes):
        lines.append("Product Focus (OA per SKU):")
        header = "  " + f"{'User':<12}" + "".join(
            f"{('PF' + str(i + 1)):>8}" for i in range(len(result.focus_codes))
        )
        lines.append(header)
        for user in result.roster:
            cells = [
                result.focus.cell(user, slot, code)
                for slot, code in enumerate(result.focus_codes)
            ]
            lines.append("  " + f"{user:<12}" + "".join(f"{c.display:>8}" for c in cells))
        configured = [f"PF{i + 1}={code}" for i, code in enumerate(result.focus_codes) if code]
        lines.append("  " + ", ".join(configured))

    return sanitize_for_console("\n".join(lines).rstrip())
