"""Example: Daily sales dashboard for one branch with product focus

This example demonstrates how to load a distributor sales export, compute the
dashboard for a single branch with three focus products, and print the
sales-team table, the top Pareto outlets and the focus matrix.

Prerequisites:
- A transaction export at data/daily_sales.xlsx (or modify the path below)
- Columns named as in the distributor export (Invoice_No, Line_Value, Status, ...)
"""

from pathlib import Path

from sales_core import DashboardConfig, build_dashboard, load_transactions
from sales_core.formatters import format_currency_full, format_shorthand

# MODIFY AS NEEDED
export_path = Path("data/daily_sales.xlsx")
branch = "JKT"
focus_products = ["SKU-001", "SKU-007", "SKU-013"]

rows = load_transactions(export_path)
print(f"Loaded {len(rows)} transaction lines from {export_path}")

config = DashboardConfig.from_options(branch=branch, focus_codes=focus_products)
result = build_dashboard(rows, config)

print(f"\nBranch {branch}: {len(result.filtered)} lines")
print(f"Net omset: {format_currency_full(result.kpis.total_omset)}")
print(f"Invoices: {result.kpis.total_invoice}, OA: {result.kpis.outlet_active}")

print("\nSales team (descending omset):")
for _, rep in result.sales_team.iterrows():
    print(f"  {rep['user_code']}: {format_shorthand(rep['omset'])} ({rep['invoice']} invoices)")

top_band = result.pareto[result.pareto["is_top80"]]
print(f"\n{len(top_band)} of {len(result.pareto)} outlets make up the top 80% of omset")
print(top_band.head(10))

# Focus matrix: <NA> means the slot has no product, 0 means no outlet bought it
print("\nProduct focus (distinct outlets per representative):")
print(result.focus_table[["user_code", "PF1", "PF2", "PF3"]])

# Move PF2 to a different product without touching the other slots
config = config.with_focus_code(1, "SKU-020")
result = build_dashboard(rows, config)
print("\nAfter changing PF2:")
print(result.focus_table[["user_code", "PF1", "PF2", "PF3"]])
