"""Command-line entry point: summarize a sales export.

Usage:
    sales-dashboard exports/daily_sales.xlsx
    sales-dashboard sales.csv --branch JKT --search SLS0 --focus SKU-001 SKU-007
    sales-dashboard sales.csv --output-dir marts/ --verbose

Exit codes:
    0 on success
    2 on load/configuration errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import pandas as pd

from sales_core.config import ALL_BRANCHES, FOCUS_SLOTS, DashboardConfig
from sales_core.exceptions import SalesCoreError
from sales_core.formatters.console import format_dashboard_for_console
from sales_core.metrics.api import DashboardResult, build_dashboard
from sales_core.metrics.products import top_contributors
from sales_core.transactions.load import read_source
from sales_core.transactions.schema import (
    REQUIRED_FIELDS,
    RETAILER_CODE,
    SKU_CODE,
    require_columns,
)
from sales_core.transactions.values import transaction_details

logger = logging.getLogger(__name__)


def write_marts(result: DashboardResult, output_dir: Path) -> list[Path]:
    """Write every derived table of ``result`` as CSV into ``output_dir``.

    Returns:
        Paths of the written files.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    total = result.kpis.total_omset

    tables = {
        "kpis.csv": pd.DataFrame([result.kpis.to_dict()]),
        "daily_omset.csv": result.daily,
        "top_products.csv": result.products,
        "sales_team.csv": result.sales_team,
        "outlet_pareto.csv": result.pareto,
        "product_focus.csv": result.focus_table,
        "top_30_products.csv": top_contributors(result.filtered, SKU_CODE, total_omset=total),
        "top_30_outlets.csv": top_contributors(result.filtered, RETAILER_CODE, total_omset=total),
        "transaction_details.csv": transaction_details(result.filtered),
    }

    written = []
    for name, table in tables.items():
        out_path = output_dir / name
        table.to_csv(out_path, index=False, encoding="utf-8")
        logger.info("Wrote %s (%d rows)", out_path, len(table))
        written.append(out_path)
    return written


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sales-dashboard",
        description=(
            "Compute daily sales tracking metrics (net omset, invoices, OA, product "
            "ranking, sales-team table, outlet Pareto, product focus) from a CSV or "
            "Excel transaction export."
        ),
    )
    p.add_argument("input", help="Transaction export (.csv, .txt, .xlsx, .xlsm, .xls).")
    p.add_argument("--sheet", default=0, help="Excel worksheet name or index (default: first).")
    p.add_argument(
        "-s",
        "--search",
        default="",
        help="Keep rows whose invoice, sales or outlet code contains this text.",
    )
    p.add_argument(
        "-b",
        "--branch",
        default=ALL_BRANCHES,
        help=f"Branch code to keep (default: {ALL_BRANCHES}).",
    )
    p.add_argument(
        "-f",
        "--focus",
        nargs="*",
        default=[],
        metavar="SKU",
        help=f"Up to {FOCUS_SLOTS} focus product codes (PF1..PF{FOCUS_SLOTS}).",
    )
    p.add_argument(
        "--month-first",
        action="store_true",
        help="Read a/b/c invoice dates as month/day/year instead of day/month/year.",
    )
    p.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Also write every derived table as CSV into this directory.",
    )
    p.add_argument(
        "--verbose",
        "--debug",
        action="store_true",
        dest="verbose",
        help="Verbose/debug logging output.",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    sheet = int(args.sheet) if str(args.sheet).isdigit() else args.sheet

    try:
        config = DashboardConfig.from_options(
            search_term=args.search,
            branch=args.branch,
            focus_codes=args.focus,
            day_first=not args.month_first,
        )
        source = read_source(args.input, sheet=sheet)
        require_columns(source, REQUIRED_FIELDS)
    except SalesCoreError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    result = build_dashboard(source, config)

    if config.branch != ALL_BRANCHES and config.branch not in result.branches:
        logger.warning(
            "Branch %r not found in %s. Available: %s",
            config.branch,
            args.input,
            ", ".join(result.branches) or "(none)",
        )

    print(format_dashboard_for_console(result))

    if args.output_dir:
        written = write_marts(result, Path(args.output_dir))
        print(f"\nWrote {len(written)} file(s) to {args.output_dir}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
