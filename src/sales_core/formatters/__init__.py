"""Output formatters for dashboard results."""

from sales_core.formatters.console import format_dashboard_for_console
from sales_core.formatters.numbers import format_currency_full, format_number, format_shorthand

__all__ = [
    "format_currency_full",
    "format_dashboard_for_console",
    "format_number",
    "format_shorthand",
]
