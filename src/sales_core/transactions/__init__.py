"""Transaction row set: decoding, normalization, filtering and signing.

- ``normalize``: raw records -> DataFrame with coerced numeric fields
- ``filters``: search / branch filter and the selection lists
- ``values``: net value and net quantity (returns subtract)
- ``dates``: invoice date resolution for the daily series
- ``load``: thin CSV / Excel reader

Example:
    >>> from sales_core.transactions import filter_rows, normalize_records
    >>> rows = normalize_records(records)
    >>> subset = filter_rows(rows, search_term="SLS01", branch="All")
"""

from sales_core.transactions.dates import resolve_invoice_date
from sales_core.transactions.filters import filter_rows, list_branches, list_skus
from sales_core.transactions.load import load_transactions, read_source
from sales_core.transactions.normalize import normalize_frame, normalize_records, to_number
from sales_core.transactions.values import (
    net_quantity,
    net_value,
    row_net_quantity,
    row_net_value,
    transaction_details,
)

__all__ = [
    "filter_rows",
    "list_branches",
    "list_skus",
    "load_transactions",
    "net_quantity",
    "net_value",
    "normalize_frame",
    "normalize_records",
    "read_source",
    "resolve_invoice_date",
    "row_net_quantity",
    "row_net_value",
    "to_number",
    "transaction_details",
]
