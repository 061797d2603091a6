"""KPI snapshot: the six headline figures of the dashboard."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import pandas as pd

from sales_core.config import INVOICE_STATUS
from sales_core.transactions.schema import INVOICE_NO, RETAILER_CODE, STATUS
from sales_core.transactions.values import net_quantity, net_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KPIStats:
    """Summary scalars over a filtered row set.

    Attributes:
        total_omset: Net revenue (returns subtracted).
        total_invoice: Distinct invoice numbers on invoice (``I``) rows.
        total_quantity: Net quantity (returns subtracted).
        outlet_active: Distinct outlet codes over invoice and return rows.
        avg_sku_per_invoice: ``total_line_sold / total_invoice``, 0 when
            there are no invoices.
        total_line_sold: Number of invoice rows.
    """

    total_omset: float
    total_invoice: int
    total_quantity: float
    outlet_active: int
    avg_sku_per_invoice: float
    total_line_sold: int

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def compute_kpis(frame: pd.DataFrame) -> KPIStats:
    """Compute the KPI snapshot for a (filtered) row set.

    A return row sharing an invoice number with an invoice row neither adds
    an invoice nor removes one.

    Args:
        frame: Normalized row set.

    Returns:
        KPIStats; all zeros for an empty frame.

    Examples:
        >>> stats = compute_kpis(rows)
        >>> stats.total_omset
        70.0
    """
    is_invoice = frame[STATUS] == INVOICE_STATUS

    total_invoice = int(frame.loc[is_invoice, INVOICE_NO].nunique())
    total_line_sold = int(is_invoice.sum())
    avg = 0.0 if total_invoice == 0 else total_line_sold / total_invoice

    stats = KPIStats(
        total_omset=float(net_value(frame).sum()),
        total_invoice=total_invoice,
        total_quantity=float(net_quantity(frame).sum()),
        outlet_active=int(frame[RETAILER_CODE].nunique()),
        avg_sku_per_invoice=avg,
        total_line_sold=total_line_sold,
    )
    logger.debug("KPIs over %d row(s): %s", len(frame), stats)
    return stats
