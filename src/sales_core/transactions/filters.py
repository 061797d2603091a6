"""Filter stage and selection lists.

``filter_rows`` produces the working subset every aggregator consumes. The
branch and SKU lists are computed from the full row set so the selection
controls do not shrink as the user filters.
"""

from __future__ import annotations

import logging

import pandas as pd

from sales_core.config import ALL_BRANCHES
from sales_core.transactions.schema import (
    BRANCH_CODE,
    INVOICE_NO,
    RETAILER_CODE,
    SKU_CODE,
    USER_CODE,
)

logger = logging.getLogger(__name__)

# Columns searched by the free-text filter
SEARCH_FIELDS = [INVOICE_NO, USER_CODE, RETAILER_CODE]


def filter_rows(
    frame: pd.DataFrame,
    search_term: str = "",
    branch: str = ALL_BRANCHES,
) -> pd.DataFrame:
    """Apply the search and branch predicates.

    A row is kept when the search term is empty or appears (case-insensitive
    substring) in its invoice number, sales code or outlet code, AND the
    branch is ``ALL_BRANCHES`` or equals the row's branch code exactly.

    Args:
        frame: Normalized row set.
        search_term: Free text; empty keeps everything.
        branch: Branch code or ``ALL_BRANCHES``.

    Returns:
        New DataFrame with the matching rows and a fresh RangeIndex.

    Examples:
        >>> subset = filter_rows(rows, search_term="inv-00", branch="JKT")
    """
    mask = pd.Series(True, index=frame.index)

    if search_term:
        needle = search_term.lower()
        matches = pd.Series(False, index=frame.index)
        for col in SEARCH_FIELDS:
            matches |= (
                frame[col].astype(str).str.lower().str.contains(needle, regex=False).fillna(False)
            )
        mask &= matches

    if branch != ALL_BRANCHES:
        mask &= frame[BRANCH_CODE] == branch

    result = frame.loc[mask].reset_index(drop=True)
    logger.debug(
        "Filter search=%r branch=%r kept %d of %d row(s)",
        search_term,
        branch,
        len(result),
        len(frame),
    )
    return result


def list_branches(frame: pd.DataFrame) -> list[str]:
    """Distinct non-empty branch codes across all rows, sorted ascending."""
    codes = {c for c in frame[BRANCH_CODE].astype(str) if c}
    return sorted(codes)


def list_skus(frame: pd.DataFrame) -> list[str]:
    """Distinct non-empty SKU codes (trimmed) across all rows, sorted ascending."""
    codes = {c.strip() for c in frame[SKU_CODE].astype(str)}
    codes.discard("")
    return sorted(codes)
