"""Product-focus achievement matrix.

For each sales representative and each configured focus product, counts the
distinct outlets that bought that product from the representative on
invoice rows. Returns never add outlets.

The matrix keeps two facts apart: whether a slot has a focus code at all,
and how many outlets were achieved. An empty slot renders as blank, a
configured slot with no buyers as 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

import pandas as pd

from sales_core.config import INVOICE_STATUS
from sales_core.transactions.schema import RETAILER_CODE, SKU_CODE, STATUS, USER_CODE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusCell:
    """One (representative, focus slot) cell of the matrix.

    Attributes:
        user_code: Sales representative code.
        slot: 0-based focus slot index (PF1 is slot 0).
        focus_code: Product code configured in the slot, "" if none.
        configured: True when the slot has a focus code.
        count: Distinct outlets achieved, 0 when not configured.
    """

    user_code: str
    slot: int
    focus_code: str
    configured: bool
    count: int

    @property
    def display(self) -> str:
        """"-" for an unconfigured slot, otherwise the count."""
        return str(self.count) if self.configured else "-"


class FocusAchievementMatrix:
    """Distinct-outlet counts keyed by (representative, product).

    Build it once per filtered row set with ``from_frame`` and query it for
    any focus configuration.

    Example:
        >>> matrix = FocusAchievementMatrix.from_frame(filtered)
        >>> matrix.achievement("SLS01", "SKU-001")
        2
    """

    def __init__(self, counts: Dict[Tuple[str, str], int]) -> None:
        self._counts = dict(counts)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> FocusAchievementMatrix:
        """Scan invoice rows with non-blank user, SKU and outlet codes.

        Codes are trimmed before grouping.
        """
        invoices = frame.loc[frame[STATUS] == INVOICE_STATUS]
        keys = pd.DataFrame(
            {
                "user": invoices[USER_CODE].astype(str).str.strip(),
                "sku": invoices[SKU_CODE].astype(str).str.strip(),
                "outlet": invoices[RETAILER_CODE].astype(str).str.strip(),
            }
        )
        keys = keys[(keys["user"] != "") & (keys["sku"] != "") & (keys["outlet"] != "")]

        counts: Dict[Tuple[str, str], int] = {}
        if not keys.empty:
            per_pair = keys.groupby(["user", "sku"], sort=False)["outlet"].nunique()
            counts = {(user, sku): int(n) for (user, sku), n in per_pair.items()}

        logger.debug("Focus matrix built with %d (user, sku) pair(s)", len(counts))
        return cls(counts)

    def __len__(self) -> int:
        return len(self._counts)

    def achievement(self, user_code: str, focus_code: str) -> int:
        """Distinct outlets for the pair; 0 for an empty or unknown code."""
        if not focus_code:
            return 0
        return self._counts.get((user_code, focus_code), 0)

    def cell(self, user_code: str, slot: int, focus_code: str) -> FocusCell:
        configured = bool(focus_code)
        return FocusCell(
            user_code=user_code,
            slot=slot,
            focus_code=focus_code or "",
            configured=configured,
            count=self.achievement(user_code, focus_code) if configured else 0,
        )

    def cells(self, roster: Iterable[str], focus_codes: Sequence[str]) -> List[FocusCell]:
        """All cells, representative by representative in roster order."""
        return [
            self.cell(user, slot, code)
            for user in roster
            for slot, code in enumerate(focus_codes)
        ]

    def to_frame(self, roster: Iterable[str], focus_codes: Sequence[str]) -> pd.DataFrame:
        """Wide table: one row per representative, one column per slot.

        Columns are ``user_code`` then ``PF1`` .. ``PFn``. Values use the
        nullable ``Int64`` dtype, ``<NA>`` marking an unconfigured slot.
        """
        roster = list(roster)
        data: Dict[str, object] = {"user_code": pd.Series(roster, dtype=object)}
        for slot, code in enumerate(focus_codes):
            values = [self.achievement(user, code) if code else None for user in roster]
            data[f"PF{slot + 1}"] = pd.array(values, dtype="Int64")
        return pd.DataFrame(data)
