"""Configuration for the sales tracking engine.

Holds the constants shared by the aggregators and the ``DashboardConfig``
value passed explicitly into each recomputation. Nothing here is global
mutable state: a new config is built whenever the search term, branch or
focus slots change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from sales_core.exceptions import ConfigError

# Sentinel branch value meaning "do not filter by branch"
ALL_BRANCHES = "All"

# Number of product-focus slots (PF1 - PF8)
FOCUS_SLOTS = 8

# Published size of the product ranking
TOP_PRODUCTS = 15

# Size of the product / outlet contribution tables
TOP_CONTRIBUTORS = 30

# Cumulative share marking the Pareto "top" band
PARETO_THRESHOLD = 80.0

# Spreadsheet serial day number of 1970-01-01 (serial epoch is 1899-12-30)
SERIAL_EPOCH_OFFSET = 25569

# Transaction status codes
INVOICE_STATUS = "I"
RETURN_STATUS = "R"


@dataclass(frozen=True)
class DashboardConfig:
    """Parameters for one recomputation of the dashboard.

    Attributes:
        search_term: Free text matched case-insensitively against invoice
            number, sales code and outlet code. Empty matches everything.
        branch: Branch code to keep, or ``ALL_BRANCHES``.
        focus_codes: Ordered focus-product slots, ``""`` meaning the slot is
            not configured. Always ``FOCUS_SLOTS`` long.
        day_first: Read positional ``a/b/c`` invoice dates as day/month/year.
            Set False for month-first sources.
    """

    search_term: str = ""
    branch: str = ALL_BRANCHES
    focus_codes: Tuple[str, ...] = field(default_factory=lambda: ("",) * FOCUS_SLOTS)
    day_first: bool = True

    def __post_init__(self) -> None:
        if len(self.focus_codes) != FOCUS_SLOTS:
            raise ConfigError(
                f"focus_codes must have exactly {FOCUS_SLOTS} slots, got {len(self.focus_codes)}. "
                f"Use DashboardConfig.from_options() to pad a shorter list."
            )
        if not str(self.branch).strip():
            raise ConfigError(f"branch must be a branch code or '{ALL_BRANCHES}'")

    @classmethod
    def from_options(
        cls,
        search_term: Optional[str] = None,
        branch: Optional[str] = None,
        focus_codes: Optional[Iterable[Optional[str]]] = None,
        day_first: bool = True,
    ) -> DashboardConfig:
        """Build a config from loosely-typed caller options.

        Args:
            search_term: Search text; None is treated as empty.
            branch: Branch code; None or blank selects all branches.
            focus_codes: Up to ``FOCUS_SLOTS`` product codes. Missing slots
                are padded with ``""`` and codes are trimmed.
            day_first: Positional date ordering, see class docs.

        Returns:
            DashboardConfig instance.

        Raises:
            ConfigError: If more than ``FOCUS_SLOTS`` focus codes are given.

        Examples:
            >>> cfg = DashboardConfig.from_options(focus_codes=["SKU1"])
            >>> cfg.focus_codes[:2]
            ('SKU1', '')
        """
        codes = ["" if c is None else str(c).strip() for c in (focus_codes or [])]
        if len(codes) > FOCUS_SLOTS:
            raise ConfigError(f"At most {FOCUS_SLOTS} focus codes are supported, got {len(codes)}")
        codes.extend([""] * (FOCUS_SLOTS - len(codes)))

        branch_value = (branch or "").strip() or ALL_BRANCHES

        return cls(
            search_term=search_term or "",
            branch=branch_value,
            focus_codes=tuple(codes),
            day_first=day_first,
        )

    def with_focus_code(self, slot: int, code: str) -> DashboardConfig:
        """Return a copy with one focus slot (0-based) replaced."""
        if not 0 <= slot < FOCUS_SLOTS:
            raise ConfigError(f"Focus slot must be between 0 and {FOCUS_SLOTS - 1}, got {slot}")
        codes = list(self.focus_codes)
        codes[slot] = (code or "").strip()
        return DashboardConfig(
            search_term=self.search_term,
            branch=self.branch,
            focus_codes=tuple(codes),
            day_first=self.day_first,
        )
