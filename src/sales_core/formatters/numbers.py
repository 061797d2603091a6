"""Indonesian number formatting for reports.

Shorthand suffixes follow the Indonesian finance convention:
    K = Ribu (thousand)
    M = Juta (million)
    B = Miliar (billion)

Full figures use the id-ID grouping: "." for thousands, "," for decimals.
"""

from __future__ import annotations

_SHORTHAND_STEPS = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _plain(val: float) -> str:
    """Render like a JavaScript number: no trailing ``.0`` on integers."""
    val = float(val)
    if val.is_integer():
        return str(int(val))
    return repr(val)


def _group_id(val: float, max_decimals: int) -> str:
    """Format ``abs(val)`` with id-ID separators and up to ``max_decimals`` decimals."""
    text = f"{abs(val):,.{max_decimals}f}"
    if max_decimals:
        text = text.rstrip("0").rstrip(".")
    # swap US separators for Indonesian ones
    return text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")


def format_shorthand(val: float) -> str:
    """Format a number as Indonesian financial shorthand.

    Examples:
        >>> format_shorthand(1_500_000)
        '1.5M'
        >>> format_shorthand(-2_000)
        '-2K'
        >>> format_shorthand(950)
        '950'
    """
    sign = "-" if val < 0 else ""
    abs_val = abs(val)
    for limit, suffix in _SHORTHAND_STEPS:
        if abs_val >= limit:
            return sign + f"{abs_val / limit:.1f}".replace(".0", "", 1) + suffix
    return sign + _plain(abs_val)


def format_number(val: float) -> str:
    """Format a number with id-ID thousand separators (up to 3 decimals).

    Examples:
        >>> format_number(1234567)
        '1.234.567'
        >>> format_number(1234.5)
        '1.234,5'
    """
    rounded = round(float(val), 3)
    sign = "-" if rounded < 0 else ""
    return sign + _group_id(rounded, 3)


def format_currency_full(val: float) -> str:
    """Format a rupiah amount in full (up to 2 decimals).

    Examples:
        >>> format_currency_full(1250000)
        'Rp 1.250.000'
        >>> format_currency_full(-500)
        '-Rp 500'
    """
    rounded = round(float(val), 2)
    sign = "-" if rounded < 0 else ""
    return f"{sign}Rp {_group_id(rounded, 2)}"
