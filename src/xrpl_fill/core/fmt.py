"""
Formatting helpers (display only).

Estimation never formats; these helpers exist for logs, tests and the
presentation layer that consumes FillResult / DepthSummary.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Optional

from .constants import AMM_FEE_DIVISOR

PERCENT_FACTOR: int = 100


# ---------------------------------------------------------------------------
# Decimal formatting
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('123456')   -> '1.234560000000000000E+5'
    """
    return format(x, f".{places}E")


def fmt_fixed(x: Optional[Decimal], places: int = 6) -> str:
    """Fixed-point rendering; None renders as '-'."""
    if x is None:
        return "-"
    return format(x, f".{places}f")


# ---------------------------------------------------------------------------
# AMM trading fee (ledger integer units of 1/100,000)
# ---------------------------------------------------------------------------

def format_amm_fee(trading_fee: int) -> str:
    """Render a ledger trading fee as a percentage, e.g. 1000 -> '1%', 500 -> '0.5%'."""
    pct = Decimal(trading_fee) / AMM_FEE_DIVISOR * PERCENT_FACTOR
    s = format(pct.quantize(Decimal("0.001"), rounding=ROUND_HALF_EVEN), "f")
    s = s.rstrip("0").rstrip(".")
    return f"{s or '0'}%"


def parse_amm_fee_input(percent_str: str) -> Optional[int]:
    """Parse a percentage string into the ledger trading fee integer ('0.5' -> 500).

    Returns None when the input is not a finite number.
    """
    try:
        pct = Decimal(percent_str.strip())
    except (InvalidOperation, AttributeError):
        return None
    if not pct.is_finite():
        return None
    units = pct / PERCENT_FACTOR * AMM_FEE_DIVISOR
    return int(units.to_integral_value(rounding=ROUND_HALF_EVEN))


__all__ = [
    "PERCENT_FACTOR",
    "fmt_dec",
    "fmt_fixed",
    "format_amm_fee",
    "parse_amm_fee_input",
]
