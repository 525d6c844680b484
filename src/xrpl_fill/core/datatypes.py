"""
Core datatypes used by the estimators.

These datatypes are immutable so that level walks and AMM curve evaluation can
remain deterministic and testable. A fresh set is built per estimation call.

Notes:
- All quantities are Decimal; price is quote-per-base.
- `PricedLevel.total` is price × amount at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Literal, Optional, Union

from .amounts import DecimalLike, to_decimal

Side = Literal["buy", "sell"]


# ---------------------------------------------------------------------------
# Price level
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PricedLevel:
    """One order-book level.

    Fields:
    - price: quote per 1 base (> 0).
    - amount: base executable at this level (> 0).
    - total: price × amount, in quote.
    - account: owner identifier, informational only.
    """

    price: Decimal
    amount: Decimal
    total: Decimal
    account: str = ""

    @staticmethod
    def from_numbers(price: DecimalLike, amount: DecimalLike, account: str = "") -> "PricedLevel":
        """Build a level from plain numbers/strings; total is derived."""
        p = to_decimal(price)
        a = to_decimal(amount)
        return PricedLevel(price=p, amount=a, total=p * a, account=account)

    def is_usable(self) -> bool:
        """Return True if the level can be taken for a positive fill."""
        return self.price > 0 and self.amount > 0


# ---------------------------------------------------------------------------
# Fill result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FillResult:
    """Outcome of a fill estimate.

    Invariants: filled_amount == clob_filled + amm_filled, and
    avg_price == total_cost / filled_amount with filled_amount > 0.
    `slippage` is a percentage against the mid price, None without one.
    """

    avg_price: Decimal
    worst_price: Decimal
    slippage: Optional[Decimal]
    filled_amount: Decimal
    total_cost: Decimal
    full_fill: bool
    clob_filled: Decimal
    amm_filled: Decimal


# ---------------------------------------------------------------------------
# Depth summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DepthSummary:
    """Executable volume and active level count per side."""

    bid_volume: Decimal
    bid_levels: int
    ask_volume: Decimal
    ask_levels: int

    def as_dict(self) -> Dict[str, Union[str, int]]:
        """Display payload: volumes as plain fixed-point strings."""
        return {
            "bidVolume": _plain(self.bid_volume),
            "bidLevels": self.bid_levels,
            "askVolume": _plain(self.ask_volume),
            "askLevels": self.ask_levels,
        }


def _plain(x: Decimal) -> str:
    if x == 0:
        return "0"
    s = format(x, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


__all__ = [
    "Side",
    "PricedLevel",
    "FillResult",
    "DepthSummary",
]
