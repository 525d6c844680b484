"""CLOB-only fill estimation: walk priced levels best-price-first.

Levels must already be in walk order: asks ascending for a buy, bids
descending for a sell (see `book_levels.best_first`).

Shared helpers used by the combined estimator live here as well:
- requested_amount(x): Decimal trade size, or None if not a positive finite number.
- slippage_percent(avg, mid): |avg − mid| / mid × 100, or None without a usable mid.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Sequence

from .core.amounts import estimate_context, to_decimal
from .core.datatypes import FillResult, PricedLevel

# Debug printing control
DEBUG_CLOB = False

def _dbg(msg: str) -> None:
    if DEBUG_CLOB:
        print(f"[CLOB] {msg}")


_HUNDRED = Decimal(100)


def requested_amount(x: Any) -> Optional[Decimal]:
    """Return the requested size as Decimal, or None for zero/negative/NaN/infinite/unparseable input."""
    if x is None or isinstance(x, bool):
        return None
    try:
        d = to_decimal(x)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not d.is_finite() or d <= 0:
        return None
    return d


def slippage_percent(avg_price: Decimal, mid_price: Optional[Decimal]) -> Optional[Decimal]:
    if mid_price is None:
        return None
    mid = to_decimal(mid_price)
    if not mid.is_finite() or mid <= 0:
        return None
    return abs(avg_price - mid) / mid * _HUNDRED


def estimate_fill(
    levels: Sequence[PricedLevel],
    amount: Any,
    mid_price: Optional[Decimal],
) -> Optional[FillResult]:
    """Estimate a fill of `amount` base against `levels` only.

    Returns None when the amount is not a positive finite number, when there
    are no levels, or when nothing could be filled. A returned result always
    has filled_amount > 0.
    """
    remaining = requested_amount(amount)
    if remaining is None or not levels:
        return None

    with estimate_context():
        filled = Decimal(0)
        total_cost = Decimal(0)
        worst_price = Decimal(0)

        for level in levels:
            if remaining <= 0:
                break
            if not level.is_usable():
                continue
            fill = min(remaining, level.amount)
            filled += fill
            total_cost += fill * level.price
            worst_price = level.price
            remaining -= fill
            _dbg(f"take {fill} @ {level.price} (remaining={remaining})")

        if filled <= 0:
            return None

        avg_price = total_cost / filled
        slippage = slippage_percent(avg_price, mid_price)

    return FillResult(
        avg_price=avg_price,
        worst_price=worst_price,
        slippage=slippage,
        filled_amount=filled,
        total_cost=total_cost,
        full_fill=remaining <= 0,
        clob_filled=filled,
        amm_filled=Decimal(0),
    )


__all__ = [
    "requested_amount",
    "slippage_percent",
    "estimate_fill",
]
