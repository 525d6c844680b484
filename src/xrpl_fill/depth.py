"""Depth summary across the full buy/sell offer arrays.

- Bid depth (quote) = sum of `taker_gets` across buy offers (owner offers quote to buy base).
- Ask depth (base)  = sum of `taker_gets` across sell offers (owner offers base to sell).

Funded amounts are preferred so depth reflects fillable liquidity; offers with
zero funded value do not count as levels.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping, Tuple

from .core.amounts import parse_amount
from .core.datatypes import DepthSummary


def _executable_gets(o: Mapping[str, Any]) -> Decimal:
    funded = o.get("taker_gets_funded")
    gets = funded if funded is not None else o.get("taker_gets", o.get("TakerGets"))
    return parse_amount(gets).value


def _side_depth(offers: Iterable[Mapping[str, Any]]) -> Tuple[Decimal, int]:
    volume = Decimal(0)
    levels = 0
    for o in offers:
        v = _executable_gets(o)
        if v > 0:
            volume += v
            levels += 1
    return volume, levels


def aggregate_depth(
    buy_offers: Iterable[Mapping[str, Any]],
    sell_offers: Iterable[Mapping[str, Any]],
) -> DepthSummary:
    """Sum executable volume and count active levels per side."""
    bid_volume, bid_levels = _side_depth(buy_offers)
    ask_volume, ask_levels = _side_depth(sell_offers)
    return DepthSummary(
        bid_volume=bid_volume,
        bid_levels=bid_levels,
        ask_volume=ask_volume,
        ask_levels=ask_levels,
    )


__all__ = ["aggregate_depth"]
