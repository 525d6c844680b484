"""Combined CLOB + AMM fill estimation (interleaved walk).

Walks the CLOB levels and the AMM curve together, always consuming from the
source that currently quotes the better price: lower for a buy, higher for a
sell. Two cursors drive the walk: the index of the next CLOB level and the
cumulative base already taken from the AMM (`amm_filled`), which is passed as
the explicit offset into the pure curve functions of `amm`.

Per iteration:
  1. CLOB is available while levels remain; AMM while amm_filled < cap
     (cap = AMM_RESERVE_CAP × base reserves).
  2. If the AMM marginal price is at least as good as the next level's price,
     take the AMM up to the point where its marginal price reaches that level
     (or to the cap when no level remains), clamped to remaining and the cap.
  3. Otherwise, or when that AMM chunk is zero, take the whole current level
     (or the remainder) and advance.

The AMM is entered at most once per CLOB level (a level that already bounded
an AMM chunk is taken next), plus one final chunk once no level remains.
Every iteration reduces `remaining`, advances the level cursor or exhausts
the AMM cap, so the walk ends after at most 2·len(levels) + 1 iterations.
All arithmetic runs under `estimate_context()`.

Degenerates to the CLOB-only walk when no pool is given.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from .amm import (
    AmmPoolParams,
    amm_buy_cost,
    amm_marginal_buy_price,
    amm_marginal_sell_price,
    amm_max_buy_before_price,
    amm_max_sell_before_price,
    amm_sell_proceeds,
)
from .clob import requested_amount, slippage_percent
from .core.amounts import estimate_context
from .core.constants import AMM_RESERVE_CAP
from .core.datatypes import FillResult, PricedLevel, Side

# Debug printing control
DEBUG_ROUTER = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUTER:
        print(f"[ROUTER] {msg}")


_CurveFn = Callable[[AmmPoolParams, Decimal], Decimal]
_CostFn = Callable[[AmmPoolParams, Decimal, Decimal], Decimal]

# side -> (marginal price at offset, max cumulative before price, cost/proceeds of increment)
_CURVE: Dict[str, Tuple[_CurveFn, _CurveFn, _CostFn]] = {
    "buy": (amm_marginal_buy_price, amm_max_buy_before_price, amm_buy_cost),
    "sell": (amm_marginal_sell_price, amm_max_sell_before_price, amm_sell_proceeds),
}


def _is_better(side: Side, candidate: Decimal, reference: Decimal) -> bool:
    """True if `candidate` is at least as good as `reference` for the taker."""
    return candidate <= reference if side == "buy" else candidate >= reference


def _worse_price(side: Side, current: Decimal, candidate: Decimal) -> Decimal:
    """Running worst price: highest for a buy, lowest for a sell."""
    if current.is_zero():
        return candidate
    return max(current, candidate) if side == "buy" else min(current, candidate)


def estimate_fill_combined(
    levels: Sequence[PricedLevel],
    amount: Any,
    mid_price: Optional[Decimal],
    amm_pool: Optional[AmmPoolParams],
    side: Side,
) -> Optional[FillResult]:
    """Estimate a fill of `amount` base across CLOB `levels` and an optional AMM pool.

    `levels` must be best-price-first for `side`. Returns None for a
    non-positive/non-finite amount, when neither source has liquidity, or
    when nothing could be filled.
    """
    if side not in _CURVE:
        raise ValueError(f"side must be 'buy' or 'sell', got {side!r}")
    remaining = requested_amount(amount)
    if remaining is None:
        return None
    book = [lvl for lvl in levels if lvl.is_usable()]
    if not book and amm_pool is None:
        return None

    marginal, max_before, cost_of = _CURVE[side]

    with estimate_context():
        amm_cap = amm_pool.base_reserves * AMM_RESERVE_CAP if amm_pool is not None else Decimal(0)

        clob_filled = Decimal(0)
        amm_filled = Decimal(0)
        total_cost = Decimal(0)
        worst_price = Decimal(0)
        idx = 0
        amm_bounded_idx = -1  # level whose price already bounded an AMM chunk

        while remaining > 0:
            level = book[idx] if idx < len(book) else None
            has_amm = amm_pool is not None and amm_filled < amm_cap
            if level is None and not has_amm:
                break

            if has_amm and amm_bounded_idx != idx:
                amm_price = marginal(amm_pool, amm_filled)
                if level is None or _is_better(side, amm_price, level.price):
                    if level is not None:
                        chunk = max(max_before(amm_pool, level.price) - amm_filled, Decimal(0))
                    else:
                        chunk = amm_cap - amm_filled
                    chunk = min(chunk, remaining, amm_cap - amm_filled)
                    if chunk > 0:
                        cost = cost_of(amm_pool, chunk, amm_filled)
                        amm_filled += chunk
                        total_cost += cost
                        remaining -= chunk
                        worst_price = _worse_price(side, worst_price, marginal(amm_pool, amm_filled))
                        amm_bounded_idx = idx
                        _dbg(f"AMM take={chunk} cost={cost} amm_filled={amm_filled} remaining={remaining}")
                        continue
                    # Zero chunk: the AMM cannot improve on this level any further.
                    _dbg(f"AMM chunk zero at price={amm_price}; falling through to CLOB")

            if level is None:
                break
            fill = min(remaining, level.amount)
            clob_filled += fill
            total_cost += fill * level.price
            worst_price = _worse_price(side, worst_price, level.price)
            remaining -= fill
            idx += 1
            _dbg(f"CLOB take={fill} @ {level.price} clob_filled={clob_filled} remaining={remaining}")

        filled = clob_filled + amm_filled
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
        clob_filled=clob_filled,
        amm_filled=amm_filled,
    )


__all__ = ["estimate_fill_combined"]
