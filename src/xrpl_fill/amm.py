"""
AMM curve model (constant product, fee on input): **pool math only**.

Pure functions over an immutable pool snapshot plus an explicit "already
consumed" offset. Nothing here mutates reserves: the offset stands in for the
reserve state after earlier chunks of the same estimate, so the functions can
be called repeatedly and out of order within one walk.

Orientation: prices are quote per base. Buying base pays quote into the pool
(fee on the quote leg); selling base pays base into the pool (fee on the base
leg). With k = B·Q and keep = 1 − fee:

  marginal buy  (c)      = k / ((B − c)² · keep)
  marginal sell (c)      = k · keep / (B + c·keep)²
  max buy before  P      = B − sqrt(k / (P · keep))
  max sell before P      = (sqrt(k · keep / P) − B) / keep
  buy cost  (d after c)  = k · d / ((B − c − d)(B − c) · keep)
  sell proceeds (d, c)   = k · d · keep / ((B + c·keep)(B + (c + d)·keep))

Curve math runs under `estimate_context()` (ESTIMATE_DECIMAL_PRECISION digits).
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from .core.amounts import DecimalLike, estimate_context, parse_decimal, to_decimal
from .core.constants import AMM_FEE_DIVISOR
from .core.exc import PoolParamsError

# --- Debug utilities (toggleable) ---
DEBUG_AMM = False

def _dbg(msg: str) -> None:
    if DEBUG_AMM:
        print(f"[AMM] {msg}")


_ZERO = Decimal(0)
_ONE = Decimal(1)


@dataclass(frozen=True)
class AmmPoolParams:
    """One immutable constant-product pool snapshot.

    - base_reserves: base asset held by the pool (> 0).
    - quote_reserves: quote asset held by the pool (> 0).
    - fee_rate: trading fee as a fraction in [0, 1), charged on the input leg.

    Estimators do not validate snapshots; call `validate()` (or build through
    `build_amm_pool_params`) at the boundary.
    """

    base_reserves: Decimal
    quote_reserves: Decimal
    fee_rate: Decimal

    @staticmethod
    def from_numbers(base_reserves: DecimalLike, quote_reserves: DecimalLike, fee_rate: DecimalLike) -> "AmmPoolParams":
        return AmmPoolParams(
            base_reserves=to_decimal(base_reserves),
            quote_reserves=to_decimal(quote_reserves),
            fee_rate=to_decimal(fee_rate),
        )

    def validate(self) -> "AmmPoolParams":
        """Raise PoolParamsError unless base > 0, quote > 0 and 0 ≤ fee < 1."""
        if not self.base_reserves.is_finite() or self.base_reserves <= 0:
            raise PoolParamsError("base_reserves", self.base_reserves)
        if not self.quote_reserves.is_finite() or self.quote_reserves <= 0:
            raise PoolParamsError("quote_reserves", self.quote_reserves)
        if not self.fee_rate.is_finite() or self.fee_rate < 0 or self.fee_rate >= 1:
            raise PoolParamsError("fee_rate", self.fee_rate)
        return self

    @property
    def invariant(self) -> Decimal:
        """k = base × quote."""
        return self.base_reserves * self.quote_reserves

    @property
    def keep(self) -> Decimal:
        """Share of the input leg that reaches the curve (1 − fee)."""
        return _ONE - self.fee_rate


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------

def amm_spot_price(pool: AmmPoolParams) -> Decimal:
    """Pool spot price (quote / base), fee excluded; display only."""
    with estimate_context():
        return pool.quote_reserves / pool.base_reserves


def amm_marginal_buy_price(pool: AmmPoolParams, base_already_bought: Decimal) -> Decimal:
    """Price of the next infinitesimal base bought after `base_already_bought` left the pool."""
    with estimate_context():
        remaining = pool.base_reserves - base_already_bought
        return pool.invariant / (remaining * remaining * pool.keep)


def amm_marginal_sell_price(pool: AmmPoolParams, base_already_sold: Decimal) -> Decimal:
    """Price of the next infinitesimal base sold after `base_already_sold` entered the pool."""
    with estimate_context():
        keep = pool.keep
        effective = pool.base_reserves + base_already_sold * keep
        return pool.invariant * keep / (effective * effective)


# ---------------------------------------------------------------------------
# Curve inversion
# ---------------------------------------------------------------------------

def amm_max_buy_before_price(pool: AmmPoolParams, price_threshold: Decimal) -> Decimal:
    """Cumulative base purchasable before the marginal buy price exceeds `price_threshold`.

    Solves amm_marginal_buy_price(pool, c) = P for c; clamped to 0 when the
    pool already trades above P. Requires P > 0.
    """
    with estimate_context():
        inner = pool.invariant / (price_threshold * pool.keep)
        result = pool.base_reserves - inner.sqrt()
        _dbg(f"max_buy_before_price: P={price_threshold} -> {result}")
        return result if result > 0 else _ZERO


def amm_max_sell_before_price(pool: AmmPoolParams, price_threshold: Decimal) -> Decimal:
    """Cumulative base sellable before the marginal sell price drops below `price_threshold`.

    Solves amm_marginal_sell_price(pool, c) = P for c; clamped to 0 when the
    pool already trades below P. Requires P > 0.
    """
    with estimate_context():
        keep = pool.keep
        inner = pool.invariant * keep / price_threshold
        result = (inner.sqrt() - pool.base_reserves) / keep
        _dbg(f"max_sell_before_price: P={price_threshold} -> {result}")
        return result if result > 0 else _ZERO


# ---------------------------------------------------------------------------
# Cost / proceeds over an increment
# ---------------------------------------------------------------------------

def amm_buy_cost(pool: AmmPoolParams, amount: Decimal, base_already_bought: Decimal) -> Decimal:
    """Gross quote paid for `amount` base, starting after `base_already_bought`.

    Effective quote in = k/(B−c−d) − k/(B−c); the fee grosses it up by 1/keep.
    """
    with estimate_context():
        before = pool.base_reserves - base_already_bought
        after = before - amount
        return pool.invariant * amount / (before * after * pool.keep)


def amm_sell_proceeds(pool: AmmPoolParams, amount: Decimal, base_already_sold: Decimal) -> Decimal:
    """Quote received for `amount` base, starting after `base_already_sold`.

    Only keep·amount of the base input reaches the curve.
    """
    with estimate_context():
        keep = pool.keep
        before = pool.base_reserves + base_already_sold * keep
        after = pool.base_reserves + (base_already_sold + amount) * keep
        return pool.invariant * amount * keep / (before * after)


# ---------------------------------------------------------------------------
# Snapshot builder
# ---------------------------------------------------------------------------

def build_amm_pool_params(info: Optional[Mapping[str, Any]]) -> Optional[AmmPoolParams]:
    """Build pool params from an amm_info-style payload oriented base/quote.

    Returns None when the pool does not exist, either asset is frozen, or
    either reserve is zero. `tradingFee` is in units of 1/100,000.
    """
    if not info or not info.get("exists"):
        return None
    if info.get("asset1Frozen") or info.get("asset2Frozen"):
        return None

    base = parse_decimal(info.get("asset1Value", "0"))
    quote = parse_decimal(info.get("asset2Value", "0"))
    if base.is_zero() or quote.is_zero():
        return None

    fee = parse_decimal(info.get("tradingFee", 0)) / AMM_FEE_DIVISOR
    return AmmPoolParams(base_reserves=base, quote_reserves=quote, fee_rate=fee).validate()


__all__ = [
    "AmmPoolParams",
    "amm_spot_price",
    "amm_marginal_buy_price",
    "amm_marginal_sell_price",
    "amm_max_buy_before_price",
    "amm_max_sell_before_price",
    "amm_buy_cost",
    "amm_sell_proceeds",
    "build_amm_pool_params",
]
