"""
Top-level API for xrpl_fill (Decimal domain).

Fill estimation for an XRPL-style market with two liquidity sources:
  - the central limit order book (priced levels built from book offers)
  - a constant-product AMM pool (pure curve functions over a snapshot)

Everything is a pure function of caller-supplied snapshots: no I/O, no
state, no mutation of inputs.
"""

from __future__ import annotations

# Estimators
from .clob import estimate_fill
from .router import estimate_fill_combined

# Liquidity sources
from .amm import (
    AmmPoolParams,
    amm_spot_price,
    amm_marginal_buy_price,
    amm_marginal_sell_price,
    amm_max_buy_before_price,
    amm_max_sell_before_price,
    amm_buy_cost,
    amm_sell_proceeds,
    build_amm_pool_params,
)
from .book_levels import build_asks, build_bids, best_first, best_ask, best_bid, mid_price, spread
from .depth import aggregate_depth
from .currency import encode_currency, decode_currency, matches_currency, build_currency_spec

# Core data types
from .core import (
    Amount,
    PricedLevel,
    FillResult,
    DepthSummary,
    Side,
    AmountDomainError,
    CurrencyError,
    PoolParamsError,
)

__all__ = [
    # estimators
    "estimate_fill",
    "estimate_fill_combined",
    # amm
    "AmmPoolParams",
    "amm_spot_price",
    "amm_marginal_buy_price",
    "amm_marginal_sell_price",
    "amm_max_buy_before_price",
    "amm_max_sell_before_price",
    "amm_buy_cost",
    "amm_sell_proceeds",
    "build_amm_pool_params",
    # book
    "build_asks",
    "build_bids",
    "best_first",
    "best_ask",
    "best_bid",
    "mid_price",
    "spread",
    "aggregate_depth",
    # currency
    "encode_currency",
    "decode_currency",
    "matches_currency",
    "build_currency_spec",
    # core data types
    "Amount",
    "PricedLevel",
    "FillResult",
    "DepthSummary",
    "Side",
    "AmountDomainError",
    "CurrencyError",
    "PoolParamsError",
]
