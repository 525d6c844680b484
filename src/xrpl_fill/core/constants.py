"""
xrpl_fill Core Constants
========================

Ledger-facing and estimation constants. Everything here is a plain module-level
value; there is no runtime configuration layer.
"""

# NOTE: amm_filled never exceeds AMM_RESERVE_CAP x base reserves within one estimate.

from decimal import Decimal

# ---------------------------------------------------------------------------
# Currency identity
# ---------------------------------------------------------------------------

#: Native ledger asset code; native amounts never carry an issuer.
NATIVE_CURRENCY: str = "XRP"

#: Length of the hex-encoded (160-bit) currency form.
CURRENCY_HEX_LENGTH: int = 40

#: Longest code that stays in its short raw form.
STANDARD_CURRENCY_MAX_LEN: int = 3

#: Integer bridge: number of drops per 1 XRP.
DROPS_PER_XRP: int = 1_000_000

#: 1 drop = 1e-6 XRP.
XRP_QUANTUM: Decimal = Decimal(1) / DROPS_PER_XRP


# ---------------------------------------------------------------------------
# AMM
# ---------------------------------------------------------------------------

#: AMM consumption within one estimate is capped at this share of base reserves.
AMM_RESERVE_CAP: Decimal = Decimal("0.99")

#: amm_info reports tradingFee in units of 1/100,000 (1000 == 1%).
AMM_FEE_DIVISOR: int = 100_000


# ---------------------------------------------------------------------------
# Decimal precision
# ---------------------------------------------------------------------------

#: Significant digits for all estimation arithmetic (curve math and level walks).
ESTIMATE_DECIMAL_PRECISION: int = 40

#: Python's default context precision; parsing and depth sums run under it.
DEFAULT_DECIMAL_PRECISION: int = 28


__all__ = [
    "NATIVE_CURRENCY",
    "CURRENCY_HEX_LENGTH",
    "STANDARD_CURRENCY_MAX_LEN",
    "DROPS_PER_XRP",
    "XRP_QUANTUM",
    "AMM_RESERVE_CAP",
    "AMM_FEE_DIVISOR",
    "ESTIMATE_DECIMAL_PRECISION",
    "DEFAULT_DECIMAL_PRECISION",
]
