"""
xrpl_fill Core
==============

Unified exports for the Decimal-domain primitives shared by the estimators:
constants, exceptions, amounts, records and display helpers.
"""

# NOTE:
#   Every quantity in this package is a decimal.Decimal. Inputs are bridged via
#   str(); binary floats never enter the pipeline.

# Constants
from .constants import (
    NATIVE_CURRENCY,
    CURRENCY_HEX_LENGTH,
    STANDARD_CURRENCY_MAX_LEN,
    DROPS_PER_XRP,
    XRP_QUANTUM,
    AMM_RESERVE_CAP,
    AMM_FEE_DIVISOR,
    ESTIMATE_DECIMAL_PRECISION,
    DEFAULT_DECIMAL_PRECISION,
)

# Amount primitives and bridges
from .amounts import (
    DecimalLike,
    Amount,
    to_decimal,
    parse_decimal,
    parse_amount,
    xrp_from_drops,
    estimate_context,
)

# Records
from .datatypes import (
    Side,
    PricedLevel,
    FillResult,
    DepthSummary,
)

# Display helpers
from .fmt import (
    fmt_dec,
    fmt_fixed,
    format_amm_fee,
    parse_amm_fee_input,
)

# Core exceptions
from .exc import AmountDomainError, CurrencyError, PoolParamsError

__all__ = [
    # constants
    "NATIVE_CURRENCY",
    "CURRENCY_HEX_LENGTH",
    "STANDARD_CURRENCY_MAX_LEN",
    "DROPS_PER_XRP",
    "XRP_QUANTUM",
    "AMM_RESERVE_CAP",
    "AMM_FEE_DIVISOR",
    "ESTIMATE_DECIMAL_PRECISION",
    "DEFAULT_DECIMAL_PRECISION",
    # amounts
    "DecimalLike",
    "Amount",
    "to_decimal",
    "parse_decimal",
    "parse_amount",
    "xrp_from_drops",
    "estimate_context",
    # records
    "Side",
    "PricedLevel",
    "FillResult",
    "DepthSummary",
    # fmt
    "fmt_dec",
    "fmt_fixed",
    "format_amm_fee",
    "parse_amm_fee_input",
    # exceptions
    "AmountDomainError",
    "CurrencyError",
    "PoolParamsError",
]
