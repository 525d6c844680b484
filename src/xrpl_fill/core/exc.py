"""
Core exception types for xrpl_fill.core.

These are dependency-free and may be imported by all modules. Estimation itself
never raises for "no liquidity" or invalid trade sizes; it returns None.
"""

__all__ = [
    "AmountDomainError",
    "CurrencyError",
    "PoolParamsError",
]


class AmountDomainError(Exception):
    """Raised when a raw amount or decimal cannot be parsed into the finite domain."""
    pass


class CurrencyError(Exception):
    """Raised when a currency code cannot be encoded or an issuer is missing."""
    pass


class PoolParamsError(Exception):
    """Raised when an AMM pool snapshot violates its preconditions.

    Attributes
    ----------
    field : str
        Name of the offending parameter ("base_reserves", "quote_reserves", "fee_rate").
    value : Any
        The rejected value, for context.
    """

    def __init__(self, field, value):
        super().__init__(f"invalid AMM pool parameter {field}={value}")
        self.field = field
        self.value = value
