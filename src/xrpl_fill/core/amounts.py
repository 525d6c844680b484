"""
Amount primitive and Decimal bridges.

- Amount: currency symbol, optional issuer, Decimal value (native asset never carries an issuer).
- Every numeric input is bridged to Decimal through str(); binary floats never take part in arithmetic.
- Raw ledger payloads: a plain string is a native amount in drops, a mapping is {currency, issuer?, value}.

# Alignment notes:
# - Payload shapes follow rippled's JSON Amount: "1000000" (drops) or {"currency", "issuer", "value"}.
# - Normalised payloads (native value already in XRP) use the mapping form with currency "XRP".
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Any, Mapping, Optional, Union

from .constants import ESTIMATE_DECIMAL_PRECISION, NATIVE_CURRENCY, XRP_QUANTUM
from .exc import AmountDomainError

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


DecimalLike = Union[Decimal, int, str]


# ----------------------------
# Decimal bridges
# ----------------------------

def to_decimal(x: DecimalLike) -> Decimal:
    """Normalise numeric-like to Decimal (no validation; NaN/Infinity pass through)."""
    return x if isinstance(x, Decimal) else Decimal(str(x))


def parse_decimal(x: Any) -> Decimal:
    """Strict bridge: return a finite Decimal or raise AmountDomainError."""
    if x is None or isinstance(x, bool):
        raise AmountDomainError(f"not a decimal value: {x!r}")
    try:
        d = to_decimal(x)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise AmountDomainError(f"not a decimal value: {x!r}") from exc
    if not d.is_finite():
        raise AmountDomainError(f"non-finite decimal value: {x!r}")
    return d


def estimate_context():
    """Local Decimal context for estimation arithmetic, independent of the caller's context."""
    return localcontext(Context(prec=ESTIMATE_DECIMAL_PRECISION))


def xrp_from_drops(d: DecimalLike) -> Decimal:
    """Return Decimal XRP from drops (integer-valued, non-negative)."""
    drops = parse_decimal(d)
    if drops < 0:
        raise AmountDomainError("xrp_from_drops: drops must be >= 0")
    if drops != drops.to_integral_value():
        raise AmountDomainError(f"xrp_from_drops: drops must be integral, got {d!r}")
    return drops * XRP_QUANTUM


# ----------------------------
# Amount
# ----------------------------

@dataclass(frozen=True)
class Amount:
    """A ledger amount: currency + optional issuer + Decimal value.

    Native-asset amounts are canonicalised with issuer=None. Two issued amounts
    denote the same asset only when currency and issuer both match exactly.
    """

    currency: str
    value: Decimal
    issuer: Optional[str] = None

    def __post_init__(self):
        if self.currency == NATIVE_CURRENCY and self.issuer is not None:
            object.__setattr__(self, "issuer", None)

    def is_native(self) -> bool:
        return self.currency == NATIVE_CURRENCY

    def is_zero(self) -> bool:
        return self.value == 0

    def same_asset(self, other: "Amount") -> bool:
        if self.currency != other.currency:
            return False
        return self.is_native() or self.issuer == other.issuer


def parse_amount(payload: Any) -> Amount:
    """Parse a raw or normalised ledger amount payload into an Amount."""
    if isinstance(payload, Amount):
        return payload
    if isinstance(payload, str):
        _dbg(f"parse_amount: drops={payload}")
        return Amount(NATIVE_CURRENCY, xrp_from_drops(payload))
    if isinstance(payload, Mapping):
        currency = payload.get("currency")
        if not currency:
            raise AmountDomainError(f"amount payload without currency: {payload!r}")
        issuer = payload.get("issuer")
        value = parse_decimal(payload.get("value"))
        return Amount(str(currency), value, str(issuer) if issuer is not None else None)
    raise AmountDomainError(f"Unsupported amount payload: {payload!r}")


__all__ = [
    "DecimalLike",
    "to_decimal",
    "parse_decimal",
    "estimate_context",
    "xrp_from_drops",
    "Amount",
    "parse_amount",
]
