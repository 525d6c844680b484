"""Currency identity: encoded/raw currency codes and amount matching.

A currency appears either as a short raw code ("USD", "XRP") or as the
160-bit form rendered as 40 hex chars ("524C5553440000..." for "RLUSD").
Matching decodes the hex form for comparison and also accepts an exact
literal match, so callers may pass either representation as the target.

The native asset matches by code alone; issued currencies additionally
require exact issuer equality.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from .core.amounts import Amount
from .core.constants import CURRENCY_HEX_LENGTH, NATIVE_CURRENCY, STANDARD_CURRENCY_MAX_LEN
from .core.exc import CurrencyError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Printable ASCII window for decoded non-standard codes.
_PRINTABLE_MIN = 0x20
_PRINTABLE_MAX = 0x7E


def _is_hex_code(code: str) -> bool:
    return len(code) == CURRENCY_HEX_LENGTH and all(c in _HEX_DIGITS for c in code)


def encode_currency(code: str) -> str:
    """Return the ledger form of a currency code.

    Standard codes (<= 3 chars) stay raw; an already-encoded code is upper-cased;
    longer codes are ASCII hex, right-padded with zeros to 40 chars.
    """
    if len(code) <= STANDARD_CURRENCY_MAX_LEN:
        return code
    if _is_hex_code(code):
        return code.upper()
    try:
        raw = code.encode("ascii")
    except UnicodeEncodeError as exc:
        raise CurrencyError(f"currency code is not ASCII: {code!r}") from exc
    if len(raw) > CURRENCY_HEX_LENGTH // 2:
        raise CurrencyError(f"currency code longer than 20 bytes: {code!r}")
    return raw.hex().upper().ljust(CURRENCY_HEX_LENGTH, "0")


def decode_currency(code: str) -> str:
    """Decode a 40-char hex currency into its ASCII name; anything else passes through."""
    if not _is_hex_code(code):
        return code
    stripped = bytes.fromhex(code).rstrip(b"\x00")
    if not stripped:
        return code
    if any(b < _PRINTABLE_MIN or b > _PRINTABLE_MAX for b in stripped):
        return code
    return stripped.decode("ascii")


def _currency_and_issuer(amt: Union[Amount, Mapping[str, Any]]) -> tuple[str, Optional[str]]:
    if isinstance(amt, Amount):
        return amt.currency, amt.issuer
    return str(amt.get("currency", "")), amt.get("issuer")


def matches_currency(
    amt: Union[Amount, Mapping[str, Any]],
    currency: str,
    issuer: Optional[str],
) -> bool:
    """Return True if `amt` denotes `currency` (and `issuer`, for issued currencies)."""
    amt_currency, amt_issuer = _currency_and_issuer(amt)
    if decode_currency(amt_currency) != currency and amt_currency != currency:
        return False
    if currency == NATIVE_CURRENCY:
        return True
    return amt_issuer == issuer


def build_currency_spec(currency: str, issuer: Optional[str] = None) -> Dict[str, str]:
    """Currency identifier (no value) as used by amm_info / book_offers requests."""
    if currency == NATIVE_CURRENCY:
        return {"currency": NATIVE_CURRENCY}
    if not issuer:
        raise CurrencyError(f"issuer is required for non-XRP currency {currency!r}")
    return {"currency": encode_currency(currency), "issuer": issuer}


__all__ = [
    "encode_currency",
    "decode_currency",
    "matches_currency",
    "build_currency_spec",
]
