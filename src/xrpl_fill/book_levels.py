"""Build priced CLOB levels directly from order-book entry payloads.

Entries may be normalised (`taker_gets`, `taker_pays`, `account`) or raw
ledger offers (`TakerGets`, `TakerPays`, `Account`); amounts may be mappings
or native drops strings.

- Asks: the owner sells base (taker_gets is base); price = pays / gets.
- Bids: the owner buys base (taker_pays is base); price = gets / pays.
- Funded (`*_funded`) amounts take precedence over nominal ones, since a
  resting offer may exceed what its owner can currently deliver.
- Both builders return levels sorted descending by price; equal prices keep
  input order.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional

from .core.amounts import parse_amount, parse_decimal
from .core.datatypes import PricedLevel, Side
from .currency import matches_currency

# Debug printing control
DEBUG_BOOK = False

def _dbg(msg: str) -> None:
    if DEBUG_BOOK:
        print(f"[BOOK] {msg}")


# Normalised key -> raw ledger key
_RAW_KEYS = {
    "taker_gets": "TakerGets",
    "taker_pays": "TakerPays",
    "account": "Account",
}


def _field(o: Mapping[str, Any], key: str) -> Any:
    v = o.get(key)
    if v is None and key in _RAW_KEYS:
        v = o.get(_RAW_KEYS[key])
    return v


def _funded_or_nominal(o: Mapping[str, Any], key: str) -> Any:
    funded = o.get(f"{key}_funded")
    return funded if funded is not None else _field(o, key)


def _is_unfunded(o: Mapping[str, Any]) -> bool:
    owner_funds = o.get("owner_funds")
    return owner_funds is not None and parse_decimal(owner_funds) <= 0


def _build_levels(
    entries: Iterable[Mapping[str, Any]],
    base_currency: str,
    base_issuer: Optional[str],
    *,
    base_key: str,
    quote_key: str,
) -> List[PricedLevel]:
    out: List[PricedLevel] = []
    for o in entries:
        base_side = _field(o, base_key)
        if base_side is None or _field(o, quote_key) is None:
            continue
        if not matches_currency(parse_amount(base_side), base_currency, base_issuer):
            continue
        if _is_unfunded(o):
            _dbg(f"skip unfunded offer account={_field(o, 'account')}")
            continue

        amount = parse_amount(_funded_or_nominal(o, base_key)).value
        total = parse_amount(_funded_or_nominal(o, quote_key)).value
        price = total / amount if amount > 0 else Decimal(0)
        if amount <= 0 or price <= 0:
            continue
        out.append(
            PricedLevel(
                price=price,
                amount=amount,
                total=total,
                account=str(_field(o, "account") or ""),
            )
        )

    # Stable sort by price desc; equal-price rows preserve input order.
    out.sort(key=lambda lvl: lvl.price, reverse=True)
    return out


def build_asks(
    entries: Iterable[Mapping[str, Any]],
    base_currency: str,
    base_issuer: Optional[str],
) -> List[PricedLevel]:
    """Ask levels (owner sells base), sorted descending by price."""
    return _build_levels(entries, base_currency, base_issuer, base_key="taker_gets", quote_key="taker_pays")


def build_bids(
    entries: Iterable[Mapping[str, Any]],
    base_currency: str,
    base_issuer: Optional[str],
) -> List[PricedLevel]:
    """Bid levels (owner buys base), sorted descending by price."""
    return _build_levels(entries, base_currency, base_issuer, base_key="taker_pays", quote_key="taker_gets")


def best_first(levels: Iterable[PricedLevel], side: Side) -> List[PricedLevel]:
    """Order builder output for a walk: asks ascending for a buy, bids as-is for a sell."""
    lst = list(levels)
    if side == "buy":
        lst.reverse()
    return lst


def best_ask(asks: Iterable[PricedLevel]) -> Optional[Decimal]:
    prices = [lvl.price for lvl in asks]
    return min(prices) if prices else None


def best_bid(bids: Iterable[PricedLevel]) -> Optional[Decimal]:
    prices = [lvl.price for lvl in bids]
    return max(prices) if prices else None


def mid_price(asks: Iterable[PricedLevel], bids: Iterable[PricedLevel]) -> Optional[Decimal]:
    """(best ask + best bid) / 2, or None unless both sides have a level."""
    a, b = best_ask(asks), best_bid(bids)
    if a is None or b is None:
        return None
    return (a + b) / 2


def spread(asks: Iterable[PricedLevel], bids: Iterable[PricedLevel]) -> Optional[Decimal]:
    a, b = best_ask(asks), best_bid(bids)
    if a is None or b is None:
        return None
    return a - b


__all__ = [
    "build_asks",
    "build_bids",
    "best_first",
    "best_ask",
    "best_bid",
    "mid_price",
    "spread",
]
