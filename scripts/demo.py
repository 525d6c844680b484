"""Demo: CLOB↔AMM fill estimation on built-in scenarios or a JSON snapshot.

Scenarios covered:
S1) CLOB-only, three levels, partial consumption of the second level
S2) AMM-only buy, small size (fee + curve slippage above spot)
S3) AMM-only buy larger than reserves (99% reserve cap)
S4) Interleaved buy: CLOB@10.05 → AMM → CLOB@10.5 → AMM → CLOB@15
S5) Interleaved sell against bids and the same pool

Snapshot format (--snapshot FILE):
{
  "base": {"currency": "RLUSD", "issuer": "r..."},
  "offers": [ {account, taker_gets, taker_pays, taker_gets_funded?, ...}, ... ],
  "amm": {"exists": true, "asset1Value": "...", "asset2Value": "...", "tradingFee": 500},
  "mid": "0.5"
}
"""
from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from xrpl_fill import (
    AmmPoolParams,
    AmountDomainError,
    CurrencyError,
    FillResult,
    PoolParamsError,
    PricedLevel,
    amm_spot_price,
    best_first,
    build_amm_pool_params,
    build_asks,
    build_bids,
    estimate_fill_combined,
    mid_price,
)
from xrpl_fill.core import fmt_fixed, parse_decimal

# ---------- pretty printers ----------

def brief_book(levels: List[PricedLevel]) -> str:
    if not levels:
        return "CLOB: (empty)"
    parts = [f"CLOB[{i+1}]: price={lvl.price}, amount={lvl.amount}" for i, lvl in enumerate(levels)]
    return "; ".join(parts)


def brief_pool(pool: Optional[AmmPoolParams]) -> str:
    if pool is None:
        return "AMM: (none)"
    return (f"AMM: base={pool.base_reserves}, quote={pool.quote_reserves}, "
            f"fee={pool.fee_rate}, spot={fmt_fixed(amm_spot_price(pool))}")


def print_result(title: str, res: Optional[FillResult], *, requested: Decimal) -> None:
    print(f"\n=== {title} ===")
    if res is None:
        print("- no estimate (no liquidity or invalid amount)")
        return
    print(f"- requested={requested} filled={fmt_fixed(res.filled_amount)} full_fill={res.full_fill}")
    print(f"  • CLOB: {fmt_fixed(res.clob_filled)}")
    print(f"  • AMM : {fmt_fixed(res.amm_filled)}")
    print(f"- total_cost={fmt_fixed(res.total_cost)} avg_price={fmt_fixed(res.avg_price)} "
          f"worst_price={fmt_fixed(res.worst_price)} slippage%={fmt_fixed(res.slippage, places=4)}")


# ---------- scenarios ----------

def _levels(*pairs) -> List[PricedLevel]:
    return [PricedLevel.from_numbers(p, a, account="rDemo") for p, a in pairs]


def run_scenarios() -> None:
    pool = AmmPoolParams.from_numbers("1000", "10000", "0.01")

    book = _levels(("10", "10"), ("11", "20"), ("12", "30"))
    print(brief_book(book))
    print_result("S1 CLOB-only buy 25", estimate_fill_combined(book, Decimal("25"), Decimal("10.5"), None, "buy"),
                 requested=Decimal("25"))

    print(brief_pool(pool))
    print_result("S2 AMM-only buy 10", estimate_fill_combined([], Decimal("10"), Decimal("10"), pool, "buy"),
                 requested=Decimal("10"))

    small = AmmPoolParams.from_numbers("100", "1000", "0")
    print(brief_pool(small))
    print_result("S3 AMM-only buy 200 (cap)", estimate_fill_combined([], Decimal("200"), Decimal("10"), small, "buy"),
                 requested=Decimal("200"))

    asks = _levels(("10.05", "5"), ("10.5", "10"), ("15", "100"))
    print(brief_book(asks))
    print_result("S4 interleaved buy 30", estimate_fill_combined(asks, Decimal("30"), Decimal("10"), pool, "buy"),
                 requested=Decimal("30"))

    bids = _levels(("9.95", "5"), ("9.5", "10"), ("8", "100"))
    print(brief_book(bids))
    print_result("S5 interleaved sell 30", estimate_fill_combined(bids, Decimal("30"), Decimal("10"), pool, "sell"),
                 requested=Decimal("30"))


def run_snapshot(path: Path, side: str, amount: Decimal) -> None:
    snap = json.loads(path.read_text())
    base = snap.get("base", {})
    offers = snap.get("offers", [])
    asks = build_asks(offers, base.get("currency", ""), base.get("issuer"))
    bids = build_bids(offers, base.get("currency", ""), base.get("issuer"))
    pool = build_amm_pool_params(snap.get("amm"))
    mid = parse_decimal(snap["mid"]) if snap.get("mid") is not None else mid_price(asks, bids)

    levels = best_first(asks if side == "buy" else bids, side)  # type: ignore[arg-type]
    print(brief_book(levels))
    print(brief_pool(pool))
    res = estimate_fill_combined(levels, amount, mid, pool, side)  # type: ignore[arg-type]
    print_result(f"snapshot {path.name}: {side} {amount}", res, requested=amount)


def _decimal_arg(s: str) -> Decimal:
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a decimal: {s!r}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="CLOB+AMM fill estimation demo")
    ap.add_argument("--snapshot", type=Path, default=None, help="JSON snapshot of offers/pool")
    ap.add_argument("--side", choices=["buy", "sell"], default="buy")
    ap.add_argument("--amount", type=_decimal_arg, default=Decimal("10"))
    args = ap.parse_args(argv)

    if args.snapshot is None:
        run_scenarios()
        return 0
    try:
        run_snapshot(args.snapshot, args.side, args.amount)
    except (OSError, ValueError, AmountDomainError, CurrencyError, PoolParamsError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
