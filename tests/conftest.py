from __future__ import annotations
from decimal import Decimal
from typing import Callable, List, Tuple

import pytest

from xrpl_fill.amm import AmmPoolParams
from xrpl_fill.core import PricedLevel


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def make_levels(*pairs: Tuple[str, str]) -> List[PricedLevel]:
    """Build priced levels from (price, amount) string pairs, in the given order."""
    return [PricedLevel.from_numbers(p, a, account=f"rTest{i}") for i, (p, a) in enumerate(pairs)]


def offer(
    gets_currency: str,
    gets_value: str,
    pays_currency: str,
    pays_value: str,
    *,
    gets_issuer: str = "rIssuer",
    pays_issuer: str = "rIssuer",
    account: str = "rMaker",
    **extra,
) -> dict:
    """book_offers-style entry. Native legs are given as drops strings."""
    def leg(cur: str, val: str, iss: str):
        if cur == "XRP":
            return val
        return {"currency": cur, "issuer": iss, "value": val}

    o = {
        "account": account,
        "taker_gets": leg(gets_currency, gets_value, gets_issuer),
        "taker_pays": leg(pays_currency, pays_value, pays_issuer),
    }
    o.update(extra)
    return o


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def amm_default() -> AmmPoolParams:
    # spot 10, fee 1%
    return AmmPoolParams.from_numbers("1000", "10000", "0.01")


@pytest.fixture()
def amm_small_nofee() -> AmmPoolParams:
    # spot 10, no fee
    return AmmPoolParams.from_numbers("100", "1000", "0")


@pytest.fixture()
def levels_factory() -> Callable[..., List[PricedLevel]]:
    return make_levels


@pytest.fixture()
def offer_factory() -> Callable[..., dict]:
    return offer
