import pytest
from decimal import Decimal

from xrpl_fill.clob import estimate_fill, requested_amount, slippage_percent
from xrpl_fill.core.datatypes import PricedLevel
from xrpl_fill.core.fmt import fmt_fixed


# -----------------------------
# Helpers
# -----------------------------

@pytest.mark.parametrize("bad", [None, True, False, 0, "0", -1, "-0.5", "NaN", "Infinity", "abc", ""])
def test_requested_amount_rejects(bad):
    assert requested_amount(bad) is None


def test_requested_amount_accepts():
    assert requested_amount(5) == Decimal(5)
    assert requested_amount("2.5") == Decimal("2.5")
    assert requested_amount(Decimal("0.000001")) == Decimal("0.000001")


def test_slippage_percent():
    assert slippage_percent(Decimal("10.6"), Decimal("10")) == Decimal("6")
    assert slippage_percent(Decimal("9.5"), Decimal("10")) == Decimal("5")
    assert slippage_percent(Decimal("10"), None) is None
    assert slippage_percent(Decimal("10"), Decimal(0)) is None
    assert slippage_percent(Decimal("10"), Decimal("NaN")) is None


# -----------------------------
# estimate_fill
# -----------------------------

def test_three_level_walk(levels_factory):
    levels = levels_factory(("10", "10"), ("11", "20"), ("12", "30"))
    res = estimate_fill(levels, Decimal("25"), Decimal("10"))
    print("fill:", res)
    assert res is not None
    assert res.filled_amount == Decimal(25)
    assert res.total_cost == Decimal(265)
    assert res.avg_price == Decimal("10.6")
    assert res.worst_price == Decimal(11)
    assert res.full_fill is True
    assert res.slippage == Decimal(6)
    assert res.clob_filled == Decimal(25)
    assert res.amm_filled == 0


def test_partial_fill_when_book_exhausted(levels_factory):
    levels = levels_factory(("10", "10"), ("11", "20"))
    res = estimate_fill(levels, "100", None)
    assert res is not None
    print("partial:", fmt_fixed(res.filled_amount), fmt_fixed(res.avg_price))
    assert res.filled_amount == Decimal(30)
    assert res.total_cost == Decimal(320)
    assert res.full_fill is False
    assert res.worst_price == Decimal(11)
    assert res.slippage is None


def test_exact_level_boundary(levels_factory):
    levels = levels_factory(("10", "10"), ("11", "20"))
    res = estimate_fill(levels, 10, Decimal(10))
    assert res.filled_amount == Decimal(10)
    assert res.worst_price == Decimal(10)
    assert res.full_fill is True
    assert res.slippage == 0


def test_sell_side_walk_descending(levels_factory):
    bids = levels_factory(("9.9", "5"), ("9.5", "10"))
    res = estimate_fill(bids, "10", Decimal("10"))
    assert res.filled_amount == Decimal(10)
    assert res.total_cost == Decimal("97.0")
    assert res.avg_price == Decimal("9.7")
    assert res.worst_price == Decimal("9.5")
    assert res.slippage == Decimal(3)


@pytest.mark.parametrize("bad", [None, 0, -5, "NaN", "Infinity", "nope"])
def test_invalid_amount_returns_none(levels_factory, bad):
    assert estimate_fill(levels_factory(("10", "10")), bad, None) is None


def test_empty_book_returns_none():
    assert estimate_fill([], Decimal(5), Decimal(10)) is None


def test_unusable_levels_are_skipped():
    levels = [
        PricedLevel.from_numbers("9", "0"),
        PricedLevel.from_numbers("0", "10"),
        PricedLevel.from_numbers("10", "4"),
    ]
    res = estimate_fill(levels, 3, None)
    assert res.filled_amount == Decimal(3)
    assert res.avg_price == Decimal(10)
    assert estimate_fill(levels[:2], 3, None) is None


def test_inputs_not_mutated(levels_factory):
    levels = levels_factory(("10", "10"), ("11", "20"))
    snapshot = list(levels)
    estimate_fill(levels, 15, None)
    assert levels == snapshot
