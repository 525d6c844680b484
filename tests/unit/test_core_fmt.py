import pytest
from decimal import Decimal

from xrpl_fill.core.datatypes import DepthSummary, PricedLevel
from xrpl_fill.core.fmt import fmt_dec, fmt_fixed, format_amm_fee, parse_amm_fee_input


# -----------------------------
# fmt_dec / fmt_fixed
# -----------------------------

def test_fmt_dec_scientific():
    print("fmt_dec(123456) ->", fmt_dec(Decimal("123456")))
    assert fmt_dec(Decimal("1")) == "1.000000000000000000E+0"
    assert fmt_dec(Decimal("123456")) == "1.234560000000000000E+5"
    assert fmt_dec(Decimal("0.5"), places=2) == "5.00E-1"


def test_fmt_fixed_and_none():
    assert fmt_fixed(Decimal("10.5")) == "10.500000"
    assert fmt_fixed(Decimal("1.23456789"), places=2) == "1.23"
    assert fmt_fixed(None) == "-"


# -----------------------------
# AMM trading fee display / input
# -----------------------------

@pytest.mark.parametrize(
    "fee, expected",
    [(1000, "1%"), (500, "0.5%"), (0, "0%"), (1, "0.001%"), (250, "0.25%"), (100000, "100%")],
)
def test_format_amm_fee(fee, expected):
    print(f"format_amm_fee({fee}) -> {format_amm_fee(fee)}")
    assert format_amm_fee(fee) == expected


@pytest.mark.parametrize("text, expected", [("1", 1000), ("0.5", 500), (" 0.25 ", 250), ("0", 0)])
def test_parse_amm_fee_input(text, expected):
    assert parse_amm_fee_input(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "NaN", "Infinity", None])
def test_parse_amm_fee_input_invalid(text):
    assert parse_amm_fee_input(text) is None  # type: ignore[arg-type]


def test_fee_round_trip_display():
    for fee in (0, 1, 30, 500, 1000):
        assert parse_amm_fee_input(format_amm_fee(fee).rstrip("%")) == fee


# -----------------------------
# Datatypes
# -----------------------------

def test_priced_level_from_numbers_and_usable():
    lvl = PricedLevel.from_numbers("10.5", "4", account="rA")
    assert lvl.total == Decimal("42.0")
    assert lvl.is_usable()
    assert not PricedLevel.from_numbers("0", "4").is_usable()
    assert not PricedLevel.from_numbers("1", "0").is_usable()
    assert not PricedLevel.from_numbers("-1", "3").is_usable()


def test_depth_summary_as_dict_plain_strings():
    ds = DepthSummary(
        bid_volume=Decimal("1500.500000"),
        bid_levels=3,
        ask_volume=Decimal("1E+3"),
        ask_levels=2,
    )
    d = ds.as_dict()
    print("as_dict ->", d)
    assert d == {"bidVolume": "1500.5", "bidLevels": 3, "askVolume": "1000", "askLevels": 2}
    empty = DepthSummary(Decimal("0E-6"), 0, Decimal(0), 0).as_dict()
    assert empty["bidVolume"] == "0" and empty["askVolume"] == "0"
