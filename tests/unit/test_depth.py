from decimal import Decimal

from xrpl_fill.depth import aggregate_depth


def _iou(v: str) -> dict:
    return {"currency": "USD", "issuer": "rIssuer", "value": v}


def test_aggregate_depth_sums_gets_per_side():
    buys = [  # owners give XRP (quote) for USD
        {"taker_gets": "10000000", "taker_pays": _iou("20")},
        {"taker_gets": "5500000", "taker_pays": _iou("11")},
    ]
    sells = [  # owners give USD (base) for XRP
        {"taker_gets": _iou("30"), "taker_pays": "15000000"},
    ]
    d = aggregate_depth(buys, sells)
    print("depth:", d.as_dict())
    assert d.bid_volume == Decimal("15.5")
    assert d.bid_levels == 2
    assert d.ask_volume == Decimal("30")
    assert d.ask_levels == 1
    assert d.as_dict() == {"bidVolume": "15.5", "bidLevels": 2, "askVolume": "30", "askLevels": 1}


def test_aggregate_depth_prefers_funded_and_skips_zero():
    sells = [
        {"taker_gets": _iou("30"), "taker_gets_funded": _iou("12"), "taker_pays": "1"},
        {"taker_gets": _iou("30"), "taker_gets_funded": _iou("0"), "taker_pays": "1"},
        {"TakerGets": _iou("3"), "TakerPays": "1"},
    ]
    d = aggregate_depth([], sells)
    assert d.ask_volume == Decimal("15")
    assert d.ask_levels == 2
    assert d.bid_volume == 0 and d.bid_levels == 0


def test_aggregate_depth_empty():
    d = aggregate_depth([], [])
    assert d.as_dict() == {"bidVolume": "0", "bidLevels": 0, "askVolume": "0", "askLevels": 0}
