from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
ISSUER = "rMxCKbEDwqr76QuheSUMdEGf4B9xJ8m5De"
RLUSD_HEX = "524C555344000000000000000000000000000000"


def _run(*args: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(ROOT / "src") + os.pathsep + env.get("PYTHONPATH", "")
    cmd = [sys.executable, str(ROOT / "scripts" / "demo.py"), *args]
    return subprocess.run(cmd, check=False, capture_output=True, text=True, env=env, cwd=ROOT)


def test_demo_builtin_scenarios() -> None:
    result = _run()
    assert result.returncode == 0, result.stderr
    for tag in ("=== S1", "=== S2", "=== S3", "=== S4", "=== S5"):
        assert tag in result.stdout
    assert "full_fill=False" in result.stdout  # S3 hits the reserve cap


def test_demo_snapshot(tmp_path: Path) -> None:
    rlusd = lambda v: {"currency": RLUSD_HEX, "issuer": ISSUER, "value": v}  # noqa: E731
    snap = {
        "base": {"currency": "RLUSD", "issuer": ISSUER},
        "offers": [
            {"account": "rAsk1", "taker_gets": rlusd("100"), "taker_pays": "52000000"},
            {"account": "rAsk2", "taker_gets": rlusd("200"), "taker_pays": "110000000"},
            {"account": "rBid1", "taker_gets": "48000000", "taker_pays": rlusd("100")},
        ],
        "amm": {"exists": True, "asset1Value": "5000", "asset2Value": "2500", "tradingFee": 500},
    }
    path = tmp_path / "snap.json"
    path.write_text(json.dumps(snap))

    result = _run("--snapshot", str(path), "--side", "buy", "--amount", "150")
    assert result.returncode == 0, result.stderr
    assert "snapshot snap.json: buy 150" in result.stdout
    assert "CLOB[1]: price=0.52" in result.stdout
    assert "full_fill=True" in result.stdout


def test_demo_missing_snapshot_exits_2(tmp_path: Path) -> None:
    result = _run("--snapshot", str(tmp_path / "missing.json"))
    assert result.returncode == 2
    assert "error:" in result.stderr


def test_demo_rejects_bad_amount() -> None:
    result = _run("--amount", "lots")
    assert result.returncode == 2  # argparse usage error
