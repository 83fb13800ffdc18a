"""
Tests for the command line entry point (python -m cardano_errors).
"""

from __future__ import annotations

import io
import json

from cardano_errors.__main__ import main


def test_file_payload(tmp_path, capsys, blockfrost_quota_body):
    payload = tmp_path / "error.json"
    payload.write_text(json.dumps(blockfrost_quota_body), encoding="utf-8")

    assert main([str(payload), "--network", "mainnet", "--fingerprint"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["code"] == "QUOTA_EXCEEDED"
    assert out["network"] == "mainnet"
    assert out["meta"]["blockfrost_reason"] == "daily_limit"
    assert len(out["fingerprint"]) == 16


def test_stdin_plain_text(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("BadInputsUTxO (fromList [...])\n"))
    assert main(["--source", "node_submit", "--stage", "submit", "--indent", "0"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["code"] == "TX_INPUTS_MISSING_OR_SPENT"
    assert out["raw"] == "BadInputsUTxO (fromList [...])"


def test_wallet_context_flags(tmp_path, capsys):
    payload = tmp_path / "wallet.json"
    payload.write_text('{"code": -2, "info": "InternalError"}', encoding="utf-8")
    assert main([str(payload), "--source", "wallet_submit", "--stage", "submit", "--wallet", "eternl", "--tx-hash", "ff00"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["code"] == "WALLET_SUBMIT_FAILURE"
    assert out["wallet"] == {"name": "eternl"}
    assert out["tx_hash"] == "ff00"


def test_missing_file_returns_error(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1
