"""
Tests for the scripts/price_option.py command-line entry point.
"""

import importlib.util
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent.parent / "scripts" / "price_option.py"


@pytest.fixture(scope="module")
def price_option():
    spec = importlib.util.spec_from_file_location("price_option", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _run(price_option, monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["price_option.py", *argv])
    return price_option.main()


class TestPriceOptionScript:
    """End-to-end runs of the CLI."""

    def test_prices_from_flags(self, price_option, monkeypatch, capsys):
        code = _run(
            price_option, monkeypatch,
            "European Call", "--spot", "100", "--strike", "100",
            "--rate", "0.01", "--volatility", "0.2", "--expiry", "1.0",
        )
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("European Call: 8.43")
        assert "delta=0.5596" in out

    def test_no_delta_for_futures(self, price_option, monkeypatch, capsys):
        code = _run(
            price_option, monkeypatch,
            "futures long", "--spot", "100", "--strike", "90",
            "--rate", "0.05", "--volatility", "0.2", "--expiry", "1.0",
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "14.389" in out
        assert "delta=N/A" in out

    def test_resolves_from_data_file(self, price_option, monkeypatch, capsys, tmp_path):
        data = tmp_path / "market.csv"
        data.write_text("Key,Value\nCFG::R,0.01\nCFG::SIGMA,0.2\nNASDAQ::TSLA,100\n")
        code = _run(
            price_option, monkeypatch,
            "European Put", "--underlying", "NASDAQ::TSLA", "--strike", "100",
            "--expiry", "1.0", "--data", str(data),
        )
        assert code == 0
        assert capsys.readouterr().out.startswith("European Put: 7.43")

    def test_missing_spot_is_an_error(self, price_option, monkeypatch):
        code = _run(
            price_option, monkeypatch,
            "European Call", "--strike", "100", "--volatility", "0.2", "--expiry", "1.0",
        )
        assert code == 1

    def test_missing_data_file_is_an_error(self, price_option, monkeypatch, tmp_path):
        code = _run(
            price_option, monkeypatch,
            "European Call", "--underlying", "NASDAQ::TSLA", "--strike", "100",
            "--expiry", "1.0", "--data", str(tmp_path / "absent.csv"),
        )
        assert code == 1
