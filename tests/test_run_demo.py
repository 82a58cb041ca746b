"""Tests for the demo driver's command line handling."""
import argparse
import sys
from decimal import Decimal

import pytest

import run_demo


def test_discount_rate_parses_decimal():
    assert run_demo.discount_rate("0.25") == Decimal("0.25")


def test_discount_rate_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError, match="invalid discount rate"):
        run_demo.discount_rate("abc")


@pytest.mark.parametrize("rate, expected", [
    (Decimal("0.1"), "10%"),
    (Decimal("0.125"), "12.5%"),
    (Decimal("1"), "100%"),
])
def test_percent(rate, expected):
    assert run_demo.percent(rate) == expected


def test_bad_discount_is_a_usage_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run_demo.py", "--discount", "abc"])

    with pytest.raises(SystemExit) as exc:
        run_demo.main()

    assert exc.value.code == 2
    assert "invalid discount rate" in capsys.readouterr().err


def test_walkthrough_output(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run_demo.py", "--order-id", "O9"])

    run_demo.main()

    out = capsys.readouterr().out
    assert "Applying 10% discount..." in out
    assert "=== Order O9 ===" in out
    assert "2x Electronics [E01] Laptop - $1200.00 | Stock: 0 | Warranty: 24 months" in out
    assert "Total: $2187.00" in out  # (10 + 1200 + 20 + 1200) * 0.9
