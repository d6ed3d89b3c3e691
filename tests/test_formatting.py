import math

import pytest

from fx_risk_sim.engine import (
    PreconditionViolation,
    format_currency,
    format_percent,
    format_pnl_percent,
    format_signed_currency,
    summarize_pnl,
)


def test_format_currency():
    assert format_currency(1234.5) == "1,234.50"
    assert format_currency(0) == "0.00"
    assert format_currency(1e6) == "1,000,000.00"
    assert format_currency(-42.126) == "-42.13"


def test_format_currency_placeholders():
    assert format_currency(math.nan) == "0.00"
    assert format_currency("abc") == "0.00"
    assert format_currency(None) == "0.00"
    assert format_currency(math.inf) == "∞"
    assert format_currency(-math.inf) == "-∞"


def test_format_signed_currency():
    assert format_signed_currency(12.5) == "$12.50"
    assert format_signed_currency(-12.5) == "-$12.50"
    assert format_signed_currency(-1500) == "-$1,500.00"


def test_format_percent():
    assert format_percent(20) == "20.0%"
    assert format_percent(200 / 3) == "66.7%"
    assert format_percent(12.346, digits=2) == "12.35%"


def test_pnl_summary_gain_and_loss():
    gain = summarize_pnl(100, 140)
    loss = summarize_pnl(100, 90)
    flat = summarize_pnl(100, 100)

    assert gain.absolute_change == pytest.approx(40)
    assert gain.percentage_change == pytest.approx(40)
    assert gain.is_positive is True
    assert format_pnl_percent(gain) == "(+40.00%)"
    assert loss.is_positive is False
    assert format_pnl_percent(loss) == "(-10.00%)"
    assert flat.is_positive is True
    assert format_pnl_percent(flat) == "(+0.00%)"


def test_pnl_summary_requires_positive_start():
    with pytest.raises(PreconditionViolation):
        summarize_pnl(0, 10)
