import pytest

from fx_risk_sim.config import FieldLimit, FieldLimits, default_config
from fx_risk_sim.session import InvalidInputs, build_parameters, validate_inputs


def _values(**overrides):
    values = default_config().defaults.as_values()
    values.update(overrides)
    return values


def test_defaults_are_valid():
    assert validate_inputs(_values()) == {}


def test_empty_inputs_are_required():
    errors = validate_inputs({name: "" for name in _values()})

    assert set(errors) == {"start_balance", "risk_per_trade", "reward_risk_ratio", "trade_count", "win_rate"}
    assert set(errors.values()) == {"Required"}
    assert validate_inputs({})["win_rate"] == "Required"


def test_non_numeric_inputs():
    errors = validate_inputs(_values(start_balance="abc", trade_count="ten", win_rate="nan"))

    assert errors["start_balance"] == "Must be a number"
    assert errors["trade_count"] == "Must be an integer"
    assert errors["win_rate"] == "Must be a number"
    assert "reward_risk_ratio" not in errors


def test_bounds_messages():
    errors = validate_inputs(_values(start_balance=5, win_rate=100, risk_per_trade=0.4))

    assert errors["start_balance"] == "Starting Balance must be greater than or equal to 10"
    assert errors["win_rate"] == "Win Rate must be less than or equal to 99"
    assert errors["risk_per_trade"] == "Risk Per Trade must be greater than or equal to 0.5"


def test_trade_count_must_be_whole():
    assert validate_inputs(_values(trade_count=10.5)) == {"trade_count": "Must be an integer"}
    assert validate_inputs(_values(trade_count="20")) == {}


def test_bounds_are_inclusive():
    assert validate_inputs(_values(start_balance=10, risk_per_trade=45, win_rate=1, trade_count=1000)) == {}


def test_custom_limits():
    limits = FieldLimits(trade_count=FieldLimit(10, 5000, 10, "Number of Trades"))

    assert validate_inputs(_values(trade_count=5000), limits) == {}
    assert validate_inputs(_values(trade_count=5000)) == {
        "trade_count": "Number of Trades must be less than or equal to 1000"
    }


def test_build_parameters_coerces_text():
    params = build_parameters(_values(start_balance="250", trade_count="40"))

    assert params.start_balance == 250.0
    assert params.trade_count == 40
    assert isinstance(params.trade_count, int)


def test_build_parameters_raises_with_errors():
    with pytest.raises(InvalidInputs) as excinfo:
        build_parameters(_values(win_rate=""))
    assert excinfo.value.errors == {"win_rate": "Required"}
    assert isinstance(excinfo.value, ValueError)
