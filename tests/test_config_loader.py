from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from fx_risk_sim.config import (
    FieldLimits,
    compute_config_hash,
    default_config,
    load_config,
    serialize_config,
)

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def test_load_config_sample():
    config = load_config(CONFIG_DIR / "default.yaml")

    assert config.name == "fx-risk-sim"
    assert config.version == "1"
    assert config.limits == FieldLimits()
    assert config.defaults == default_config().defaults
    assert config.report.seed == 42


def test_partial_config_falls_back_to_defaults(tmp_path):
    target = tmp_path / "custom.yaml"
    target.write_text(
        "name: custom\nversion: 2\nlimits:\n  trade_count: {max: 5000}\ndefaults:\n  win_rate: 60\n",
        encoding="utf-8",
    )

    config = load_config(target)

    assert config.limits.trade_count.max == 5000
    assert config.limits.trade_count.min == 10
    assert config.limits.trade_count.label == "Number of Trades"
    assert config.defaults.win_rate == 60
    assert config.defaults.trade_count == 100
    assert config.report.seed is None


def test_missing_required_key(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("version: 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="name"):
        load_config(target)


def test_rejects_inverted_limits(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("name: x\nversion: 1\nlimits:\n  win_rate: {min: 90, max: 10}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="win_rate"):
        load_config(target)


def test_rejects_unknown_limit_field(tmp_path):
    target = tmp_path / "broken.yaml"
    target.write_text("name: x\nversion: 1\nlimits:\n  leverage: {min: 1, max: 2}\n", encoding="utf-8")

    with pytest.raises(ValueError, match="leverage"):
        load_config(target)


def test_rejects_non_mapping(tmp_path):
    target = tmp_path / "list.yaml"
    target.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_config(target)


def test_serialize_and_hash(tmp_path):
    source = CONFIG_DIR / "default.yaml"
    target = tmp_path / "default.yaml"
    target.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")

    payload = serialize_config(load_config(target))
    assert payload["limits"]["start_balance"]["max"] == 10000
    assert payload["defaults"]["reward_risk_ratio"] == 4

    digest = compute_config_hash(target)
    assert len(digest) == 64
    assert digest == compute_config_hash(source)


@pytest.mark.parametrize(
    "limit_yaml, field",
    [
        ("risk_per_trade: {min: 0}", "risk_per_trade"),
        ("risk_per_trade: {max: 150}", "risk_per_trade"),
        ("win_rate: {max: 101}", "win_rate"),
        ("start_balance: {min: 0}", "start_balance"),
        ("trade_count: {min: 0}", "trade_count"),
        ("reward_risk_ratio: {min: -1}", "reward_risk_ratio"),
        ("win_rate: {min: .nan}", "win_rate"),
    ],
)
def test_rejects_limits_outside_simulator_domain(tmp_path, limit_yaml, field):
    target = tmp_path / "broken.yaml"
    target.write_text(f"name: x\nversion: 1\nlimits:\n  {limit_yaml}\n", encoding="utf-8")

    with pytest.raises(ValueError, match=field):
        load_config(target)


def test_accepts_limits_on_simulator_domain_edges(tmp_path):
    target = tmp_path / "wide.yaml"
    target.write_text(
        "name: x\nversion: 1\nlimits:\n"
        "  risk_per_trade: {min: 0.1, max: 100}\n"
        "  win_rate: {min: 0, max: 100}\n"
        "  reward_risk_ratio: {min: 0}\n"
        "  trade_count: {min: 1}\n",
        encoding="utf-8",
    )

    config = load_config(target)

    assert config.limits.risk_per_trade.max == 100
    assert config.limits.win_rate.min == 0
    assert config.limits.trade_count.min == 1


def test_empty_sections_use_defaults(tmp_path):
    target = tmp_path / "empty.yaml"
    target.write_text("name: x\nversion: 1\nlimits:\ndefaults:\nreport:\n", encoding="utf-8")

    config = load_config(target)

    assert config.limits == FieldLimits()
    assert config.defaults == default_config().defaults
    assert config.report.seed is None
    assert config.report.output_dir == "reports"
