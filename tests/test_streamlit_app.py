from pathlib import Path

import pytest

pytest.importorskip("streamlit")
from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]


def test_app_renders_metrics_and_outcome_table(monkeypatch):
    monkeypatch.setenv("FXSIM_CONFIG_PATH", str(ROOT / "configs" / "default.yaml"))
    app = AppTest.from_file(str(ROOT / "apps" / "risk_simulator_streamlit.py"), default_timeout=30)

    app.run()

    assert not app.exception
    assert len(app.metric) == 3
    assert app.metric[2].value == "20.0%"
    assert len(app.dataframe) == 1
    assert len(app.dataframe[0].value) == 9
