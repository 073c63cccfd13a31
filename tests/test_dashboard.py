from pathlib import Path

from streamlit.testing.v1 import AppTest

from ecotrip.common.utils import NON_POSITIVE_MESSAGE

DASHBOARD = Path(__file__).resolve().parents[1] / "ecotrip" / "dashboard" / "main.py"


def _dashboard(tmp_path, monkeypatch) -> AppTest:
    config = tmp_path / "config.yaml"
    config.write_text(f"data_paths:\n  logs_dir: {tmp_path.as_posix()}/logs\n", encoding="utf-8")
    monkeypatch.setenv("ECOTRIP_CONFIG", str(config))
    app = AppTest.from_file(str(DASHBOARD), default_timeout=30)
    app.run()
    return app


def test_dashboard_renders_results_on_submit(tmp_path, monkeypatch) -> None:
    app = _dashboard(tmp_path, monkeypatch)
    app.number_input[1].set_value(2)
    app.button[0].click()
    app.run()
    assert not app.exception
    assert [metric.value for metric in app.metric] == ["24.00 kg", "2", "2.4", "200"]
    assert any("Baixo Impacto" in block.value for block in app.markdown)


def test_dashboard_shows_validation_error(tmp_path, monkeypatch) -> None:
    app = _dashboard(tmp_path, monkeypatch)
    app.number_input[1].set_value(0)
    app.button[0].click()
    app.run()
    assert not app.exception
    assert [error.value for error in app.error] == [NON_POSITIVE_MESSAGE]
    assert not app.metric
