import json

from ecotrip.common.config import AppConfig, ImpactConfig
from ecotrip.common.schemas import ImpactTier, TipCategory, TripRequest
from ecotrip.pipeline import run as cli
from ecotrip.pipeline.orchestrator import run_calculation


def _write_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(f"data_paths:\n  logs_dir: {tmp_path.as_posix()}/logs\n", encoding="utf-8")
    return str(path)


def test_run_calculation_gas_car_scenario():
    report = run_calculation(TripRequest(factor=0.120, distance_km=100, passengers=2))
    assert report.result.total_co2_kg == 24.0
    assert report.impact is ImpactTier.LOW
    assert report.tip_category is TipCategory.CAR
    assert report.tips[0].startswith("Compartilhe")


def test_run_calculation_plane_scenario():
    report = run_calculation(TripRequest(factor=0.255, distance_km=1000, passengers=1))
    assert report.impact is ImpactTier.HIGH
    assert report.tip_category is TipCategory.PLANE
    assert report.to_dict()["car_km_equivalent"] == 2125


def test_run_calculation_uses_configured_thresholds():
    config = AppConfig(impact=ImpactConfig(moderate_min=10.0, high_min=20.0))
    report = run_calculation(TripRequest(factor=0.120, distance_km=100, passengers=2), config)
    assert report.impact is ImpactTier.HIGH


def test_cli_prints_json_report(tmp_path, capsys):
    exit_code = cli.main(
        ["--mode", "train", "--distance", "500", "--passengers", "2", "--json",
         "--config", _write_config(tmp_path)]
    )
    assert exit_code == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["total_co2_kg"] == 41.0
    assert payload["impact"] == "low"
    assert payload["tip_category"] == "train"


def test_cli_prints_text_report(tmp_path, capsys):
    exit_code = cli.main(
        ["--mode", "0.255", "--distance", "1000", "--config", _write_config(tmp_path)]
    )
    assert exit_code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "CO2 total: 255.00 kg" in out
    assert "Alto Impacto" in out


def test_cli_rejects_invalid_input(tmp_path, capsys):
    exit_code = cli.main(
        ["--mode", "bike", "--distance", "0", "--config", _write_config(tmp_path)]
    )
    assert exit_code == cli.EXIT_INVALID_INPUT
    assert "maiores que zero" in capsys.readouterr().err


def test_cli_missing_config_fails(tmp_path):
    exit_code = cli.main(
        ["--mode", "bike", "--distance", "5", "--config", str(tmp_path / "missing.yaml")]
    )
    assert exit_code == cli.EXIT_FAILURE


def test_run_calculation_classifies_the_rounded_total():
    report = run_calculation(TripRequest(factor=49.996, distance_km=1, passengers=1))
    assert report.result.total_co2_kg == 50.0
    assert report.impact is ImpactTier.MODERATE


def test_cli_rejects_infinite_distance(tmp_path, capsys):
    exit_code = cli.main(
        ["--mode", "plane", "--distance", "inf", "--config", _write_config(tmp_path)]
    )
    assert exit_code == cli.EXIT_INVALID_INPUT
    assert "preencha todos os campos" in capsys.readouterr().err


def test_cli_handles_overflowing_total(tmp_path, capsys):
    exit_code = cli.main(
        ["--mode", "planeFirst", "--distance", "1e308", "--passengers", "10", "--json",
         "--config", _write_config(tmp_path)]
    )
    assert exit_code == cli.EXIT_OK
    assert json.loads(capsys.readouterr().out)["impact"] == "high"
