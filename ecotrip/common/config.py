from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from ecotrip.common.schemas import TransportMode


DEFAULT_CONFIG: dict[str, Any] = {
    "emissions": {
        "tree_kg_per_year": 21.0,
        "home_kg_per_day": 10.0,
        "car_kg_per_km": 0.12,
    },
    "impact": {
        "moderate_min": 50.0,
        "high_min": 150.0,
    },
    "dashboard": {
        "page_title": "EcoTrip",
        "default_mode": "carGas",
        "default_distance_km": 100.0,
        "default_passengers": 1,
    },
    "data_paths": {
        "logs_dir": "data/logs",
    },
}


@dataclass(frozen=True)
class EmissionsConfig:
    tree_kg_per_year: float = 21.0
    home_kg_per_day: float = 10.0
    car_kg_per_km: float = 0.12


@dataclass(frozen=True)
class ImpactConfig:
    moderate_min: float = 50.0
    high_min: float = 150.0


@dataclass(frozen=True)
class DashboardConfig:
    page_title: str = "EcoTrip"
    default_mode: str = "carGas"
    default_distance_km: float = 100.0
    default_passengers: int = 1


@dataclass(frozen=True)
class DataPaths:
    logs_dir: str = "data/logs"


@dataclass(frozen=True)
class AppConfig:
    emissions: EmissionsConfig = field(default_factory=EmissionsConfig)
    impact: ImpactConfig = field(default_factory=ImpactConfig)
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    data_paths: DataPaths = field(default_factory=DataPaths)


def deep_update(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_update(result[key], value)
        else:
            result[key] = value
    return result


def validate_config(config: AppConfig) -> None:
    emissions = config.emissions
    if emissions.tree_kg_per_year <= 0:
        raise ValueError("emissions.tree_kg_per_year must be > 0")
    if emissions.home_kg_per_day <= 0:
        raise ValueError("emissions.home_kg_per_day must be > 0")
    if emissions.car_kg_per_km <= 0:
        raise ValueError("emissions.car_kg_per_km must be > 0")
    if not (0.0 <= config.impact.moderate_min < config.impact.high_min):
        raise ValueError("impact thresholds must satisfy 0 <= moderate_min < high_min")
    if config.dashboard.default_distance_km <= 0:
        raise ValueError("dashboard.default_distance_km must be > 0")
    if config.dashboard.default_passengers < 1:
        raise ValueError("dashboard.default_passengers must be >= 1")
    try:
        TransportMode.from_key(config.dashboard.default_mode)
    except KeyError:
        raise ValueError(
            f"dashboard.default_mode must be one of {[mode.key for mode in TransportMode]}"
        ) from None


def build_config(data: dict[str, Any] | None = None) -> AppConfig:
    merged = deep_update(DEFAULT_CONFIG, data or {})
    emissions_dict = merged.get("emissions", {})
    impact_dict = merged.get("impact", {})
    dashboard_dict = merged.get("dashboard", {})
    data_paths_dict = merged.get("data_paths", {})
    config = AppConfig(
        emissions=EmissionsConfig(
            tree_kg_per_year=float(emissions_dict.get("tree_kg_per_year", 21.0)),
            home_kg_per_day=float(emissions_dict.get("home_kg_per_day", 10.0)),
            car_kg_per_km=float(emissions_dict.get("car_kg_per_km", 0.12)),
        ),
        impact=ImpactConfig(
            moderate_min=float(impact_dict.get("moderate_min", 50.0)),
            high_min=float(impact_dict.get("high_min", 150.0)),
        ),
        dashboard=DashboardConfig(
            page_title=str(dashboard_dict.get("page_title", "EcoTrip")),
            default_mode=str(dashboard_dict.get("default_mode", "carGas")),
            default_distance_km=float(dashboard_dict.get("default_distance_km", 100.0)),
            default_passengers=int(dashboard_dict.get("default_passengers", 1)),
        ),
        data_paths=DataPaths(
            logs_dir=str(data_paths_dict.get("logs_dir", "data/logs")),
        ),
    )
    validate_config(config)
    return config


def load_config(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return build_config(data)
