from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransportMode(Enum):
    """Transport modes offered by the calculator, keyed by their form value."""

    PLANE = ("plane", 0.255)
    PLANE_FIRST = ("planeFirst", 0.350)
    CAR_GAS = ("carGas", 0.120)
    CAR_ELECTRIC = ("carElectric", 0.050)
    BUS = ("bus", 0.068)
    TRAIN = ("train", 0.041)
    BIKE = ("bike", 0.011)

    def __init__(self, key: str, factor: float) -> None:
        self.key = key
        # kg CO2 per passenger-km
        self.factor = factor

    @classmethod
    def from_key(cls, key: str) -> TransportMode:
        for mode in cls:
            if mode.key == key:
                return mode
        raise KeyError(key)


class ImpactTier(Enum):
    LOW = ("low", "Baixo Impacto", "impact-low")
    MODERATE = ("moderate", "Impacto Moderado", "impact-medium")
    HIGH = ("high", "Alto Impacto", "impact-high")

    def __init__(self, key: str, label: str, css_class: str) -> None:
        self.key = key
        self.label = label
        self.css_class = css_class


class TipCategory(str, Enum):
    PLANE = "plane"
    CAR = "car"
    BUS = "bus"
    TRAIN = "train"
    BIKE = "bike"


@dataclass(frozen=True)
class TripRequest:
    factor: float
    distance_km: float
    passengers: int


@dataclass(frozen=True)
class EmissionResult:
    total_co2_kg: float
    tree_years_equivalent: int
    home_energy_days_equivalent: float
    car_km_equivalent: int


@dataclass(frozen=True)
class TripReport:
    request: TripRequest
    result: EmissionResult
    impact: ImpactTier
    tip_category: TipCategory
    tips: tuple[str, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "factor": self.request.factor,
            "distance_km": self.request.distance_km,
            "passengers": self.request.passengers,
            "total_co2_kg": self.result.total_co2_kg,
            "tree_years_equivalent": self.result.tree_years_equivalent,
            "home_energy_days_equivalent": self.result.home_energy_days_equivalent,
            "car_km_equivalent": self.result.car_km_equivalent,
            "impact": self.impact.key,
            "impact_label": self.impact.label,
            "tip_category": self.tip_category.value,
            "tips": list(self.tips),
        }
