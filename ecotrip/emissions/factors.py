from __future__ import annotations

from decimal import Decimal
import math
from types import MappingProxyType
from typing import Mapping

from ecotrip.common.config import EmissionsConfig
from ecotrip.common.schemas import EmissionResult, TransportMode, TripRequest
from ecotrip.common.utils import round_half_up, round_half_up_int

EMISSION_FACTORS: Mapping[str, float] = MappingProxyType(
    {mode.key: mode.factor for mode in TransportMode}
)

# kg CO2 absorbed by one tree in a year
CO2_PER_TREE_YEAR = 21.0
# kg CO2 of one day of household energy use
CO2_PER_HOME_DAY = 10.0
# kg CO2 per km driven in an average car
CO2_PER_CAR_KM = 0.12

DEFAULT_BASELINES = EmissionsConfig(
    tree_kg_per_year=CO2_PER_TREE_YEAR,
    home_kg_per_day=CO2_PER_HOME_DAY,
    car_kg_per_km=CO2_PER_CAR_KM,
)


def compute_emissions(
    factor: float | TransportMode,
    distance_km: float,
    passengers: int,
    baselines: EmissionsConfig = DEFAULT_BASELINES,
) -> EmissionResult:
    if isinstance(factor, TransportMode):
        factor = factor.factor
    total: float | Decimal = factor * distance_km * passengers
    if not math.isfinite(total):
        # float overflow; carry on with the exact product
        total = Decimal(factor) * Decimal(distance_km) * passengers
    return EmissionResult(
        total_co2_kg=round_half_up(total, 2),
        tree_years_equivalent=math.ceil(_ratio(total, baselines.tree_kg_per_year)),
        home_energy_days_equivalent=round_half_up(_ratio(total, baselines.home_kg_per_day), 1),
        car_km_equivalent=round_half_up_int(_ratio(total, baselines.car_kg_per_km)),
    )


def _ratio(total: float | Decimal, baseline: float) -> float | Decimal:
    if isinstance(total, Decimal):
        return total / Decimal(baseline)
    ratio = total / baseline
    if not math.isfinite(ratio):
        return Decimal(total) / Decimal(baseline)
    return ratio


def compute_trip(
    request: TripRequest, baselines: EmissionsConfig = DEFAULT_BASELINES
) -> EmissionResult:
    return compute_emissions(
        request.factor, request.distance_km, request.passengers, baselines=baselines
    )
