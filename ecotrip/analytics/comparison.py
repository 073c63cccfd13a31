from __future__ import annotations

from typing import Mapping

import pandas as pd

from ecotrip.common.config import EmissionsConfig, ImpactConfig
from ecotrip.emissions.factors import DEFAULT_BASELINES, EMISSION_FACTORS, compute_emissions
from ecotrip.emissions.impact import DEFAULT_THRESHOLDS, classify_impact

COMPARISON_COLUMNS = ["mode", "factor", "total_co2_kg", "impact_tier"]


def compare_modes(
    distance_km: float,
    passengers: int,
    factors: Mapping[str, float] = EMISSION_FACTORS,
    baselines: EmissionsConfig = DEFAULT_BASELINES,
    thresholds: ImpactConfig = DEFAULT_THRESHOLDS,
) -> pd.DataFrame:
    """Emissions of the same trip for every transport mode, cleanest first."""
    rows = []
    for mode, factor in factors.items():
        result = compute_emissions(factor, distance_km, passengers, baselines=baselines)
        rows.append(
            {
                "mode": mode,
                "factor": factor,
                "total_co2_kg": result.total_co2_kg,
                "impact_tier": classify_impact(result.total_co2_kg, thresholds).key,
            }
        )
    frame = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
    return frame.sort_values("total_co2_kg", kind="stable").reset_index(drop=True)
