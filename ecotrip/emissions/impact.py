from __future__ import annotations

from ecotrip.common.config import ImpactConfig
from ecotrip.common.schemas import ImpactTier

DEFAULT_THRESHOLDS = ImpactConfig(moderate_min=50.0, high_min=150.0)


def classify_impact(
    total_co2_kg: float, thresholds: ImpactConfig = DEFAULT_THRESHOLDS
) -> ImpactTier:
    # Each threshold belongs to the tier above it.
    if total_co2_kg < thresholds.moderate_min:
        return ImpactTier.LOW
    if total_co2_kg < thresholds.high_min:
        return ImpactTier.MODERATE
    return ImpactTier.HIGH
