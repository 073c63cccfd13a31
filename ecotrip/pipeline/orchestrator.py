from __future__ import annotations

import logging

from ecotrip.common.config import AppConfig
from ecotrip.common.schemas import TripReport, TripRequest
from ecotrip.emissions.factors import compute_trip
from ecotrip.emissions.impact import classify_impact
from ecotrip.tips.catalog import classify_tip_category, lookup_tips

logger = logging.getLogger(__name__)


def run_calculation(request: TripRequest, config: AppConfig | None = None) -> TripReport:
    config = config or AppConfig()
    result = compute_trip(request, baselines=config.emissions)
    impact = classify_impact(result.total_co2_kg, config.impact)
    category = classify_tip_category(request.factor)
    logger.info(
        "Trip calculated factor=%s distance_km=%s passengers=%s total_co2_kg=%.2f impact=%s",
        request.factor,
        request.distance_km,
        request.passengers,
        result.total_co2_kg,
        impact.key,
    )
    return TripReport(
        request=request,
        result=result,
        impact=impact,
        tip_category=category,
        tips=lookup_tips(category),
    )
