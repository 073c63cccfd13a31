from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from ecotrip.common.config import AppConfig, load_config
from ecotrip.common.logging import configure_logging
from ecotrip.common.schemas import TransportMode, TripReport
from ecotrip.common.utils import InvalidTripInput, parse_trip_request
from ecotrip.pipeline.orchestrator import run_calculation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def format_report(report: TripReport) -> str:
    result = report.result
    lines = [
        f"CO2 total: {result.total_co2_kg:.2f} kg",
        f"Árvores (1 ano): {result.tree_years_equivalent}",
        f"Dias de energia doméstica: {result.home_energy_days_equivalent:.1f}",
        f"Km em carro médio: {result.car_km_equivalent}",
        f"Nível de impacto: {report.impact.label}",
        "Dicas:",
    ]
    lines.extend(f"  - {tip}" for tip in report.tips)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate the CO2 emitted by a trip")
    parser.add_argument(
        "--mode",
        required=True,
        help=f"Transport mode ({', '.join(mode.key for mode in TransportMode)}) "
        "or a raw factor in kg CO2 per passenger-km",
    )
    parser.add_argument("--distance", required=True, help="Trip distance in km")
    parser.add_argument("--passengers", default="1", help="Number of passengers")
    parser.add_argument("--config", default=None, help="Path to config YAML")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config:
            if not Path(args.config).exists():
                raise FileNotFoundError(f"Config not found: {args.config}")
            config = load_config(args.config)
        else:
            config = AppConfig()
        configure_logging(config.data_paths.logs_dir)

        try:
            request = parse_trip_request(args.mode, args.distance, args.passengers)
        except InvalidTripInput as exc:
            print(str(exc), file=sys.stderr)
            return EXIT_INVALID_INPUT

        report = run_calculation(request, config)
        if args.json:
            print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        else:
            print(format_report(report))
        return EXIT_OK
    except Exception:
        logger.exception(
            "Calculation failed",
            extra={
                "mode": args.mode,
                "distance": args.distance,
                "passengers": args.passengers,
                "config": args.config,
            },
        )
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
