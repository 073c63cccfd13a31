from __future__ import annotations

import argparse
import logging
import os
import sys

import streamlit as st

from ecotrip.analytics.comparison import compare_modes
from ecotrip.common.config import AppConfig, load_config
from ecotrip.common.logging import configure_logging
from ecotrip.common.schemas import TransportMode
from ecotrip.common.utils import InvalidTripInput, parse_trip_request
from ecotrip.pipeline.orchestrator import run_calculation

logger = logging.getLogger(__name__)

MODE_LABELS = {
    TransportMode.PLANE: "Avião (econômica)",
    TransportMode.PLANE_FIRST: "Avião (primeira classe)",
    TransportMode.CAR_GAS: "Carro a gasolina",
    TransportMode.CAR_ELECTRIC: "Carro elétrico",
    TransportMode.BUS: "Ônibus",
    TransportMode.TRAIN: "Trem",
    TransportMode.BIKE: "Bicicleta",
}

IMPACT_COLORS = {
    "impact-low": "green",
    "impact-medium": "orange",
    "impact-high": "red",
}


def _is_running_with_streamlit() -> bool:
    try:
        from streamlit.runtime.scriptrunner import get_script_run_ctx

        return get_script_run_ctx() is not None
    except Exception:
        return False


def _run_streamlit() -> int:
    from streamlit.web.cli import main as stcli

    sys.argv = ["streamlit", "run", __file__, "--"] + sys.argv[1:]
    try:
        return int(stcli() or 0)
    except SystemExit as exc:
        return int(exc.code or 0)


def _get_config_path() -> str | None:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", default=os.getenv("ECOTRIP_CONFIG"))
    args, _ = parser.parse_known_args()
    return args.config


def _load_app_config() -> AppConfig:
    config_path = _get_config_path()
    if config_path and os.path.exists(config_path):
        return load_config(config_path)
    return AppConfig()


def mode_label(mode: TransportMode) -> str:
    return f"{MODE_LABELS[mode]} ({mode.factor:.3f} kg/km)"


def main() -> int:
    try:
        if not _is_running_with_streamlit():
            return _run_streamlit()
        config = _load_app_config()
        configure_logging(config.data_paths.logs_dir)
        st.set_page_config(page_title=config.dashboard.page_title, layout="centered")

        st.title("Calculadora EcoTrip")
        st.caption("Simulador de impacto ambiental para viagens")

        modes = list(TransportMode)
        default_mode = TransportMode.from_key(config.dashboard.default_mode)
        with st.form("travel_form"):
            mode = st.selectbox(
                "Meio de transporte",
                options=modes,
                index=modes.index(default_mode),
                format_func=mode_label,
            )
            distance = st.number_input(
                "Distância (km)",
                min_value=0.0,
                value=float(config.dashboard.default_distance_km),
                step=10.0,
            )
            passengers = st.number_input(
                "Número de passageiros",
                min_value=0,
                value=int(config.dashboard.default_passengers),
                step=1,
            )
            submitted = st.form_submit_button("Calcular impacto")

        if not submitted:
            return 0

        try:
            request = parse_trip_request(mode, distance, passengers)
        except InvalidTripInput as exc:
            st.error(str(exc))
            return 0

        report = run_calculation(request, config)
        result = report.result

        st.subheader("Resultado")
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("CO2 emitido", f"{result.total_co2_kg:.2f} kg")
        col2.metric("Árvores (1 ano)", f"{result.tree_years_equivalent}")
        col3.metric("Dias de energia", f"{result.home_energy_days_equivalent:.1f}")
        col4.metric("Km de carro", f"{result.car_km_equivalent}")

        color = IMPACT_COLORS.get(report.impact.css_class, "gray")
        st.markdown(f"**Nível de impacto:** :{color}[{report.impact.label}]")

        st.subheader("Dicas de sustentabilidade")
        st.markdown("\n".join(f"- {tip}" for tip in report.tips))

        st.subheader("Comparação entre meios de transporte")
        comparison = compare_modes(
            request.distance_km,
            request.passengers,
            baselines=config.emissions,
            thresholds=config.impact,
        )
        st.bar_chart(comparison.set_index("mode")["total_co2_kg"])
        return 0
    except Exception:
        logger.exception("Dashboard failed", extra={"config": _get_config_path()})
        return 1


if __name__ == "__main__":
    if _is_running_with_streamlit():
        main()
    else:
        raise SystemExit(main())
