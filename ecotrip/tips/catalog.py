from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ecotrip.common.schemas import TipCategory, TransportMode

TIPS: Mapping[TipCategory, tuple[str, ...]] = MappingProxyType(
    {
        TipCategory.PLANE: (
            "Escolha voos diretos sempre que possível - decolagens e pousos consomem mais combustível",
            "Considere compensar suas emissões através de programas de créditos de carbono",
            "Viaje com bagagem leve - menos peso significa menos combustível",
            "Prefira classe econômica - ocupa menos espaço e emite menos CO₂ por passageiro",
        ),
        TipCategory.CAR: (
            "Compartilhe a viagem com outras pessoas para dividir as emissões",
            "Mantenha a velocidade constante e moderada para economizar combustível",
            "Verifique a pressão dos pneus regularmente",
            "Considere alugar um veículo híbrido ou elétrico para viagens longas",
        ),
        TipCategory.BUS: (
            "Ônibus já é uma opção sustentável! Continue priorizando transporte coletivo",
            "Prefira empresas que investem em frotas modernas e eficientes",
            "Combine ônibus com outros meios de transporte público no destino",
        ),
        TipCategory.TRAIN: (
            "Excelente escolha! Trens são um dos meios mais sustentáveis",
            "Aproveite a viagem de trem para trabalhar ou relaxar",
            "Incentive outras pessoas a considerar viagens de trem",
        ),
        TipCategory.BIKE: (
            "Parabéns! Você escolheu o meio mais sustentável",
            "Planeje rotas seguras e agradáveis para incentivar outros ciclistas",
            "Lembre-se de usar equipamentos de segurança adequados",
        ),
    }
)


def classify_tip_category(factor: float | TransportMode) -> TipCategory:
    """Map an emission factor to the tip set shown for it.

    The checks run in order. Every factor in the car range, bus (0.068)
    included, resolves to CAR before the exact bus and train checks run.
    """
    if isinstance(factor, TransportMode):
        factor = factor.factor
    if factor >= 0.255:
        return TipCategory.PLANE
    if 0.050 <= factor <= 0.120:
        return TipCategory.CAR
    if factor == 0.068:
        return TipCategory.BUS
    if factor == 0.041:
        return TipCategory.TRAIN
    return TipCategory.BIKE


def lookup_tips(category: TipCategory) -> tuple[str, ...]:
    return TIPS[category]
