from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math
import re
from typing import Any

from ecotrip.common.schemas import TransportMode, TripRequest

MISSING_FIELDS_MESSAGE = "Por favor, preencha todos os campos corretamente."
NON_POSITIVE_MESSAGE = "Distância e número de passageiros devem ser maiores que zero."

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class InvalidTripInput(ValueError):
    """Raised when raw form values cannot become a TripRequest."""


def round_half_up(value: float | Decimal, ndigits: int = 0) -> float:
    """Round the exact binary value of ``value`` with ties going up.

    ``round`` uses banker's rounding, so ``round(0.125, 2) == 0.12``; the
    calculator displays ``0.13`` there. Non-finite floats come back unchanged
    and values beyond float range come back as ``inf``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return value
    exact = Decimal(value)
    exponent = Decimal(1).scaleb(-ndigits)
    with localcontext() as ctx:
        # quantize needs every digit of the result to fit in the precision
        ctx.prec = max(ctx.prec, exact.adjusted() + ndigits + 2)
        return float(exact.quantize(exponent, rounding=ROUND_HALF_UP))


def round_half_up_int(value: float | Decimal) -> int:
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def resolve_factor(transport: Any) -> float | None:
    if isinstance(transport, TransportMode):
        return transport.factor
    if isinstance(transport, str):
        try:
            return TransportMode.from_key(transport.strip()).factor
        except KeyError:
            pass
    return _to_float(transport)


def parse_trip_request(transport: Any, distance: Any, passengers: Any) -> TripRequest:
    factor = resolve_factor(transport)
    distance_km = _to_float(distance)
    passenger_count = _to_int(passengers)
    if factor is None or distance_km is None or passenger_count is None:
        raise InvalidTripInput(MISSING_FIELDS_MESSAGE)
    if distance_km <= 0 or passenger_count <= 0:
        raise InvalidTripInput(NON_POSITIVE_MESSAGE)
    if factor <= 0:
        raise InvalidTripInput(MISSING_FIELDS_MESSAGE)
    return TripRequest(factor=factor, distance_km=distance_km, passengers=passenger_count)
