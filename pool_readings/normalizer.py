"""
Payload normalization for incoming webhook readings.

Webhook senders are not trusted to send well-formed payloads, so every field is
read with a typed extraction helper that falls back to a zero value instead of
raising. `normalize_payload` never fails.
"""
import math
from typing import Any, Mapping, Optional

from pool_readings.models import Measurement

# Integer fields must fit a signed 64-bit SQLite INTEGER
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _string_field(payload: Mapping[str, Any], key: str, default: str = "") -> str:
    value = payload.get(key)
    if isinstance(value, str):
        return value
    return default


def _float_field(payload: Mapping[str, Any], key: str, default: Optional[float] = 0.0) -> Optional[float]:
    """Read a JSON number as a float. Booleans and non-finite values are not numbers here."""
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    try:
        value = float(value)
    except OverflowError:
        return default
    if not math.isfinite(value):
        return default
    return value


def round_half_away_from_zero(value: float) -> int:
    """
    Round to the nearest integer, with halves going away from zero (2.5 -> 3, -2.5 -> -3).
    Python's built-in round() rounds halves to even instead.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for floats, unlike magnitude + 0.5
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def _rounded_int_field(payload: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = _float_field(payload, key, default=None)
    if value is None:
        return default
    rounded = round_half_away_from_zero(value)
    if not INT64_MIN <= rounded <= INT64_MAX:
        return default
    return rounded


def normalize_payload(payload: Mapping[str, Any]) -> Measurement:
    """Build a Measurement from a decoded JSON object, defaulting missing or wrong-typed fields"""
    return Measurement(
        test_date=_string_field(payload, "testDate"),
        chlorine=_float_field(payload, "chlorine"),
        ph=_float_field(payload, "ph"),
        acid_demand=_rounded_int_field(payload, "acidDemand"),
        total_alkalinity=_rounded_int_field(payload, "totalAlkalinity"),
    )
