import pytest
from pydantic import ValidationError

from pool_readings.models import Measurement
from pool_readings.normalizer import normalize_payload, round_half_away_from_zero


def test_normalize_full_payload():
    """The documented example payload normalizes with nearest-integer rounding."""
    measurement = normalize_payload({
        "testDate": "2024-01-01",
        "chlorine": 1.5,
        "ph": 7.2,
        "acidDemand": 3.6,
        "totalAlkalinity": 80.2,
    })
    assert measurement == Measurement(
        test_date="2024-01-01",
        chlorine=1.5,
        ph=7.2,
        acid_demand=4,
        total_alkalinity=80,
    )


def test_normalize_empty_payload_defaults_every_field():
    measurement = normalize_payload({})
    assert measurement.test_date == ""
    assert measurement.chlorine == 0.0
    assert measurement.ph == 0.0
    assert measurement.acid_demand == 0
    assert measurement.total_alkalinity == 0


def test_normalize_partial_payload():
    measurement = normalize_payload({"ph": 7.6, "totalAlkalinity": 100})
    assert measurement.ph == 7.6
    assert measurement.total_alkalinity == 100
    assert measurement.test_date == ""
    assert measurement.chlorine == 0.0
    assert measurement.acid_demand == 0


@pytest.mark.parametrize("value", ["1.5", None, True, False, [1.5], {"v": 1.5}, float("nan"), float("inf")])
def test_wrong_typed_numbers_default_to_zero(value):
    measurement = normalize_payload({"chlorine": value, "acidDemand": value})
    assert measurement.chlorine == 0.0
    assert measurement.acid_demand == 0


def test_wrong_typed_test_date_defaults_to_empty_string():
    assert normalize_payload({"testDate": 20240101}).test_date == ""
    assert normalize_payload({"testDate": None}).test_date == ""


def test_integer_json_numbers_are_accepted_as_floats():
    measurement = normalize_payload({"chlorine": 2, "ph": 7})
    assert measurement.chlorine == 2.0
    assert isinstance(measurement.chlorine, float)


def test_huge_integer_defaults_instead_of_failing():
    assert normalize_payload({"ph": 10 ** 400}).ph == 0.0


@pytest.mark.parametrize("value", [1e19, -1e19, 1e300, 10 ** 20, 2 ** 63])
def test_integer_fields_outside_int64_default_to_zero(value):
    measurement = normalize_payload({"acidDemand": value, "totalAlkalinity": value})
    assert measurement.acid_demand == 0
    assert measurement.total_alkalinity == 0


def test_integer_fields_at_int64_limit_are_kept():
    assert normalize_payload({"acidDemand": -2 ** 63}).acid_demand == -2 ** 63


def test_unknown_keys_are_ignored():
    measurement = normalize_payload({"chlorine": 3.0, "cyanuricAcid": 40})
    assert measurement.chlorine == 3.0


@pytest.mark.parametrize("value, expected", [
    (3.6, 4),
    (80.2, 80),
    (2.5, 3),
    (3.5, 4),
    (-2.5, -3),
    (-0.4, 0),
    (0.49999999999999994, 0),
    (7.0, 7),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_measurement_is_immutable():
    measurement = normalize_payload({"ph": 7.2})
    with pytest.raises(ValidationError):
        measurement.ph = 8.0
