import math

import pytest

from assumptions import Assumptions, DEFAULT_ASSUMPTIONS
from sizing import SolarEstimate, SolarInputs, derive_outputs, estimate, to_amount


def test_reference_household():
    est = estimate(5000, 5, 55)
    assert est.system_size_kw == pytest.approx(5000 / 900)
    assert est.panel_count == 16
    assert est.total_cost == pytest.approx(305555.5556, rel=1e-9)
    assert est.is_ready


@pytest.mark.parametrize("bill,hours", [
    (0, 5), (5000, 0), (None, 5), (5000, None), ("", 5), (5000, "  "), (-100, 5), (5000, -2),
])
def test_invalid_inputs_give_zero_estimate(bill, hours):
    est = estimate(bill, hours)
    assert est == SolarEstimate.empty()
    assert est.panel_count == 0
    assert not est.is_ready


def test_panel_count_is_smallest_integer_covering_size():
    for bill in (800, 1234.5, 4999, 12000, 77777):
        est = estimate(bill, 4.5)
        needed = est.system_size_kw * 1000 / DEFAULT_ASSUMPTIONS.panel_wattage
        assert isinstance(est.panel_count, int)
        assert est.panel_count >= needed
        assert est.panel_count - 1 < needed


def test_total_cost_scales_with_cost_per_watt():
    base = estimate(5000, 5, 40)
    doubled = estimate(5000, 5, 80)
    assert doubled.total_cost == pytest.approx(2 * base.total_cost)


def test_system_size_scales_inversely_with_sunlight():
    base = estimate(6000, 4)
    doubled = estimate(6000, 8)
    assert doubled.system_size_kw == pytest.approx(base.system_size_kw / 2)


def test_cost_per_watt_change_leaves_size_and_panels():
    a = derive_outputs(SolarInputs(5000, 5, 55))
    b = derive_outputs(SolarInputs(5000, 5, 70))
    assert (a.system_size_kw, a.panel_count) == (b.system_size_kw, b.panel_count)
    assert b.total_cost > a.total_cost


def test_missing_or_negative_cost_per_watt_uses_default():
    default = estimate(5000, 5)
    assert estimate(5000, 5, None).total_cost == pytest.approx(default.total_cost)
    assert estimate(5000, 5, -3).total_cost == pytest.approx(default.total_cost)


def test_zero_cost_per_watt_is_allowed():
    est = estimate(5000, 5, 0)
    assert est.is_ready
    assert est.total_cost == 0


def test_custom_assumptions():
    est = derive_outputs(SolarInputs(3000, 5, 50), Assumptions(panel_wattage=500, tariff_per_kwh=10))
    assert est.system_size_kw == pytest.approx(2.0)
    assert est.panel_count == 4
    assert est.total_cost == pytest.approx(100000)


def test_tiny_sunlight_is_not_clamped():
    est = estimate(5000, 1e-6)
    assert est.system_size_kw == pytest.approx(5000 / (1e-6 * 180))
    assert math.isfinite(est.total_cost)


def test_overflow_falls_back_to_zero_estimate(caplog):
    est = derive_outputs(SolarInputs(1e308, 1e-10, 55))
    assert est == SolarEstimate.empty()
    assert "Non-finite" in caplog.text


@pytest.mark.parametrize("raw,expected", [
    ("5000", 5000.0), (" 5.5 ", 5.5), (7, 7.0), ("-3", -3.0),
    ("", None), ("abc", None), (None, None), ("nan", None), ("inf", None), (True, None),
])
def test_to_amount(raw, expected):
    assert to_amount(raw) == expected


def test_estimate_accepts_widget_values():
    import numpy as np

    assert estimate(np.float64(5000), np.float64(5), 55.0).panel_count == 16
    assert estimate(None, 5.0, 55.0) == SolarEstimate.empty()
