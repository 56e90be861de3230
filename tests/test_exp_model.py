import math

import numpy as np
import pandas as pd
import pytest

from core.errors import InsufficientDataError
from infrastructure.ml.exp_model import doubling_time_from_slope, fit_exponential
from infrastructure.ml.resampling import resample_daily
from tests.conftest import make_raw, make_table

D = pd.Timedelta(days=1)


def test_perfect_exponential_recovers_doubling_time(day0):
    values = [100 * 2 ** (k / 3) for k in range(20)]
    table = make_table(values)

    model = fit_exponential(table, "cases", day0 + 4 * D, day0 + 15 * D)

    assert model.doubling_time == pytest.approx(3.0, rel=1e-9)
    assert model.r2 == pytest.approx(1.0, abs=1e-12)
    assert model.n_points == 12
    assert model.is_growing


def test_prediction_is_absent_outside_window(day0):
    values = [100 * 2 ** (k / 3) for k in range(20)]
    table = make_table(values)
    t0, t1 = day0 + 4 * D, day0 + 15 * D

    model = fit_exponential(table, "cases", t0, t1)

    inside = ((table["time"] >= t0) & (table["time"] <= t1)).to_numpy()
    assert len(model.values) == len(table)
    assert model.values[~inside].isna().all()
    np.testing.assert_allclose(model.values[inside].to_numpy(), np.array(values)[inside], rtol=1e-9)


def test_window_bounds_are_inclusive(day0):
    table = make_table([10, 20, 40, 80, 160])
    model = fit_exponential(table, "cases", day0 + D, day0 + 3 * D)
    assert model.n_points == 3


def test_flat_series_has_undefined_doubling_time(day0):
    table = make_table([250.0] * 10)
    model = fit_exponential(table, "cases", day0, day0 + 9 * D)

    assert model.slope == pytest.approx(0.0, abs=1e-9)
    assert model.doubling_time is None
    assert not model.is_growing


def test_declining_series_has_undefined_doubling_time(day0):
    table = make_table([1000 * 0.5 ** k for k in range(6)])
    model = fit_exponential(table, "cases", day0, day0 + 5 * D)

    assert model.slope == pytest.approx(-math.log(2))
    assert model.doubling_time is None


def test_single_row_window_fails(day0):
    table = make_table([10, 20, 40])
    with pytest.raises(InsufficientDataError):
        fit_exponential(table, "cases", day0 + D, day0 + D)


def test_empty_window_fails(day0):
    table = make_table([10, 20, 40])
    with pytest.raises(InsufficientDataError):
        fit_exponential(table, "cases", day0 + 10 * D, day0 + 20 * D)


@pytest.mark.parametrize("bad", [0.0, -5.0])
def test_non_positive_values_fail(day0, bad):
    table = make_table([10, 20, bad, 80])
    with pytest.raises(InsufficientDataError):
        fit_exponential(table, "cases", day0, day0 + 3 * D)


def test_unknown_series_fails(day0):
    table = make_table([10, 20, 40])
    with pytest.raises(InsufficientDataError):
        fit_exponential(table, "hospitalised", day0, day0 + 2 * D)


def test_other_series_can_be_modelled(day0):
    table = make_table([5 * 2 ** k for k in range(5)], col="active")
    model = fit_exponential(table, "active", day0, day0 + 4 * D)
    assert model.series == "active"
    assert model.doubling_time == pytest.approx(1.0)


def test_elapsed_days_are_fractional(day0):
    # рядки о 12:00, вікно від півночі -> x = 0.5, 1.5, 2.5
    start = day0 + pd.Timedelta(hours=12)
    table = make_table([100, 200, 400], start=start)
    model = fit_exponential(table, "cases", day0, day0 + 3 * D)

    assert model.doubling_time == pytest.approx(1.0)
    assert model.intercept == pytest.approx(math.log(100) - 0.5 * math.log(2))


def test_end_to_end_three_days(day0):
    raw = make_raw([day0, day0 + D, day0 + 2 * D], [100, 200, 400])
    table = resample_daily(raw)
    assert len(table) == 3

    model = fit_exponential(table, "cases", day0, day0 + 2 * D)

    assert model.slope == pytest.approx(math.log(2))
    assert model.doubling_time == pytest.approx(1.0)
    assert model.r2 == pytest.approx(1.0)
    assert model.values.iloc[1] == pytest.approx(200.0)


def test_doubling_time_from_slope():
    assert doubling_time_from_slope(math.log(2) / 4) == pytest.approx(4.0)
    assert doubling_time_from_slope(0.0) is None
    assert doubling_time_from_slope(-0.1) is None
    assert doubling_time_from_slope(float("nan")) is None


@pytest.mark.parametrize("level, n", [(250.0, 10), (3.0, 7)])
def test_flat_series_has_undefined_r2(day0, level, n):
    table = make_table([level] * n)
    model = fit_exponential(table, "cases", day0, day0 + (n - 1) * D)

    assert math.isnan(model.r2)
    assert model.doubling_time is None
