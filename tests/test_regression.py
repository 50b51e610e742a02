"""
Test cases for ordinary least-squares regression, including exact linear fits, R-squared clamping, residual standard deviation and the zero-variance degenerate case.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.errors import InsufficientDataError
from engine.forecast.regression import RegressionResult, fit, predict


def test_perfect_line():
    xs = [0, 1, 2, 3, 4, 5]
    ys = [2 * x + 1 for x in xs]
    res = fit(xs, ys)
    assert isinstance(res, RegressionResult)
    assert res.slope == pytest.approx(2.0)
    assert res.intercept == pytest.approx(1.0)
    assert res.r_squared == pytest.approx(1.0)
    assert res.residual_std == pytest.approx(0.0, abs=1e-9)
    assert predict(res, 6) == pytest.approx(13.0)


def test_noisy_fit_statistics():
    res = fit([0, 1, 2, 3], [1, 3, 2, 4])
    assert res.slope == pytest.approx(0.8)
    assert res.intercept == pytest.approx(1.3)
    assert res.r_squared == pytest.approx(0.64)
    assert res.residual_std == pytest.approx(0.9 ** 0.5)
    assert res.sample_size == 4


def test_flat_series_is_a_perfect_fit():
    res = fit([0, 1, 2, 3], [5, 5, 5, 5])
    assert res.slope == 0.0
    assert res.intercept == 5.0
    assert res.r_squared == 1.0
    assert res.residual_std == 0.0


def test_r_squared_stays_in_unit_interval():
    res = fit([0, 1, 2, 3, 4, 5], [3, -1, 4, -1, 5, -9])
    assert 0.0 <= res.r_squared <= 1.0


def test_two_points_have_zero_residual_std():
    res = fit([0, 2], [1, 5])
    assert res.slope == 2.0
    assert res.residual_std == 0.0


def test_zero_variance_x_is_insufficient():
    with pytest.raises(InsufficientDataError):
        fit([3, 3, 3], [1, 2, 3])


def test_fewer_than_two_points_is_insufficient():
    with pytest.raises(InsufficientDataError):
        fit([0], [1])


def test_length_mismatch():
    with pytest.raises(ValueError):
        fit([0, 1, 2], [1, 2])


def test_overflowing_values_are_insufficient():
    with pytest.raises(InsufficientDataError):
        fit([0, 1, 2, 3], [1e200, 3e200, 2e200, 4e200])
