"""
Test cases for confidence interval calculation, including the fixed 95% multiplier, monotonic widening with confidence level, zero-width bands and the optional Student-t multiplier.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.errors import InvalidRequestError
from engine.forecast.confidence import ConfidenceInterval, interval, multiplier


def test_normal_multipliers():
    assert multiplier(0.95) == 1.96
    assert multiplier(0.90) == 1.64
    assert multiplier(0.99) == 2.58


def test_interval_bounds():
    ci = interval(10.0, 2.0, 30, 0.95)
    assert isinstance(ci, ConfidenceInterval)
    assert ci.upper == pytest.approx(13.92)
    assert ci.lower == pytest.approx(6.08)
    assert ci.width == pytest.approx(7.84)


def test_zero_dispersion_collapses_band():
    ci = interval(42.0, 0.0, 10, 0.95)
    assert ci.upper == ci.lower == 42.0
    assert ci.width == 0.0


def test_width_never_shrinks_as_level_rises():
    levels = [0.5, 0.8, 0.9, 0.95, 0.951, 0.975, 0.99, 0.999]
    widths = [interval(0.0, 1.5, 20, level).width for level in levels]
    assert widths == sorted(widths)
    assert interval(0.0, 1.5, 20, 0.99).width > interval(0.0, 1.5, 20, 0.95).width


@pytest.mark.parametrize("level", [0.0, 1.0, 1.5, -0.1, True])
def test_invalid_levels(level):
    with pytest.raises(InvalidRequestError):
        multiplier(level)


def test_negative_dispersion_rejected():
    with pytest.raises(InvalidRequestError):
        interval(1.0, -0.5, 10, 0.95)


def test_student_t_multiplier(monkeypatch):
    monkeypatch.setattr(settings, "forecast_use_student_t", True)
    assert multiplier(0.95, dof=2) == 4.3
    assert multiplier(0.95, dof=10) == 2.23
    # without usable degrees of freedom the normal quantile applies
    assert multiplier(0.95, dof=0) == 1.96
    assert multiplier(0.95) == 1.96


def test_student_t_disabled_by_default():
    assert multiplier(0.95, dof=2) == 1.96
