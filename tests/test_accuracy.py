"""
Test cases for forecast accuracy metrics: MAPE, RMSE, MAE and the range-normalized accuracy percentage.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.forecast.accuracy import AccuracyReport, mae, mape, prediction_accuracy, rmse


def test_mape():
    assert mape([100, 200], [110, 180]) == pytest.approx(10.0)
    assert mape([], []) == 0.0
    assert math.isinf(mape([0, 10], [1, 10]))


def test_rmse_and_mae():
    assert rmse([1, 2, 3], [1, 2, 3]) == 0.0
    assert rmse([0, 0], [3, 4]) == pytest.approx(12.5 ** 0.5)
    assert mae([0, 0], [3, -4]) == pytest.approx(3.5)


def test_length_mismatch():
    with pytest.raises(ValueError):
        rmse([1, 2], [1])
    with pytest.raises(ValueError):
        prediction_accuracy([1, 2], [1])


def test_prediction_accuracy_perfect():
    report = prediction_accuracy([10, 20, 30], [10, 20, 30])
    assert isinstance(report, AccuracyReport)
    assert report.accuracy == 100.0
    assert report.mape == 0.0
    assert report.sample_size == 3


def test_prediction_accuracy_normalizes_by_range():
    report = prediction_accuracy([10, 20], [20, 10])
    assert report.rmse == pytest.approx(10.0)
    assert report.accuracy == 0.0
    report = prediction_accuracy([10, 20], [12, 18])
    assert report.accuracy == pytest.approx(80.0)


def test_prediction_accuracy_edge_cases():
    empty = prediction_accuracy([], [])
    assert (empty.mape, empty.rmse, empty.mae, empty.accuracy) == (0.0, 0.0, 0.0, 100.0)
    # zero actuals make mape undefined; it is reported as 0
    assert prediction_accuracy([0, 5], [1, 5]).mape == 0.0
    # flat actuals leave nothing to normalize against
    assert prediction_accuracy([5, 5], [6, 4]).accuracy == 100.0
