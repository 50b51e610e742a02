"""
Test cases for forecasting enums, covering algorithm tag parsing and the status and degeneracy values exposed to callers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.enums import DegeneracyKind, ForecastAlgorithm, ForecastStatus
from engine.errors import ForecastError, InvalidRequestError


def test_algorithm_parse():
    assert ForecastAlgorithm.parse("linear-regression") == ForecastAlgorithm.linear_regression
    assert ForecastAlgorithm.parse(" Moving-Average ") == ForecastAlgorithm.moving_average
    assert ForecastAlgorithm.parse("moving_average") == ForecastAlgorithm.moving_average
    assert ForecastAlgorithm.parse(ForecastAlgorithm.linear_regression) is ForecastAlgorithm.linear_regression


@pytest.mark.parametrize("tag", ["arima", "", None, "linear"])
def test_algorithm_parse_rejects_unknown(tag):
    with pytest.raises(InvalidRequestError):
        ForecastAlgorithm.parse(tag)


def test_error_hierarchy():
    assert issubclass(InvalidRequestError, ForecastError)


def test_status_and_degeneracy_values():
    assert [s.value for s in ForecastStatus] == ["ok", "insufficient_data", "invalid_request"]
    assert DegeneracyKind.perfect_fit.value == "perfect_fit"
    assert DegeneracyKind.constant_window.value == "constant_window"
