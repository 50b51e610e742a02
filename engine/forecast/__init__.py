"""
Forecasting logic for health measurements, including time series normalization, linear regression and moving-average projection, confidence intervals, accuracy metrics, and chart series assembly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.normalize import HistoricalPoint, NormalizedSeries, normalize
from engine.forecast.regression import RegressionResult, fit as fit_regression
from engine.forecast.moving_average import MovingAverageResult, compute as compute_moving_average
from engine.forecast.confidence import ConfidenceInterval, interval as confidence_interval
from engine.forecast.accuracy import AccuracyReport, prediction_accuracy
from engine.forecast.generator import (
    BacktestResult,
    ForecastFailure,
    ForecastOutcome,
    ForecastRequest,
    ForecastResult,
    NumericDegeneracyWarning,
    PredictedPoint,
    backtest,
    forecast,
)
from engine.forecast.series import ChartPoint, combine as combine_series

__all__ = [
    "HistoricalPoint",
    "NormalizedSeries",
    "normalize",
    "RegressionResult",
    "fit_regression",
    "MovingAverageResult",
    "compute_moving_average",
    "ConfidenceInterval",
    "confidence_interval",
    "AccuracyReport",
    "prediction_accuracy",
    "BacktestResult",
    "ForecastFailure",
    "ForecastOutcome",
    "ForecastRequest",
    "ForecastResult",
    "NumericDegeneracyWarning",
    "PredictedPoint",
    "backtest",
    "forecast",
    "ChartPoint",
    "combine_series",
]
