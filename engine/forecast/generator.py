"""
Forecast generation for health measurements: validates a request, normalizes the history, projects future daily values with the selected algorithm, attaches clamped confidence bounds and an accuracy score, and reports failures as explicit result variants rather than exceptions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from config import SECONDS_PER_DAY, settings
from engine.enums import DegeneracyKind, ForecastAlgorithm, ForecastStatus
from engine.errors import InsufficientDataError, InvalidRequestError
from engine.forecast import confidence, moving_average, regression
from engine.forecast.accuracy import AccuracyReport, prediction_accuracy
from engine.forecast.normalize import HistoricalPoint, NormalizedSeries, normalize

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastRequest:
    historical_points: Tuple[HistoricalPoint, ...]
    algorithm: Union[ForecastAlgorithm, str] = ForecastAlgorithm.linear_regression
    horizon_days: int = 7
    confidence_level: float = 0.95
    unit: str = ""
    window_size: Optional[int] = None
    metric: Optional[str] = None
    non_negative: Optional[bool] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "historical_points", tuple(self.historical_points))


@dataclass(frozen=True)
class PredictedPoint:
    date: datetime
    value: float
    unit: str
    algorithm: ForecastAlgorithm
    confidence_upper: Optional[float] = None
    confidence_lower: Optional[float] = None
    is_prediction: bool = True


@dataclass(frozen=True)
class NumericDegeneracyWarning:
    kind: DegeneracyKind
    message: str


@dataclass(frozen=True)
class ForecastResult:
    predictions: Tuple[PredictedPoint, ...]
    accuracy: float
    algorithm: ForecastAlgorithm
    confidence_level: float
    sample_size: int
    dropped_points: int = 0
    warnings: Tuple[NumericDegeneracyWarning, ...] = ()
    status: ForecastStatus = ForecastStatus.ok

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ForecastFailure:
    status: ForecastStatus
    reason: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class BacktestResult:
    algorithm: ForecastAlgorithm
    holdout_days: int
    report: AccuracyReport
    actual: Tuple[float, ...]
    predicted: Tuple[float, ...]
    status: ForecastStatus = ForecastStatus.ok

    @property
    def ok(self) -> bool:
        return True


ForecastOutcome = Union[ForecastResult, ForecastFailure]


@dataclass(frozen=True)
class _Projection:
    values: Tuple[float, ...]
    dispersion: float
    sample_size: int
    dof: int
    accuracy: float
    degeneracy: Optional[NumericDegeneracyWarning] = None


def _project_linear(series: NormalizedSeries, request: ForecastRequest, horizon: int) -> _Projection:
    fit = regression.fit(series.xs, series.ys)
    values = tuple(regression.predict(fit, series.x_last + i) for i in range(1, horizon + 1))
    degeneracy = None
    if fit.residual_std == 0:
        degeneracy = NumericDegeneracyWarning(
            kind=DegeneracyKind.perfect_fit,
            message="residual standard deviation is zero; confidence band collapses to the estimate",
        )
    return _Projection(
        values=values,
        dispersion=fit.residual_std,
        sample_size=fit.sample_size,
        dof=fit.sample_size - 2,
        accuracy=fit.r_squared * 100.0,
        degeneracy=degeneracy,
    )


def _project_moving_average(series: NormalizedSeries, request: ForecastRequest, horizon: int) -> _Projection:
    ma = moving_average.compute(series.ys, request.window_size)
    degeneracy = None
    if ma.variance == 0:
        degeneracy = NumericDegeneracyWarning(
            kind=DegeneracyKind.constant_window,
            message="trailing window is constant; confidence band collapses to the estimate",
        )
    return _Projection(
        values=(ma.latest,) * horizon,
        dispersion=ma.std,
        sample_size=ma.window,
        dof=ma.window - 1,
        accuracy=ma.accuracy,
        degeneracy=degeneracy,
    )


_STRATEGIES: Dict[ForecastAlgorithm, Callable[[NormalizedSeries, ForecastRequest, int], _Projection]] = {
    ForecastAlgorithm.linear_regression: _project_linear,
    ForecastAlgorithm.moving_average: _project_moving_average,
}


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate(request: ForecastRequest) -> ForecastAlgorithm:
    algorithm = ForecastAlgorithm.parse(request.algorithm)
    horizon = request.horizon_days
    if not _is_count(horizon) or horizon < 1:
        raise InvalidRequestError(f"horizon must be a positive integer number of days, got {horizon!r}")
    if horizon > settings.forecast_max_horizon_days:
        raise InvalidRequestError(
            f"horizon of {horizon} days exceeds the maximum of {settings.forecast_max_horizon_days}"
        )
    confidence.validate_level(request.confidence_level)
    window = request.window_size
    if window is not None and (not _is_count(window) or window < 1):
        raise InvalidRequestError(f"window size must be a positive integer, got {window!r}")
    return algorithm


def domain_floor(request: ForecastRequest) -> Optional[float]:
    if request.non_negative is not None:
        return settings.forecast_domain_floor if request.non_negative else None
    if request.metric and request.metric in settings.forecast_signed_metrics:
        return None
    return settings.forecast_domain_floor


def _clamp(value: float, floor: Optional[float]) -> float:
    return value if floor is None else max(floor, value)


def _unit(request: ForecastRequest) -> str:
    if request.unit:
        return request.unit
    for point in request.historical_points:
        unit = getattr(point, "unit", "")
        if unit:
            return unit
    return ""


def _generate(request: ForecastRequest, algorithm: ForecastAlgorithm) -> ForecastResult:
    series = normalize(request.historical_points)
    if series.n < settings.forecast_min_points:
        raise InsufficientDataError(
            f"{series.n} valid historical points, at least {settings.forecast_min_points} required"
        )

    projection = _STRATEGIES[algorithm](series, request, request.horizon_days)
    floor = domain_floor(request)
    unit = _unit(request)

    predictions: List[PredictedPoint] = []
    for step, estimate in enumerate(projection.values, start=1):
        band = confidence.interval(
            estimate,
            projection.dispersion,
            projection.sample_size,
            request.confidence_level,
            dof=projection.dof,
        )
        predictions.append(PredictedPoint(
            date=series.last_date + timedelta(days=step),
            value=_clamp(estimate, floor),
            unit=unit,
            algorithm=algorithm,
            confidence_upper=_clamp(band.upper, floor),
            confidence_lower=_clamp(band.lower, floor),
        ))

    warnings = (projection.degeneracy,) if projection.degeneracy else ()
    for warning in warnings:
        log.debug("forecast degeneracy (%s): %s", warning.kind.value, warning.message)

    return ForecastResult(
        predictions=tuple(predictions),
        accuracy=float(min(100.0, max(0.0, projection.accuracy))),
        algorithm=algorithm,
        confidence_level=request.confidence_level,
        sample_size=series.n,
        dropped_points=series.dropped,
        warnings=warnings,
    )


def forecast(request: ForecastRequest) -> ForecastOutcome:
    """Produce a daily forecast for ``request``.

    Never raises for bad input: invalid requests and insufficient history come
    back as :class:`ForecastFailure` so callers can render an empty state.
    """
    try:
        algorithm = _validate(request)
    except InvalidRequestError as exc:
        log.info("rejecting forecast request: %s", exc)
        return ForecastFailure(status=ForecastStatus.invalid_request, reason=str(exc))

    try:
        result = _generate(request, algorithm)
    except InsufficientDataError as exc:
        log.info("insufficient data for %s forecast: %s", algorithm.value, exc)
        return ForecastFailure(status=ForecastStatus.insufficient_data, reason=str(exc))
    except InvalidRequestError as exc:
        log.info("rejecting forecast request: %s", exc)
        return ForecastFailure(status=ForecastStatus.invalid_request, reason=str(exc))

    log.debug(
        "%s forecast: n=%d horizon=%d accuracy=%.2f",
        algorithm.value, result.sample_size, len(result.predictions), result.accuracy,
    )
    return result


def _day_offsets(origin: datetime, dates: Iterable[datetime]) -> List[int]:
    return [max(1, round((when - origin).total_seconds() / SECONDS_PER_DAY)) for when in dates]


def backtest(request: ForecastRequest, holdout_days: Optional[int] = None) -> Union[BacktestResult, ForecastFailure]:
    """Withhold the most recent valid points, forecast them from the rest, and score the fit.

    Held-out points are matched to the prediction for their calendar-day
    offset from the last training point, so irregular spacing is tolerated.
    """
    if holdout_days is None:
        holdout_days = settings.backtest_default_holdout_days
    if not _is_count(holdout_days) or holdout_days < 1:
        return ForecastFailure(
            status=ForecastStatus.invalid_request,
            reason=f"holdout must be a positive integer number of points, got {holdout_days!r}",
        )

    try:
        algorithm = _validate(request)
        series = normalize(request.historical_points)
    except InvalidRequestError as exc:
        return ForecastFailure(status=ForecastStatus.invalid_request, reason=str(exc))
    except InsufficientDataError as exc:
        return ForecastFailure(status=ForecastStatus.insufficient_data, reason=str(exc))

    train_n = series.n - holdout_days
    if train_n < settings.forecast_min_points:
        return ForecastFailure(
            status=ForecastStatus.insufficient_data,
            reason=f"{series.n} valid points leave {train_n} for training after holding out {holdout_days}",
        )

    unit = _unit(request)
    training = tuple(
        HistoricalPoint(date=when, value=value, unit=unit)
        for when, value in zip(series.dates[:train_n], series.ys[:train_n])
    )
    held_dates = series.dates[train_n:]
    actual = series.ys[train_n:]
    offsets = _day_offsets(series.dates[train_n - 1], held_dates)

    horizon = max(offsets)
    outcome = forecast(replace(request, historical_points=training, horizon_days=horizon, unit=unit))
    if isinstance(outcome, ForecastFailure):
        return outcome

    predicted = tuple(outcome.predictions[k - 1].value for k in offsets)
    report = prediction_accuracy(actual, predicted)
    log.debug("%s backtest over %d points: rmse=%.4f", algorithm.value, holdout_days, report.rmse)

    return BacktestResult(
        algorithm=algorithm,
        holdout_days=holdout_days,
        report=report,
        actual=tuple(actual),
        predicted=predicted,
    )
