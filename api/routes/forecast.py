"""
Forecast routes projecting health measurements forward with confidence bands, plus a hold-out backtest for comparing algorithms on the caller's own history.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Iterable, List, Optional

from fastapi import APIRouter, HTTPException

from api.requests import BacktestApiRequest, ForecastApiRequest
from api.responses import (
    AccuracyReportOut,
    BacktestResponse,
    ChartPointOut,
    DegeneracyWarningOut,
    ForecastResponse,
)
from api.routes.exception import handle_exceptions
from config import settings
from engine.enums import ForecastStatus
from engine.forecast import ForecastFailure, backtest, combine_series, forecast

log = logging.getLogger(__name__)

router = APIRouter(tags=["Forecast"])


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, settings.api_round_precision)


def _chart_points(points: Iterable) -> List[ChartPointOut]:
    return [
        ChartPointOut(
            date=p.date,
            value=_round(p.value),
            unit=p.unit,
            is_prediction=p.is_prediction,
            algorithm=p.algorithm,
            confidence_upper=_round(p.confidence_upper),
            confidence_lower=_round(p.confidence_lower),
        )
        for p in points
    ]


def _reject_invalid(outcome: ForecastFailure) -> None:
    if outcome.status == ForecastStatus.invalid_request:
        raise HTTPException(status_code=422, detail=outcome.reason)


@router.post("/forecast", summary="Short-horizon forecast with confidence bands", response_model=ForecastResponse)
@handle_exceptions
async def create_forecast(req: ForecastApiRequest) -> ForecastResponse:
    outcome = forecast(req.to_engine())
    series = None
    if req.include_history:
        series = _chart_points(combine_series(req.historical_points(), outcome))

    if isinstance(outcome, ForecastFailure):
        _reject_invalid(outcome)
        return ForecastResponse(status=outcome.status, reason=outcome.reason, series=series)

    return ForecastResponse(
        status=outcome.status,
        predictions=_chart_points(outcome.predictions),
        accuracy=_round(outcome.accuracy),
        algorithm=outcome.algorithm,
        confidence_level=outcome.confidence_level,
        sample_size=outcome.sample_size,
        dropped_points=outcome.dropped_points,
        warnings=[DegeneracyWarningOut(kind=w.kind, message=w.message) for w in outcome.warnings],
        series=series,
    )


@router.post("/forecast/backtest", summary="Score an algorithm on withheld recent history", response_model=BacktestResponse)
@handle_exceptions
async def backtest_forecast(req: BacktestApiRequest) -> BacktestResponse:
    outcome = backtest(req.to_engine(), req.holdout_days)
    if isinstance(outcome, ForecastFailure):
        _reject_invalid(outcome)
        return BacktestResponse(status=outcome.status, reason=outcome.reason)

    report = outcome.report
    log.debug("backtest %s: accuracy=%.2f", outcome.algorithm.value, report.accuracy)
    return BacktestResponse(
        status=outcome.status,
        algorithm=outcome.algorithm,
        holdout_days=outcome.holdout_days,
        report=AccuracyReportOut(
            mape=_round(report.mape),
            rmse=_round(report.rmse),
            mae=_round(report.mae),
            accuracy=_round(report.accuracy),
            sample_size=report.sample_size,
        ),
        actual=[_round(v) for v in outcome.actual],
        predicted=[_round(v) for v in outcome.predicted],
    )
