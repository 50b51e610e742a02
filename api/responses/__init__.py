"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional
from datetime import datetime
import numpy as np
from pydantic import BaseModel, Field, model_serializer
from engine.enums import DegeneracyKind, ForecastAlgorithm, ForecastStatus


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class ChartPointOut(NpModel):

    date: datetime
    value: float
    unit: str
    is_prediction: bool
    algorithm: Optional[ForecastAlgorithm] = None
    confidence_upper: Optional[float] = None
    confidence_lower: Optional[float] = None


class DegeneracyWarningOut(NpModel):

    kind: DegeneracyKind
    message: str


class ForecastResponse(NpModel):

    status: ForecastStatus
    reason: Optional[str] = None
    predictions: List[ChartPointOut] = Field(default_factory=list)
    accuracy: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    algorithm: Optional[ForecastAlgorithm] = None
    confidence_level: Optional[float] = None
    sample_size: int = 0
    dropped_points: int = 0
    warnings: List[DegeneracyWarningOut] = Field(default_factory=list)
    series: Optional[List[ChartPointOut]] = None


class AccuracyReportOut(NpModel):

    mape: float
    rmse: float
    mae: float
    accuracy: float = Field(ge=0.0, le=100.0)
    sample_size: int = 0


class BacktestResponse(NpModel):

    status: ForecastStatus
    reason: Optional[str] = None
    algorithm: Optional[ForecastAlgorithm] = None
    holdout_days: Optional[int] = None
    report: Optional[AccuracyReportOut] = None
    actual: List[float] = Field(default_factory=list)
    predicted: List[float] = Field(default_factory=list)
