"""
Request models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional
from pydantic import BaseModel, Field

from config import settings
from engine.enums import ForecastAlgorithm
from engine.forecast import ForecastRequest, HistoricalPoint


class HistoricalPointIn(BaseModel):
    # validated by engine.forecast.normalize, which drops malformed points
    date: Any = None
    value: Any = None
    unit: str = ""


class ForecastApiRequest(BaseModel):
    points: List[HistoricalPointIn] = Field(default_factory=list)
    algorithm: str = ForecastAlgorithm.linear_regression.value
    horizon_days: int = Field(default_factory=lambda: settings.forecast_default_horizon_days)
    confidence_level: float = Field(default_factory=lambda: settings.forecast_default_confidence_level)
    unit: str = ""
    window_size: Optional[int] = None
    metric: Optional[str] = None
    non_negative: Optional[bool] = None
    include_history: bool = False

    def historical_points(self) -> List[HistoricalPoint]:
        return [HistoricalPoint(date=p.date, value=p.value, unit=p.unit) for p in self.points]

    def to_engine(self) -> ForecastRequest:
        return ForecastRequest(
            historical_points=tuple(self.historical_points()),
            algorithm=self.algorithm,
            horizon_days=self.horizon_days,
            confidence_level=self.confidence_level,
            unit=self.unit,
            window_size=self.window_size,
            metric=self.metric,
            non_negative=self.non_negative,
        )


class BacktestApiRequest(ForecastApiRequest):
    holdout_days: Optional[int] = None
