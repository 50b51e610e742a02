"""
Chart series assembly, merging valid historical measurements with forecast predictions into a single date-ordered sequence for the visualization layer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple, Union

from engine.enums import ForecastAlgorithm
from engine.forecast.generator import ForecastFailure, ForecastResult
from engine.forecast.normalize import HistoricalPoint, parse_date, parse_value


@dataclass(frozen=True)
class ChartPoint:
    date: datetime
    value: float
    unit: str
    is_prediction: bool
    algorithm: Optional[ForecastAlgorithm] = None
    confidence_upper: Optional[float] = None
    confidence_lower: Optional[float] = None


def combine(
    historical_points: Iterable[HistoricalPoint],
    outcome: Union[ForecastResult, ForecastFailure],
) -> Tuple[ChartPoint, ...]:
    points: List[ChartPoint] = []
    for point in historical_points:
        when = parse_date(point.date)
        value = parse_value(point.value)
        if when is None or value is None:
            continue
        points.append(ChartPoint(date=when, value=value, unit=point.unit, is_prediction=False))

    if isinstance(outcome, ForecastResult):
        points.extend(
            ChartPoint(
                date=p.date,
                value=p.value,
                unit=p.unit,
                is_prediction=True,
                algorithm=p.algorithm,
                confidence_upper=p.confidence_upper,
                confidence_lower=p.confidence_lower,
            )
            for p in outcome.predictions
        )

    points.sort(key=lambda p: p.date)
    return tuple(points)
