"""
Confidence interval calculation around point forecasts, using a normal-approximation multiplier by default and an optional Student-t multiplier for small samples.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from scipy import stats

from config import settings
from engine.errors import InvalidRequestError


@dataclass(frozen=True)
class ConfidenceInterval:
    upper: float
    lower: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


def validate_level(confidence_level: float) -> None:
    if not (isinstance(confidence_level, (int, float)) and 0.0 < confidence_level < 1.0):
        raise InvalidRequestError(f"confidence level must lie in (0, 1), got {confidence_level!r}")


def multiplier(confidence_level: float, dof: Optional[int] = None) -> float:
    """Two-sided critical value for ``confidence_level``.

    The normal quantile is rounded to ``confidence_multiplier_precision``
    decimals, so 0.95 maps to 1.96. With ``forecast_use_student_t`` enabled
    and ``dof >= 1`` the Student-t quantile is used instead.
    """
    validate_level(confidence_level)
    q = (1.0 + confidence_level) / 2.0
    if settings.forecast_use_student_t and dof is not None and dof >= 1:
        value = stats.t.ppf(q, dof)
    else:
        value = stats.norm.ppf(q)
    return round(float(value), settings.confidence_multiplier_precision)


def interval(
    estimate: float,
    dispersion: float,
    sample_size: int,
    confidence_level: float,
    dof: Optional[int] = None,
) -> ConfidenceInterval:
    if not math.isfinite(dispersion) or dispersion < 0:
        raise InvalidRequestError(f"dispersion must be a finite non-negative number, got {dispersion!r}")
    if dof is None:
        dof = sample_size - 1
    margin = multiplier(confidence_level, dof) * dispersion
    return ConfidenceInterval(upper=estimate + margin, lower=estimate - margin)
