"""
Enumerations for Forecast Algorithms, Forecast Status and Degeneracy Kinds

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from engine.errors import InvalidRequestError


class ForecastAlgorithm(str, Enum):
    linear_regression = "linear-regression"
    moving_average = "moving-average"

    @classmethod
    def parse(cls, value: "ForecastAlgorithm | str") -> ForecastAlgorithm:
        # unknown tags are rejected rather than mapped onto a default
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise InvalidRequestError(f"unknown forecast algorithm: {value!r}")


class ForecastStatus(str, Enum):
    ok = "ok"
    insufficient_data = "insufficient_data"
    invalid_request = "invalid_request"


class DegeneracyKind(str, Enum):
    perfect_fit = "perfect_fit"
    constant_window = "constant_window"
