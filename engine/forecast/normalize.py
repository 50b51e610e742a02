"""
Time series normalization for forecasting, converting dated and possibly irregularly spaced health measurements into an elapsed-days axis suitable for regression, and silently filtering entries with non-finite values or unparseable dates.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Iterable, List, Optional, Tuple

from config import SECONDS_PER_DAY
from engine.errors import InsufficientDataError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoricalPoint:
    date: Any
    value: Any
    unit: str = ""


@dataclass(frozen=True)
class NormalizedSeries:
    xs: Tuple[float, ...]
    ys: Tuple[float, ...]
    dates: Tuple[datetime, ...]
    dropped: int = 0

    @property
    def n(self) -> int:
        return len(self.xs)

    @property
    def x_last(self) -> float:
        return self.xs[-1]

    @property
    def last_date(self) -> datetime:
        return self.dates[-1]


def parse_date(raw: Any) -> Optional[datetime]:
    """Coerce a calendar timestamp into an aware UTC-anchored datetime.

    Accepts ``datetime``, ``date`` and ISO-8601 strings. Naive values are read
    as UTC. Returns ``None`` for anything that cannot be parsed.
    """
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, date):
        parsed = datetime.combine(raw, time())
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_value(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, (bool, str, bytes)):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def normalize(points: Iterable[HistoricalPoint]) -> NormalizedSeries:
    valid: List[Tuple[datetime, float]] = []
    dropped = 0
    for idx, point in enumerate(points):
        when = parse_date(getattr(point, "date", None))
        value = parse_value(getattr(point, "value", None))
        if when is None or value is None:
            log.debug("dropping historical point %d: date=%r value=%r", idx, getattr(point, "date", None), getattr(point, "value", None))
            dropped += 1
            continue
        valid.append((when, value))

    if not valid:
        raise InsufficientDataError(f"no valid historical points ({dropped} dropped)")

    valid.sort(key=lambda pair: pair[0])
    origin = valid[0][0]
    xs = tuple((when - origin).total_seconds() / SECONDS_PER_DAY for when, _ in valid)
    ys = tuple(value for _, value in valid)
    dates = tuple(when for when, _ in valid)

    if dropped:
        log.debug("normalized %d points, dropped %d", len(xs), dropped)

    return NormalizedSeries(xs=xs, ys=ys, dates=dates, dropped=dropped)
