import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.forecast import HistoricalPoint


DAY0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


def daily_points(values, unit="kg", start=DAY0):
    return [
        HistoricalPoint(date=start + timedelta(days=i), value=v, unit=unit)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def make_points():
    return daily_points


# Prevent pytest from attempting to collect any modules inside the engine
# package itself.

def pytest_ignore_collect(collection_path, config):
    if os.path.sep + 'engine' + os.path.sep in str(collection_path):
        return True
