"""Reporting window resolution and graph interval calculation."""

import math
from datetime import date, timedelta

from app.errors import InvalidWindowError
from app.models import Bucket, Window, WindowPair
from settings import GRAPH_BUCKETS


def resolve_window_pair(days: int, today: date | None = None) -> WindowPair:
    """Current window ending today and the equal-length window before it."""
    if days <= 0:
        raise InvalidWindowError(f"Lookback must be positive, got {days}")

    today = today or date.today()
    lookback = timedelta(days=days)
    return WindowPair(
        current=Window(today - lookback, today),
        compare=Window(today - 2 * lookback, today - lookback),
    )


def bucket_spec(window: Window, max_buckets: int = GRAPH_BUCKETS) -> list[Bucket]:
    """Split a window into at most `max_buckets` consecutive day ranges.

    Every bucket spans the same number of days except possibly the last one.
    Buckets are labeled with their ISO start date.
    """
    if max_buckets <= 0:
        raise InvalidWindowError(f"max_buckets must be positive, got {max_buckets}")

    step = timedelta(days=max(1, math.ceil((window.days + 1) / max_buckets)))
    buckets = []
    start = window.start
    while start <= window.end:
        end = min(start + step - timedelta(days=1), window.end)
        buckets.append(Bucket(label=start.isoformat(), start=start, end=end))
        start = end + timedelta(days=1)
    return buckets
