"""Tests for window resolution and graph buckets."""

from datetime import date

import pytest

from app.errors import InvalidWindowError
from app.models import Window, WindowPair
from app.services.keywords import bucket_spec, resolve_window_pair


class TestResolveWindowPair:
    def test_current_ends_today(self):
        pair = resolve_window_pair(30, date(2024, 6, 30))
        assert pair.current == Window(date(2024, 5, 31), date(2024, 6, 30))

    def test_compare_precedes_current(self):
        pair = resolve_window_pair(30, date(2024, 6, 30))
        assert pair.compare == Window(date(2024, 5, 1), date(2024, 5, 31))

    def test_equal_length(self):
        pair = resolve_window_pair(7, date(2024, 1, 3))
        assert pair.current.days == pair.compare.days == pair.days == 7

    def test_non_positive_days(self):
        with pytest.raises(InvalidWindowError):
            resolve_window_pair(0)


class TestWindowPair:
    def test_rejects_unequal_lengths(self):
        with pytest.raises(InvalidWindowError):
            WindowPair(
                current=Window(date(2024, 6, 10), date(2024, 6, 20)),
                compare=Window(date(2024, 6, 1), date(2024, 6, 5)),
            )

    def test_rejects_compare_after_current(self):
        with pytest.raises(InvalidWindowError):
            WindowPair(
                current=Window(date(2024, 6, 1), date(2024, 6, 5)),
                compare=Window(date(2024, 6, 10), date(2024, 6, 14)),
            )

    def test_rejects_inverted_window(self):
        with pytest.raises(InvalidWindowError):
            Window(date(2024, 6, 2), date(2024, 6, 1))

    def test_contains(self):
        window = Window(date(2024, 6, 1), date(2024, 6, 5))
        assert date(2024, 6, 5) in window
        assert date(2024, 6, 6) not in window


class TestBucketSpec:
    def test_daily_buckets_when_window_fits(self):
        buckets = bucket_spec(Window(date(2024, 6, 23), date(2024, 6, 30)), max_buckets=8)
        assert len(buckets) == 8
        assert all(b.start == b.end for b in buckets)

    def test_never_exceeds_max(self):
        window = Window(date(2024, 1, 1), date(2024, 12, 31))
        for max_buckets in (1, 2, 7, 15, 100):
            assert len(bucket_spec(window, max_buckets)) <= max_buckets

    def test_covers_window_without_gaps(self):
        window = Window(date(2024, 6, 23), date(2024, 6, 30))
        buckets = bucket_spec(window, max_buckets=3)
        assert buckets[0].start == window.start
        assert buckets[-1].end == window.end
        for prev, nxt in zip(buckets, buckets[1:]):
            assert (nxt.start - prev.end).days == 1

    def test_labels_are_start_dates(self):
        buckets = bucket_spec(Window(date(2024, 6, 23), date(2024, 6, 30)), max_buckets=3)
        assert [b.label for b in buckets] == ["2024-06-23", "2024-06-26", "2024-06-29"]

    def test_single_day_window(self):
        buckets = bucket_spec(Window(date(2024, 6, 1), date(2024, 6, 1)), max_buckets=15)
        assert len(buckets) == 1

    def test_rejects_zero_buckets(self):
        with pytest.raises(InvalidWindowError):
            bucket_spec(Window(date(2024, 6, 1), date(2024, 6, 2)), max_buckets=0)
