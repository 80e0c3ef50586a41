"""Reporting windows and graph buckets."""

from dataclasses import dataclass
from datetime import date

from app.errors import InvalidWindowError


@dataclass(frozen=True)
class Window:
    """Inclusive date range."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidWindowError(f"Window start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        return (self.end - self.start).days

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class WindowPair:
    """Current window and the equal-length compare window preceding it."""

    current: Window
    compare: Window

    def __post_init__(self):
        if self.current.days != self.compare.days:
            raise InvalidWindowError(
                f"Window durations differ: current={self.current.days}d, compare={self.compare.days}d"
            )
        if self.compare.start > self.current.start:
            raise InvalidWindowError("Compare window must not start after the current window")

    @property
    def days(self) -> int:
        return self.current.days


@dataclass(frozen=True)
class Bucket:
    """Labeled sub-range of a window, used as one graph point."""

    label: str
    start: date
    end: date
